import os
import tempfile
from pathlib import Path

from archiver.consolidation.assembler import OutputDocument
from archiver.consolidation.exceptions import WriteError
from archiver.logging.logger import Log


class PdfFileWriter:
    """Serializes the merged document and persists it atomically."""

    def write(self, document: OutputDocument, output_path: str | Path) -> Path:
        """Write ``document`` to ``output_path``, replacing any existing file.

        Missing parent directories are created. The bytes go to a temporary
        sibling first and are moved into place with ``os.replace``.

        Raises:
            WriteError: if the document cannot be serialized.
            OSError: filesystem failures, unchanged.
        """
        path = Path(output_path)
        Log.info("Serializing the merged PDF document")
        try:
            data = document.to_bytes()
        except Exception as exc:
            raise WriteError(f"Failed to serialize merged PDF: {exc}") from exc

        if not path.parent.exists():
            Log.info(f"Creating output directory: {path.parent}")
            path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        Log.info(f"Saved merged PDF ({len(data)} bytes) to {path}")
        return path
