from collections.abc import Mapping

from archiver.consolidation.dispatcher import detect_format
from archiver.consolidation.exceptions import InvalidInputError
from archiver.consolidation.models import InputFile
from archiver.logging.logger import Log


def validate_files(raw: object) -> list[InputFile]:
    """Turn the task's raw file list into well-formed InputFile entries.

    Entries without a non-empty string ``fileName`` and ``fileData`` are
    dropped with a warning. Positions refer to the raw list.

    Raises:
        InvalidInputError: if ``raw`` is not a list or is empty.
    """
    if not isinstance(raw, (list, tuple)):
        raise InvalidInputError(
            f"Input files must be a non-empty list, got {type(raw).__name__}"
        )
    if not raw:
        raise InvalidInputError("Input files must be a non-empty list, got an empty list")

    valid: list[InputFile] = []
    for position, entry in enumerate(raw):
        if not isinstance(entry, Mapping):
            Log.warning(f"Skipping invalid file entry at index {position}: not an object")
            continue
        name = entry.get("fileName")
        payload = entry.get("fileData")
        if not isinstance(name, str) or not name:
            Log.warning(f"Skipping invalid file entry at index {position}: missing fileName")
            continue
        if not isinstance(payload, str) or not payload:
            Log.warning(
                f"Skipping invalid file entry at index {position} ({name}): missing fileData"
            )
            continue
        valid.append(
            InputFile(
                position=position,
                name=name,
                payload=payload,
                format=detect_format(name),
            )
        )
    return valid
