from pathlib import Path

from archiver.ocr.exceptions import OcrError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the OCR prompt template.

    The template has two placeholders: ``{current_date}`` and
    ``{excluded_titles}``.

    Raises:
        OcrError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "ocr_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise OcrError(f"Failed to load prompt template: {exc}") from exc


def render_prompt(template: str, *, current_date: str, excluded_titles: list[str]) -> str:
    listing = "\n".join(f"    * {title}" for title in excluded_titles) or "    * (none)"
    return template.format(current_date=current_date, excluded_titles=listing)
