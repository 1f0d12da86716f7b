from pathlib import Path

from docuscan.ocr.exceptions import OcrError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_instruction(path: Path | None = None) -> str:
    """Load the extraction instruction sent alongside every image.

    Args:
        path: Path to the instruction file.
              Defaults to the bundled ocr_prompt.txt.

    Returns:
        The instruction text without surrounding whitespace.

    Raises:
        OcrError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "ocr_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise OcrError(f"Failed to load OCR instruction: {exc}") from exc
