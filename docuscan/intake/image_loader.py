import mimetypes
from collections.abc import Iterable
from pathlib import Path

from docuscan.documents.models import NewDocumentInput
from docuscan.intake.exceptions import (
    ImageTooLargeError,
    IntakeError,
    UnsupportedImageTypeError,
)
from docuscan.logging.logger import Log


def guess_image_type(path: Path) -> str | None:
    """Media type for ``path`` if it names an image, otherwise None."""
    mime_type, _ = mimetypes.guess_type(path.name)
    if mime_type is None or not mime_type.startswith("image/"):
        return None
    return mime_type


class ImageLoader:
    """Reads image files from disk into documents ready to be added."""

    def __init__(self, max_image_bytes: int) -> None:
        self._max_image_bytes = max_image_bytes

    def load(self, path: Path) -> NewDocumentInput:
        """Read one image file.

        Raises:
            UnsupportedImageTypeError: if the extension does not map to an image type.
            FileNotFoundError: if the file does not exist.
            ImageTooLargeError: if the file exceeds the configured limit.
        """
        mime_type = guess_image_type(path)
        if mime_type is None:
            raise UnsupportedImageTypeError(f"{path} is not a supported image file")
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        size = path.stat().st_size
        if size > self._max_image_bytes:
            raise ImageTooLargeError(
                f"{path} is {size} bytes, limit is {self._max_image_bytes}"
            )
        return NewDocumentInput(image_bytes=path.read_bytes(), mime_type=mime_type)

    def load_many(self, paths: Iterable[Path]) -> list[NewDocumentInput]:
        """Read every image among ``paths``.

        Non-image files are skipped, and so are images that cannot be read or
        exceed the size limit; the rest of the batch is still loaded.
        """
        loaded: list[NewDocumentInput] = []
        for path in paths:
            if guess_image_type(path) is None:
                Log.warning(f"Skipping {path}: not an image")
                continue
            try:
                loaded.append(self.load(path))
            except (IntakeError, OSError) as exc:
                Log.error(f"Skipping {path}: {exc}")
        return loaded
