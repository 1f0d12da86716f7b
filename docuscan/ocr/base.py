from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all text extraction services."""

    @abstractmethod
    async def extract(self, image_bytes: bytes, mime_type: str) -> str:
        """Extract the text shown in a document image.

        Args:
            image_bytes: Raw image file content.
            mime_type: Media type of the image, e.g. "image/png".

        Returns:
            Extracted text, formatting preserved as far as the provider allows.

        Raises:
            OcrError: on any failure.
        """
