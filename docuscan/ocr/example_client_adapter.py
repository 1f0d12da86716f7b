"""Example OCR client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseOcrClient and register the provider in TextExtractorFactory.
"""

from typing import ClassVar

from docuscan.ocr.client_base import BaseOcrClient


class ExampleClientAdapter(BaseOcrClient):
    """Example adapter that returns a fixed text for every image.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    DEFAULT_TEXT: ClassVar[str] = "EXAMPLE DOCUMENT\nNo text extraction provider configured."

    def __init__(self, text: str | None = None) -> None:
        self._text = self.DEFAULT_TEXT if text is None else text

    async def create_vision_completion(
        self,
        *,
        model: str,
        instruction: str,
        image_bytes: bytes,
        mime_type: str,
    ) -> str:
        _ = model, instruction, image_bytes, mime_type
        return self._text
