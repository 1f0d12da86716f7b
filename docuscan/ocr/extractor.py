"""AI-powered document text extractor."""

from pathlib import Path

from docuscan.logging.logger import Log
from docuscan.ocr.base import BaseTextExtractor
from docuscan.ocr.client_base import BaseOcrClient
from docuscan.ocr.exceptions import OcrError
from docuscan.ocr.prompt_loader import load_instruction


class TextExtractor(BaseTextExtractor):
    """Extracts text from document images using a vision-capable AI provider."""

    def __init__(
        self,
        *,
        client: BaseOcrClient,
        model: str,
        instruction_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._instruction = load_instruction(instruction_path)

    async def extract(self, image_bytes: bytes, mime_type: str) -> str:
        if not mime_type.startswith("image/"):
            raise OcrError(f"Unsupported media type '{mime_type}', expected an image")
        if not image_bytes:
            raise OcrError("Image is empty")

        Log.debug(f"Sending {len(image_bytes)} bytes ({mime_type}) to model {self._model}")
        text = await self._client.create_vision_completion(
            model=self._model,
            instruction=self._instruction,
            image_bytes=image_bytes,
            mime_type=mime_type,
        )
        Log.info(f"Extraction complete: {len(text)} chars")
        return text
