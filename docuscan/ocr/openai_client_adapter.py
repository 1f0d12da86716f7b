import base64

import httpx
import openai

from docuscan.ocr.client_base import BaseOcrClient
from docuscan.ocr.exceptions import OcrError, OcrNetworkError


class OpenAIClientAdapter(BaseOcrClient):
    """OCR client adapter built on the OpenAI-compatible chat API with image input."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    async def create_vision_completion(
        self,
        *,
        model: str,
        instruction: str,
        image_bytes: bytes,
        mime_type: str,
    ) -> str:
        encoded = base64.b64encode(image_bytes).decode("ascii")
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=0.0,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {
                                "type": "image_url",
                                "image_url": {"url": f"data:{mime_type};base64,{encoded}"},
                            },
                            {"type": "text", "text": instruction},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise OcrNetworkError(f"OCR provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise OcrNetworkError(f"OCR provider API error: {exc}") from exc

        if not response.choices:
            raise OcrError("OCR provider returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise OcrError("OCR provider returned empty response")
        return content
