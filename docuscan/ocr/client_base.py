from abc import ABC, abstractmethod


class BaseOcrClient(ABC):
    """Contract for provider-specific vision model clients."""

    @abstractmethod
    async def create_vision_completion(
        self,
        *,
        model: str,
        instruction: str,
        image_bytes: bytes,
        mime_type: str,
    ) -> str:
        """Return provider response as plain text."""
