from typing import ClassVar

from docuscan.config.settings import Settings
from docuscan.ocr.base import BaseTextExtractor
from docuscan.ocr.example_client_adapter import ExampleClientAdapter
from docuscan.ocr.extractor import TextExtractor
from docuscan.ocr.openai_client_adapter import OpenAIClientAdapter


class TextExtractorFactory:
    """Creates the configured text extraction service."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextExtractor:
        """Create a configured extractor from application settings."""
        provider = settings.ocr_provider.lower()
        if provider == "example":
            return TextExtractor(client=ExampleClientAdapter(), model="example")
        client = OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=cls._resolve_base_url(provider, settings),
        )
        return TextExtractor(
            client=client,
            model=cls._resolve_model_name(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.ocr_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "ocr_openai_compatible_base_url is required for "
                    "ocr_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown OCR provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.ocr_openai_api_key,
            "openai_compatible": settings.ocr_openai_compatible_api_key,
            "gemini": settings.ocr_gemini_api_key,
            "openrouter": settings.ocr_openrouter_api_key,
            "groq": settings.ocr_groq_api_key,
            "together": settings.ocr_together_api_key,
            "ollama": settings.ocr_ollama_api_key,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.ocr_openai_model_name,
            "openai_compatible": settings.ocr_openai_compatible_model_name,
            "gemini": settings.ocr_gemini_model_name,
            "openrouter": settings.ocr_openrouter_model_name,
            "groq": settings.ocr_groq_model_name,
            "together": settings.ocr_together_model_name,
            "ollama": settings.ocr_ollama_model_name,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        key_map = {
            "openai": settings.ocr_openai_timeout_seconds,
            "openai_compatible": settings.ocr_openai_compatible_timeout_seconds,
            "gemini": settings.ocr_gemini_timeout_seconds,
            "openrouter": settings.ocr_openrouter_timeout_seconds,
            "groq": settings.ocr_groq_timeout_seconds,
            "together": settings.ocr_together_timeout_seconds,
            "ollama": settings.ocr_ollama_timeout_seconds,
        }
        return key_map.get(provider, 60) or 60
