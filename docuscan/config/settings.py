from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    max_image_bytes: int = 20 * 1024 * 1024
    export_dir: str = "."

    ocr_provider: str = "openai"

    ocr_openai_api_key: str = ""
    ocr_openai_model_name: str = "gpt-4o-mini"
    ocr_openai_timeout_seconds: int = 60

    ocr_openai_compatible_api_key: str = ""
    ocr_openai_compatible_model_name: str = ""
    ocr_openai_compatible_base_url: str = ""
    ocr_openai_compatible_timeout_seconds: int = 60

    ocr_gemini_api_key: str = ""
    ocr_gemini_model_name: str = "gemini-2.5-flash"
    ocr_gemini_timeout_seconds: int = 60

    ocr_openrouter_api_key: str = ""
    ocr_openrouter_model_name: str = ""
    ocr_openrouter_timeout_seconds: int = 60

    ocr_groq_api_key: str = ""
    ocr_groq_model_name: str = ""
    ocr_groq_timeout_seconds: int = 60

    ocr_together_api_key: str = ""
    ocr_together_model_name: str = ""
    ocr_together_timeout_seconds: int = 60

    ocr_ollama_api_key: str = "ollama"
    ocr_ollama_model_name: str = "llava"
    ocr_ollama_timeout_seconds: int = 120
