from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    extraction_provider: str = "openai"
    extraction_temperature: float = 0.0
    max_concurrent_extractions: int = 0

    extraction_openai_api_key: str = ""
    extraction_openai_model_name: str = "gpt-4o"
    extraction_openai_timeout_seconds: int = 120

    extraction_openai_compatible_api_key: str = ""
    extraction_openai_compatible_model_name: str = ""
    extraction_openai_compatible_base_url: str = ""
    extraction_openai_compatible_timeout_seconds: int = 120

    extraction_gemini_api_key: str = ""
    extraction_gemini_model_name: str = "gemini-3-flash-preview"
    extraction_gemini_timeout_seconds: int = 120

    extraction_openrouter_api_key: str = ""
    extraction_openrouter_model_name: str = ""
    extraction_openrouter_timeout_seconds: int = 120

    extraction_groq_api_key: str = ""
    extraction_groq_model_name: str = ""
    extraction_groq_timeout_seconds: int = 120

    extraction_together_api_key: str = ""
    extraction_together_model_name: str = ""
    extraction_together_timeout_seconds: int = 120

    extraction_ollama_api_key: str = "ollama"
    extraction_ollama_model_name: str = ""
    extraction_ollama_timeout_seconds: int = 300
