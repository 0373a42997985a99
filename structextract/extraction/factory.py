from typing import ClassVar

from structextract.config.exceptions import ConfigurationError
from structextract.config.settings import Settings
from structextract.extraction.base import BaseExtractor
from structextract.extraction.example_client_adapter import ExampleClientAdapter
from structextract.extraction.extractor import Extractor
from structextract.extraction.openai_client_adapter import OpenAIClientAdapter


class ExtractorFactory:
    """Creates the configured extractor, failing fast on bad configuration."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})

    @classmethod
    def create(cls, settings: Settings) -> BaseExtractor:
        """Create a configured extractor from application settings.

        Raises:
            ConfigurationError: on an unknown provider, a missing API key,
                model name, or base URL.
        """
        provider = settings.extraction_provider.lower()
        if provider == "example":
            return Extractor(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        base_url = cls._resolve_base_url(provider, settings)
        client = OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=int(cls._provider_setting(provider, settings, "timeout_seconds") or 120),
            base_url=base_url,
        )
        return Extractor(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.extraction_temperature,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.extraction_openai_compatible_base_url.strip()
            if not url:
                raise ConfigurationError(
                    "EXTRACTION_OPENAI_COMPATIBLE_BASE_URL is required for "
                    "extraction_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ConfigurationError(
            f"Unknown extraction provider '{provider}'. "
            f"Choose from: {cls.supported_providers()}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key = (cls._provider_setting(provider, settings, "api_key") or "").strip()
        if not key and provider not in cls.KEYLESS_PROVIDERS:
            raise ConfigurationError(
                f"EXTRACTION_{provider.upper()}_API_KEY is not set"
            )
        return key

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        model = (cls._provider_setting(provider, settings, "model_name") or "").strip()
        if not model:
            raise ConfigurationError(
                f"EXTRACTION_{provider.upper()}_MODEL_NAME is not set"
            )
        return model

    @staticmethod
    def _provider_setting(provider: str, settings: Settings, name: str) -> object:
        return getattr(settings, f"extraction_{provider}_{name}")
