from typing import ClassVar

from app.analysis.analyzer import Analyzer
from app.analysis.base import BaseAnalyzer
from app.analysis.example_client_adapter import ExampleClientAdapter
from app.analysis.openai_client_adapter import OpenAIClientAdapter
from app.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured analyzer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        """Create a configured analyzer from application settings."""
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return Analyzer(client=ExampleClientAdapter(), model="example")
        client = OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=cls._resolve_base_url(provider, settings),
        )
        return Analyzer(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.analysis_temperature,
            max_tokens=settings.analysis_max_tokens,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.analysis_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "analysis_openai_compatible_base_url is required for "
                    "analysis_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]
        raise ValueError(f"Unknown analysis provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.analysis_openai_api_key,
            "openai_compatible": settings.analysis_openai_compatible_api_key,
            "openrouter": settings.analysis_openrouter_api_key,
            "groq": settings.analysis_groq_api_key,
            "ollama": settings.analysis_ollama_api_key,
        }
        return key_map.get(provider, "")

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.analysis_openai_model_name,
            "openai_compatible": settings.analysis_openai_compatible_model_name,
            "openrouter": settings.analysis_openrouter_model_name,
            "groq": settings.analysis_groq_model_name,
            "ollama": settings.analysis_ollama_model_name,
        }
        return key_map.get(provider, "")

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        if provider == "openai_compatible":
            return settings.analysis_openai_compatible_timeout_seconds
        return settings.analysis_openai_timeout_seconds
