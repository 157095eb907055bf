from typing import ClassVar

from paper_planner.config.settings import Settings
from paper_planner.gateway.base import BaseLlmGateway
from paper_planner.gateway.example_client_adapter import ExampleGatewayAdapter
from paper_planner.gateway.openai_client_adapter import OpenAIGatewayAdapter


class GatewayFactory:
    """Creates the configured LLM gateway."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})

    @classmethod
    def create(cls, settings: Settings) -> BaseLlmGateway:
        """Create a gateway from application settings."""
        provider = settings.llm_provider.lower()
        if provider == "example":
            return ExampleGatewayAdapter()
        return OpenAIGatewayAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            model=settings.llm_model_name,
            timeout_seconds=settings.llm_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key = settings.llm_api_key.strip()
        if not key and provider in cls.KEYLESS_PROVIDERS:
            # Local servers ignore the key, but the SDK requires a non-empty one.
            return provider
        return key

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        custom = settings.llm_base_url.strip()
        if provider == "openai":
            return custom or None
        if provider == "openai_compatible":
            if not custom:
                raise ValueError(
                    "llm_base_url is required for llm_provider=openai_compatible"
                )
            return custom
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return custom or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown LLM provider '{provider}'. Choose from: {supported}")
