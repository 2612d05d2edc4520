from typing import Any, ClassVar

from ideanest.config.settings import Settings
from ideanest.evaluation.base import BaseEvaluator
from ideanest.evaluation.evaluator import IdeaEvaluator
from ideanest.evaluation.example_client_adapter import ExampleClientAdapter
from ideanest.evaluation.openai_client_adapter import OpenAIClientAdapter


class EvaluatorFactory:
    """Creates the configured evaluator adapter."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseEvaluator:
        """Create a configured evaluator from application settings."""
        provider = settings.evaluation_provider.lower()
        if provider == "example":
            return IdeaEvaluator(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        client = OpenAIClientAdapter(
            api_key=cls._provider_setting(provider, "api_key", settings) or "",
            timeout_seconds=cls._provider_setting(provider, "timeout_seconds", settings) or 60,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return IdeaEvaluator(
            client=client,
            model=cls._provider_setting(provider, "model_name", settings) or "",
            temperature=settings.evaluation_temperature,
            max_tokens=settings.evaluation_max_output_tokens,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.evaluation_openai_compatible_base_url or "").strip()
            if not url:
                raise ValueError(
                    "evaluation_openai_compatible_base_url is required for "
                    "evaluation_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown evaluation provider '{provider}'. "
            f"Choose from: {cls.supported_providers()}"
        )

    @staticmethod
    def _provider_setting(provider: str, name: str, settings: Settings) -> Any:
        return getattr(settings, f"evaluation_{provider}_{name}", None)
