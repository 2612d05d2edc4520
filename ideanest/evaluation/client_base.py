from abc import ABC, abstractmethod


class BaseEvaluationClient(ABC):
    """Contract for provider-specific evaluation AI clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return provider response as plain text."""
