import httpx
import openai

from ideanest.evaluation.client_base import BaseEvaluationClient
from ideanest.evaluation.exceptions import EvaluationError, EvaluationNetworkError


class OpenAIClientAdapter(BaseEvaluationClient):
    """Evaluation AI client adapter built on OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        messages = [{"role": "user", "content": user_prompt}]
        if system_prompt:
            messages.insert(0, {"role": "system", "content": system_prompt})
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                response_format={"type": "json_object"},
                messages=messages,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise EvaluationNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise EvaluationNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise EvaluationError("AI returned no choices")
        choice = response.choices[0]
        content = choice.message.content
        if content is None:
            raise EvaluationError(
                f"AI returned empty response (finish_reason={choice.finish_reason})"
            )
        return content
