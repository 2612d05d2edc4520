"""AI-powered startup idea evaluator."""

from pathlib import Path

from ideanest.evaluation.base import BaseEvaluator
from ideanest.evaluation.client_base import BaseEvaluationClient
from ideanest.evaluation.exceptions import EvaluationError, EvaluationResponseError
from ideanest.evaluation.models import EvaluationRecord, NormalizationOutcome
from ideanest.evaluation.prompt_loader import (
    load_prompt_template,
    load_response_example,
    load_system_prompt,
)
from ideanest.evaluation.response_normalizer import ResponseNormalizer
from ideanest.logging.logger import Log

_PREVIEW_CHARS = 500


class IdeaEvaluator(BaseEvaluator):
    """Evaluates startup ideas with an AI provider and normalizes the report."""

    def __init__(
        self,
        *,
        client: BaseEvaluationClient,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 16384,
        normalizer: ResponseNormalizer | None = None,
        prompt_template_path: Path | None = None,
        response_example_path: Path | None = None,
        system_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._max_tokens = max_tokens
        self._normalizer = normalizer or ResponseNormalizer()
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._response_example = load_response_example(response_example_path)
        self._system_prompt = load_system_prompt(system_prompt_path)

    def evaluate(self, idea_title: str, idea_description: str) -> EvaluationRecord:
        """Turn a startup idea into a validated VC evaluation report."""
        prompt = self._build_prompt(idea_title, idea_description)
        Log.debug(f"Evaluation prompt:\n{prompt}")

        raw_response = self._call_ai(prompt)
        if not raw_response.strip():
            raise EvaluationError("AI returned empty response")
        Log.debug(
            f"AI raw response: {len(raw_response)} chars, "
            f"starts with: {raw_response[:_PREVIEW_CHARS]}"
        )

        outcome = self._normalizer.normalize(raw_response)
        self._replay_events(outcome)
        if not isinstance(outcome, EvaluationRecord):
            Log.error(
                f"Could not normalize AI response ({outcome.stage.value}): {outcome.message}",
                stage=outcome.stage.value,
            )
            Log.debug(f"Unusable AI response tail: {raw_response[-_PREVIEW_CHARS:]}")
            raise EvaluationResponseError(outcome)

        scores = outcome.scores
        Log.info(
            f"Evaluation complete ({outcome.recovered_by}): "
            f"innovation={scores.innovation} feasibility={scores.feasibility} "
            f"scalability={scores.scalability}"
        )
        return outcome

    def _build_prompt(self, idea_title: str, idea_description: str) -> str:
        return self._prompt_template.format(
            idea_title=idea_title,
            idea_description=idea_description,
            response_example=self._response_example,
        )

    def _call_ai(self, prompt: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )

    @staticmethod
    def _replay_events(outcome: NormalizationOutcome) -> None:
        for event in outcome.events:
            Log.log(event.level, f"[{event.stage}] {event.message}")
