"""Integration tests for the evaluation pipeline.

Uses a mock AI client to run prompt building, normalization and the
processor together without real API calls.
"""

import json
from typing import Any
from unittest.mock import MagicMock

import pytest

from ideanest.database.repositories.history_repository import HistoryRepository
from ideanest.evaluation.evaluator import IdeaEvaluator
from ideanest.evaluation.exceptions import EvaluationResponseError
from ideanest.evaluation.models import FailureStage
from ideanest.processor.models import IdeaSubmission
from ideanest.processor.processor import IdeaProcessor


def _make_evaluator(response_content: str) -> IdeaEvaluator:
    """Create an IdeaEvaluator with a mocked AI client returning fixed content."""
    client = MagicMock()
    client.create_chat_completion.return_value = response_content
    return IdeaEvaluator(client=client, model="test-model")


class TestFullEvaluationPipeline:
    def test_fenced_response_with_prose(self, evaluation_payload: dict[str, Any]) -> None:
        raw = "Here is my analysis.\n```json\n" + json.dumps(evaluation_payload) + "\n```"
        record = _make_evaluator(raw).evaluate("Leftovers", "An app for leftovers")
        assert record.data == evaluation_payload
        assert record.scores.scalability == 7.2

    def test_truncated_response_is_repaired(self, evaluation_payload: dict[str, Any]) -> None:
        evaluation_payload["marketStrategy"] = {"channels": [{"name": "campus"}, {"name": "cafes"}]}
        full = json.dumps(evaluation_payload)
        cut = full[: full.index('"cafes"') + 3]
        record = _make_evaluator(cut).evaluate("t", "d")
        assert record.recovered_by == "repaired"
        assert record.data["marketStrategy"] == {"channels": [{"name": "campus"}]}

    def test_incomplete_response_fails_validation(
        self, evaluation_payload: dict[str, Any]
    ) -> None:
        del evaluation_payload["businessModel"]
        with pytest.raises(EvaluationResponseError) as exc_info:
            _make_evaluator(json.dumps(evaluation_payload)).evaluate("t", "d")
        assert exc_info.value.stage is FailureStage.VALIDATION
        assert "businessModel" in str(exc_info.value)

    def test_garbage_response_fails_parsing(self) -> None:
        with pytest.raises(EvaluationResponseError) as exc_info:
            _make_evaluator("{ this is :: not json }").evaluate("t", "d")
        assert exc_info.value.stage is FailureStage.PARSE


@pytest.mark.integration
def test_processor_persists_evaluation(
    user_id: str, evaluation_payload: dict[str, Any], long_description: str
) -> None:
    repo = HistoryRepository()
    processor = IdeaProcessor(_make_evaluator(json.dumps(evaluation_payload)), repo)

    result = processor.process(
        IdeaSubmission(idea_title="Leftovers", idea_description=long_description, user_id=user_id)
    )

    assert result.evaluation_id is not None
    stored = processor.get_evaluation(result.evaluation_id)
    assert stored.evaluation_data == evaluation_payload
    assert [e.id for e in processor.get_history(user_id)] == [result.evaluation_id]
    processor.delete_evaluation(result.evaluation_id)
    assert processor.get_history(user_id) == []
