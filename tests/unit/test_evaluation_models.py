from typing import Any

import pytest

from ideanest.evaluation.exceptions import EvaluationError, EvaluationResponseError
from ideanest.evaluation.models import (
    EvaluationRecord,
    ExtractionFailure,
    FailureStage,
    NormalizationEvent,
    ParseFailure,
    Scores,
    ValidationFailure,
)


class TestEvaluationRecord:
    def test_scores_view(self, evaluation_payload: dict[str, Any]) -> None:
        record = EvaluationRecord(data=evaluation_payload)
        assert record.scores == Scores(innovation=6.5, feasibility=8, scalability=7.2)

    def test_defaults(self, evaluation_payload: dict[str, Any]) -> None:
        record = EvaluationRecord(data=evaluation_payload)
        assert record.recovered_by == "direct"
        assert record.events == ()

    def test_is_frozen(self, evaluation_payload: dict[str, Any]) -> None:
        record = EvaluationRecord(data=evaluation_payload)
        with pytest.raises(AttributeError):
            record.recovered_by = "repaired"  # type: ignore[misc]


class TestFailures:
    def test_stage_per_failure_kind(self) -> None:
        assert ExtractionFailure(message="m").stage is FailureStage.EXTRACTION
        assert ParseFailure(message="m").stage is FailureStage.PARSE
        assert ValidationFailure(message="m").stage is FailureStage.VALIDATION

    def test_stage_values(self) -> None:
        assert [s.value for s in FailureStage] == ["extraction", "parse", "validation"]

    def test_failure_carries_details(self) -> None:
        event = NormalizationEvent(stage="validation", level="warning", message="boom")
        failure = ValidationFailure(
            message="Missing required fields: scores.feasibility",
            missing_fields=("scores.feasibility",),
            events=(event,),
        )
        assert failure.missing_fields == ("scores.feasibility",)
        assert failure.invalid_fields == ()
        assert failure.events[0].message == "boom"


class TestEvaluationResponseError:
    def test_wraps_failure(self) -> None:
        failure = ParseFailure(message="Failed to parse AI response: x", parser_error="x")
        exc = EvaluationResponseError(failure)
        assert isinstance(exc, EvaluationError)
        assert exc.failure is failure
        assert exc.stage is FailureStage.PARSE
        assert str(exc) == "parse failure: Failed to parse AI response: x"
