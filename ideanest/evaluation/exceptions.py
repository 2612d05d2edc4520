from ideanest.evaluation.models import FailureStage, NormalizationFailure


class EvaluationError(Exception):
    """Raised when an idea could not be evaluated."""


class EvaluationNetworkError(EvaluationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class EvaluationResponseError(EvaluationError):
    """Raised when the AI completion could not be normalized into a report."""

    def __init__(self, failure: NormalizationFailure) -> None:
        super().__init__(f"{failure.stage.value} failure: {failure.message}")
        self.failure = failure

    @property
    def stage(self) -> FailureStage:
        return self.failure.stage
