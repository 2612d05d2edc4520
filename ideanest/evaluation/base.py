from abc import ABC, abstractmethod

from ideanest.evaluation.models import EvaluationRecord


class BaseEvaluator(ABC):
    """Contract for all idea evaluators."""

    @abstractmethod
    def evaluate(self, idea_title: str, idea_description: str) -> EvaluationRecord:
        """Turn a startup idea into a validated VC evaluation report.

        Args:
            idea_title: Short name of the idea.
            idea_description: Free-text description submitted by the user.

        Returns:
            EvaluationRecord holding the parsed report.

        Raises:
            EvaluationError: on any failure.
        """
