from ideanest.config.settings import Settings
from ideanest.database.models import HistoryEntry
from ideanest.database.repositories.history_repository import HistoryRepository
from ideanest.evaluation.base import BaseEvaluator
from ideanest.evaluation.factory import EvaluatorFactory
from ideanest.logging.logger import Log
from ideanest.processor.exceptions import EvaluationNotFoundError, SubmissionValidationError
from ideanest.processor.models import IdeaSubmission, ProcessedIdea


class IdeaProcessor:
    """Orchestrates idea submissions and the evaluation history.

    Pipeline: validate -> evaluate -> persist (only when an owner is known).
    """

    def __init__(
        self,
        evaluator: BaseEvaluator,
        history_repo: HistoryRepository,
        min_description_length: int = 150,
    ) -> None:
        self._evaluator = evaluator
        self._history_repo = history_repo
        self._min_description_length = min_description_length

    def process(self, submission: IdeaSubmission) -> ProcessedIdea:
        """Validate, evaluate and store a submitted idea."""
        self._validate(submission)
        Log.info(
            f"Evaluating idea '{submission.idea_title}' "
            f"({len(submission.idea_description)} chars)"
        )

        record = self._evaluator.evaluate(
            submission.idea_title, submission.idea_description
        )

        if not submission.user_id:
            return ProcessedIdea(record=record)

        evaluation_id = self._history_repo.save(
            submission.user_id,
            submission.idea_title,
            submission.idea_description,
            record.data,
        )
        Log.info(f"Saved evaluation {evaluation_id} for user {submission.user_id}")
        return ProcessedIdea(record=record, evaluation_id=evaluation_id)

    def get_history(self, user_id: str) -> list[HistoryEntry]:
        """Return the user's evaluations, newest first."""
        entries = self._history_repo.find_by_user(user_id)
        Log.info(f"Retrieved {len(entries)} history entries for user {user_id}")
        return entries

    def get_evaluation(self, evaluation_id: str) -> HistoryEntry:
        """Return a stored evaluation.

        Raises:
            EvaluationNotFoundError: if no evaluation with this ID exists.
        """
        entry = self._history_repo.find_by_id(evaluation_id)
        if entry is None:
            raise EvaluationNotFoundError(f"Evaluation {evaluation_id} not found")
        return entry

    def delete_evaluation(self, evaluation_id: str) -> None:
        """Delete a stored evaluation.

        Raises:
            EvaluationNotFoundError: if no evaluation with this ID exists.
        """
        if not self._history_repo.delete(evaluation_id):
            raise EvaluationNotFoundError(f"Evaluation {evaluation_id} not found")
        Log.info(f"Deleted evaluation {evaluation_id}")

    def _validate(self, submission: IdeaSubmission) -> None:
        if not submission.idea_title.strip() or not submission.idea_description.strip():
            raise SubmissionValidationError("Missing ideaTitle or ideaDescription")
        length = len(submission.idea_description)
        if length < self._min_description_length:
            raise SubmissionValidationError(
                f"Idea description must be at least {self._min_description_length} "
                f"characters. Current: {length}"
            )


def build_processor(settings: Settings) -> IdeaProcessor:
    """Build an IdeaProcessor with all required adapters."""
    return IdeaProcessor(
        evaluator=EvaluatorFactory.create(settings),
        history_repo=HistoryRepository(),
        min_description_length=settings.min_description_length,
    )
