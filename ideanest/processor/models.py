from dataclasses import dataclass

from ideanest.evaluation.models import EvaluationRecord


@dataclass(frozen=True)
class IdeaSubmission:
    """An idea as submitted by a user."""

    idea_title: str
    idea_description: str
    user_id: str | None = None


@dataclass(frozen=True)
class ProcessedIdea:
    """Result of processing one submission."""

    record: EvaluationRecord
    evaluation_id: str | None = None
