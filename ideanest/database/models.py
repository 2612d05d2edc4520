from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class HistoryEntry:
    """Represents a row from the idea_evaluations table."""

    id: str
    user_id: str
    idea_title: str
    idea_description: str
    evaluation_data: dict[str, Any]
    created_at: datetime | None = None
