import uuid
from typing import Any

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from ideanest.database.connection import get_connection
from ideanest.database.models import HistoryEntry

_COLUMNS = "id, user_id, idea_title, idea_description, evaluation_data, created_at"


class HistoryRepository:
    """Database operations for the idea_evaluations table."""

    def save(
        self,
        user_id: str,
        idea_title: str,
        idea_description: str,
        evaluation_data: dict[str, Any],
    ) -> str:
        """Store an evaluation and return its generated ID."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO idea_evaluations
                        (user_id, idea_title, idea_description, evaluation_data)
                    VALUES (%s, %s, %s, %s)
                    RETURNING id
                    """,
                    (user_id, idea_title, idea_description, Jsonb(evaluation_data)),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError("INSERT into idea_evaluations returned no id")
        return str(row[0])

    def find_by_id(self, evaluation_id: str) -> HistoryEntry | None:
        """Find an evaluation by ID. Malformed IDs are treated as not found."""
        if not _is_uuid(evaluation_id):
            return None
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM idea_evaluations WHERE id = %s",
                    (evaluation_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return _to_entry(row)

    def find_by_user(self, user_id: str) -> list[HistoryEntry]:
        """Return all evaluations owned by a user, newest first."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    SELECT {_COLUMNS}
                    FROM idea_evaluations
                    WHERE user_id = %s
                    ORDER BY created_at DESC, id
                    """,
                    (user_id,),
                )
                rows = cur.fetchall()

        return [_to_entry(row) for row in rows]

    def delete(self, evaluation_id: str) -> bool:
        """Delete an evaluation. Returns False when nothing was deleted."""
        if not _is_uuid(evaluation_id):
            return False
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "DELETE FROM idea_evaluations WHERE id = %s",
                    (evaluation_id,),
                )
                deleted = cur.rowcount > 0
            conn.commit()
        return deleted


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except (TypeError, ValueError):
        return False
    return True


def _to_entry(row: dict[str, Any]) -> HistoryEntry:
    return HistoryEntry(
        id=str(row["id"]),
        user_id=row["user_id"],
        idea_title=row["idea_title"],
        idea_description=row["idea_description"],
        evaluation_data=row["evaluation_data"],
        created_at=row["created_at"],
    )
