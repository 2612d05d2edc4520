from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from flask import Blueprint, jsonify, request

from ideanest.database.models import HistoryEntry
from ideanest.evaluation.exceptions import EvaluationError
from ideanest.logging.logger import Log
from ideanest.processor.exceptions import EvaluationNotFoundError, SubmissionValidationError
from ideanest.processor.models import IdeaSubmission
from ideanest.processor.processor import IdeaProcessor

EVALUATION_FAILED_MESSAGE = "Could not generate evaluation, please retry."


def _error(message: str, status: int) -> tuple[Any, int]:
    return jsonify({"success": False, "error": message}), status


def _entry_to_json(entry: HistoryEntry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "userId": entry.user_id,
        "ideaTitle": entry.idea_title,
        "ideaDescription": entry.idea_description,
        "evaluationData": entry.evaluation_data,
        "createdAt": entry.created_at.isoformat() if entry.created_at else None,
    }


def _submission_from(body: dict[str, Any]) -> IdeaSubmission:
    title = body.get("ideaTitle")
    description = body.get("ideaDescription")
    user_id = body.get("userId")
    if not isinstance(title, str) or not isinstance(description, str):
        raise SubmissionValidationError("Missing ideaTitle or ideaDescription")
    if user_id is not None and not isinstance(user_id, str):
        raise SubmissionValidationError("userId must be a string")
    return IdeaSubmission(idea_title=title, idea_description=description, user_id=user_id)


def create_blueprint(processor: IdeaProcessor) -> Blueprint:
    bp = Blueprint("api", __name__)

    @bp.get("/health")
    def health():
        return jsonify(
            {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
        )

    @bp.post("/evaluate")
    def evaluate():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return _error("Request body must be a JSON object", 400)

        try:
            submission = _submission_from(body)
            result = processor.process(submission)
        except SubmissionValidationError as exc:
            Log.warning(f"Rejected submission: {exc}")
            return _error(str(exc), 400)
        except EvaluationError as exc:
            # details stay in the log; the client only gets the retry hint
            Log.error(f"Evaluation failed: {exc}")
            return _error(EVALUATION_FAILED_MESSAGE, 502)
        except Exception:
            Log.exception("Unexpected error in /evaluate")
            return _error(EVALUATION_FAILED_MESSAGE, 500)

        return jsonify(
            {
                "success": True,
                "data": result.record.data,
                "evaluationId": result.evaluation_id,
            }
        )

    @bp.get("/history/<user_id>")
    def history(user_id: str):
        try:
            entries = processor.get_history(user_id)
        except Exception:
            Log.exception(f"Failed to retrieve history for user {user_id}")
            return _error("Failed to retrieve history", 500)
        return jsonify({"success": True, "data": [_entry_to_json(e) for e in entries]})

    @bp.get("/evaluation/<evaluation_id>")
    def get_evaluation(evaluation_id: str):
        try:
            entry = processor.get_evaluation(evaluation_id)
        except EvaluationNotFoundError:
            return _error("Evaluation not found", 404)
        except Exception:
            Log.exception(f"Failed to retrieve evaluation {evaluation_id}")
            return _error("Failed to retrieve evaluation", 500)
        return jsonify({"success": True, "data": _entry_to_json(entry)})

    @bp.delete("/evaluation/<evaluation_id>")
    def delete_evaluation(evaluation_id: str):
        try:
            processor.delete_evaluation(evaluation_id)
        except EvaluationNotFoundError:
            return _error("Evaluation not found", 404)
        except Exception:
            Log.exception(f"Failed to delete evaluation {evaluation_id}")
            return _error("Failed to delete evaluation", 500)
        return jsonify({"success": True, "message": "Evaluation deleted successfully"})

    return bp
