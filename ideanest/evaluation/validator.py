"""Validates a parsed evaluation against the required-field invariants."""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

REQUIRED_STRING_FIELDS = (
    "problemStatement",
    "existingSolutions",
    "proposedSolution",
    "marketPotential",
    "businessModel",
    "pitchSummary",
)
REQUIRED_SECTION_FIELDS = ("swotAnalysis", "prosConsImprovements", "scores")
DEFAULT_REQUIRED_FIELDS: frozenset[str] = frozenset(
    REQUIRED_STRING_FIELDS + REQUIRED_SECTION_FIELDS
)
SCORE_FIELDS = ("innovation", "feasibility", "scalability")


@dataclass(frozen=True)
class ValidationReport:
    """Every problem found in one record, in a stable order."""

    missing_fields: tuple[str, ...] = ()
    invalid_fields: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.missing_fields and not self.invalid_fields

    def describe(self) -> str:
        parts = []
        if self.missing_fields:
            parts.append(f"Missing required fields: {', '.join(self.missing_fields)}")
        if self.invalid_fields:
            parts.append(f"Invalid fields: {', '.join(self.invalid_fields)}")
        return "; ".join(parts)


def validate_record(
    data: Mapping[str, Any],
    required_fields: Iterable[str] = DEFAULT_REQUIRED_FIELDS,
) -> ValidationReport:
    """Check required fields and score types without stopping at the first error.

    Required fields may be dotted paths ("scores.innovation"). A field counts
    as missing when it is absent, null, a blank string or an empty object.
    The three scores are always checked and must be JSON numbers.
    """
    missing: list[str] = [
        name for name in sorted(set(required_fields)) if _is_blank(_lookup(data, name))
    ]
    invalid: list[str] = []

    scores = data.get("scores")
    if not isinstance(scores, Mapping):
        if scores is not None and "scores" not in missing:
            invalid.append("scores")
        scores = {}

    for name in SCORE_FIELDS:
        path = f"scores.{name}"
        value = scores.get(name)
        if value is None:
            if path not in missing:
                missing.append(path)
        elif not _is_number(value):
            invalid.append(path)

    return ValidationReport(missing_fields=tuple(missing), invalid_fields=tuple(invalid))


def _lookup(data: Mapping[str, Any], path: str) -> Any:
    value: Any = data
    for key in path.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Mapping):
        return not value
    return False


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not isinstance(value, float) or math.isfinite(value)
