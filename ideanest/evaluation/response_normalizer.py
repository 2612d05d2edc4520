"""Turns raw LLM completions into validated evaluation records.

Stages run in order, each one able to stop the chain with a failure:

1. strip a surrounding markdown code fence
2. cut the candidate from the first '{' to the last '}'
3. parse it as-is
4. sanitize escapes and control characters, parse again
5. close truncated arrays and objects, parse a last time
6. validate required fields and score types

Nothing is logged from here. Diagnostics travel on the returned value as
NormalizationEvent entries and the caller decides what to do with them.
"""

import json
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from ideanest.evaluation.json_repair import (
    extract_json_candidate,
    repair_truncated_json,
    sanitize_json,
    strip_fences,
)
from ideanest.evaluation.models import (
    EvaluationRecord,
    ExtractionFailure,
    NormalizationEvent,
    NormalizationFailure,
    NormalizationOutcome,
    ParseFailure,
    ValidationFailure,
)
from ideanest.evaluation.validator import DEFAULT_REQUIRED_FIELDS, validate_record


@dataclass(slots=True)
class _NormalizationContext:
    raw: str
    required_fields: frozenset[str]
    text: str = ""
    candidate: str = ""
    parsed: Any = None
    parser_error: str = ""
    recovered_by: str = ""
    events: list[NormalizationEvent] = field(default_factory=list)

    def record(self, stage: str, level: str, message: str) -> None:
        self.events.append(NormalizationEvent(stage=stage, level=level, message=message))


_Step = Callable[[_NormalizationContext], NormalizationFailure | None]


def _strip_fences(ctx: _NormalizationContext) -> NormalizationFailure | None:
    ctx.text = strip_fences(ctx.raw)
    if ctx.text is not ctx.raw:
        ctx.record("extraction", "debug", "Removed markdown code fence")
    return None


def _extract_candidate(ctx: _NormalizationContext) -> NormalizationFailure | None:
    candidate = extract_json_candidate(ctx.text)
    if candidate is None:
        ctx.record("extraction", "warning", "No JSON object boundaries in completion")
        return ExtractionFailure(
            message="No valid JSON object found in AI response",
            events=tuple(ctx.events),
        )
    ctx.candidate = candidate
    ctx.record(
        "extraction",
        "debug",
        f"Extracted {len(candidate)} of {len(ctx.text)} chars as JSON candidate",
    )
    return None


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {token}")


def _try_parse(ctx: _NormalizationContext, text: str, label: str) -> bool:
    try:
        ctx.parsed = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        ctx.parser_error = str(exc)
        ctx.record("parse", "warning", f"{label.capitalize()} parse failed: {exc}")
        return False
    ctx.recovered_by = label
    if label != "direct":
        ctx.record("parse", "info", f"Parsed JSON after {label} pass")
    return True


def _parse_direct(ctx: _NormalizationContext) -> NormalizationFailure | None:
    _try_parse(ctx, ctx.candidate, "direct")
    return None


def _parse_sanitized(ctx: _NormalizationContext) -> NormalizationFailure | None:
    if ctx.recovered_by:
        return None
    ctx.candidate = sanitize_json(ctx.candidate)
    _try_parse(ctx, ctx.candidate, "sanitized")
    return None


def _parse_repaired(ctx: _NormalizationContext) -> NormalizationFailure | None:
    if ctx.recovered_by:
        return None
    repaired = repair_truncated_json(ctx.candidate)
    ctx.record(
        "parse",
        "debug",
        f"Repaired candidate from {len(ctx.candidate)} to {len(repaired)} chars",
    )
    if _try_parse(ctx, repaired, "repaired"):
        return None
    return ParseFailure(
        message=f"Failed to parse AI response: {ctx.parser_error}",
        parser_error=ctx.parser_error,
        events=tuple(ctx.events),
    )


def _validate(ctx: _NormalizationContext) -> NormalizationFailure | None:
    if not isinstance(ctx.parsed, dict):
        ctx.record("validation", "warning", "Parsed JSON is not an object")
        return ValidationFailure(
            message="AI response must be a JSON object",
            events=tuple(ctx.events),
        )
    report = validate_record(ctx.parsed, ctx.required_fields)
    if report.ok:
        return None
    ctx.record("validation", "warning", report.describe())
    ctx.record("validation", "debug", f"Available fields: {', '.join(ctx.parsed)}")
    return ValidationFailure(
        message=report.describe(),
        missing_fields=report.missing_fields,
        invalid_fields=report.invalid_fields,
        events=tuple(ctx.events),
    )


_STEPS: tuple[_Step, ...] = (
    _strip_fences,
    _extract_candidate,
    _parse_direct,
    _parse_sanitized,
    _parse_repaired,
    _validate,
)


def normalize(
    raw: str,
    required_fields: Iterable[str] = DEFAULT_REQUIRED_FIELDS,
) -> NormalizationOutcome:
    """Normalize one completion. Never raises; failures are returned."""
    ctx = _NormalizationContext(raw=raw, required_fields=frozenset(required_fields))
    for step in _STEPS:
        failure = step(ctx)
        if failure is not None:
            return failure
    return EvaluationRecord(
        data=ctx.parsed,
        recovered_by=ctx.recovered_by,
        events=tuple(ctx.events),
    )


class ResponseNormalizer:
    """Normalizer bound to a fixed set of required fields."""

    def __init__(self, required_fields: Iterable[str] = DEFAULT_REQUIRED_FIELDS) -> None:
        self._required_fields = frozenset(required_fields)

    @property
    def required_fields(self) -> frozenset[str]:
        return self._required_fields

    def normalize(self, raw: str) -> NormalizationOutcome:
        return normalize(raw, self._required_fields)
