from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class FailureStage(str, Enum):
    """Stage at which a completion could not be normalized."""

    EXTRACTION = "extraction"
    PARSE = "parse"
    VALIDATION = "validation"


@dataclass(frozen=True)
class NormalizationEvent:
    """Leveled diagnostic recorded while normalizing a completion."""

    stage: str
    level: str  # "debug", "info" or "warning"
    message: str


@dataclass(frozen=True)
class Scores:
    """The three numeric scores of an evaluation."""

    innovation: float
    feasibility: float
    scalability: float


@dataclass(frozen=True)
class EvaluationRecord:
    """A validated evaluation report.

    ``data`` is the parsed mapping exactly as decoded; optional sections
    (refinedVersions, competitors, marketStrategy, pitchDeck) are kept as-is.
    """

    data: dict[str, Any]
    recovered_by: str = "direct"  # "direct", "sanitized" or "repaired"
    events: tuple[NormalizationEvent, ...] = ()

    @property
    def scores(self) -> Scores:
        raw = self.data["scores"]
        return Scores(
            innovation=raw["innovation"],
            feasibility=raw["feasibility"],
            scalability=raw["scalability"],
        )


@dataclass(frozen=True)
class NormalizationFailure:
    """Base for all normalization failures."""

    stage: ClassVar[FailureStage]

    message: str
    events: tuple[NormalizationEvent, ...] = ()


@dataclass(frozen=True)
class ExtractionFailure(NormalizationFailure):
    """No JSON object boundaries were found in the completion."""

    stage: ClassVar[FailureStage] = FailureStage.EXTRACTION


@dataclass(frozen=True)
class ParseFailure(NormalizationFailure):
    """The JSON candidate stayed invalid after sanitization and repair."""

    stage: ClassVar[FailureStage] = FailureStage.PARSE

    parser_error: str = ""


@dataclass(frozen=True)
class ValidationFailure(NormalizationFailure):
    """Parsed JSON is missing required fields or carries malformed scores."""

    stage: ClassVar[FailureStage] = FailureStage.VALIDATION

    missing_fields: tuple[str, ...] = ()
    invalid_fields: tuple[str, ...] = ()


NormalizationOutcome = EvaluationRecord | NormalizationFailure
