import copy
from typing import Any

import pytest

_VALID_EVALUATION: dict[str, Any] = {
    "problemStatement": "Small cafes waste food at closing time.",
    "existingSolutions": "Generic marketplaces with high fees.",
    "proposedSolution": "A neighbourhood app for last-hour discounts.",
    "marketPotential": "Food waste apps grow 20% a year.",
    "swotAnalysis": {
        "strengths": ["Low cost"],
        "weaknesses": ["Cold start"],
        "opportunities": ["ESG budgets"],
        "threats": ["Incumbents"],
    },
    "businessModel": "Commission per order.",
    "prosConsImprovements": {
        "pros": ["Simple"],
        "cons": ["Thin margins"],
        "improvements": ["Partner with delivery"],
    },
    "pitchSummary": "Rescue food, save money.",
    "scores": {"innovation": 6.5, "feasibility": 8, "scalability": 7.2},
}


@pytest.fixture()
def evaluation_payload() -> dict[str, Any]:
    """A complete evaluation that satisfies every required field."""
    return copy.deepcopy(_VALID_EVALUATION)


@pytest.fixture()
def long_description() -> str:
    """An idea description comfortably above the minimum length."""
    return (
        "An app that lets small cafes and bakeries sell their leftover food "
        "at a discount during the last hour before closing, so that less food "
        "is thrown away and students get cheap meals nearby."
    )
