"""Example evaluation client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseEvaluationClient and register the provider in EvaluatorFactory.
"""

import json
from typing import ClassVar

from ideanest.evaluation.client_base import BaseEvaluationClient


class ExampleClientAdapter(BaseEvaluationClient):
    """Example adapter that returns a fixed valid evaluation JSON.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "problemStatement": "Example problem statement.",
        "existingSolutions": "Example existing solutions.",
        "proposedSolution": "Example proposed solution.",
        "marketPotential": "Example market potential.",
        "swotAnalysis": {
            "strengths": ["Example strength"],
            "weaknesses": ["Example weakness"],
            "opportunities": ["Example opportunity"],
            "threats": ["Example threat"],
        },
        "businessModel": "Example business model.",
        "prosConsImprovements": {
            "pros": ["Example pro"],
            "cons": ["Example con"],
            "improvements": ["Example improvement"],
        },
        "pitchSummary": "Example elevator pitch.",
        "scores": {"innovation": 5.0, "feasibility": 5.0, "scalability": 5.0},
    }

    def __init__(self) -> None:
        pass

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, max_tokens, system_prompt, user_prompt
        return json.dumps(self.DEFAULT_RESPONSE)
