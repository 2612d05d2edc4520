from ideanest.evaluation.base import BaseEvaluator
from ideanest.evaluation.evaluator import IdeaEvaluator
from ideanest.evaluation.factory import EvaluatorFactory
from ideanest.evaluation.response_normalizer import ResponseNormalizer, normalize

__all__ = [
    "BaseEvaluator",
    "EvaluatorFactory",
    "IdeaEvaluator",
    "ResponseNormalizer",
    "normalize",
]
