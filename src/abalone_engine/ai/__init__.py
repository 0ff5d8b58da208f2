"""Heuristic AI for choosing moves."""

from .weights import DEFAULT_WEIGHTS, DETERMINISTIC_WEIGHTS, HeuristicWeights
from .evaluator import MoveEvaluator, PositionSummary, ScoreBreakdown, summarize_position
from .selector import HeuristicSelector, select_move

__all__ = [
    "DEFAULT_WEIGHTS",
    "DETERMINISTIC_WEIGHTS",
    "HeuristicWeights",
    "MoveEvaluator",
    "PositionSummary",
    "ScoreBreakdown",
    "summarize_position",
    "HeuristicSelector",
    "select_move",
]
