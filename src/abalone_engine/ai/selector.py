"""
AI move selection: score every legal move once and keep the best.

This is a one-ply heuristic player, not a search. Ties are broken by the
evaluator's random component; among exactly equal totals the move seen
first wins.
"""

import logging
from typing import List, Optional, Tuple

from ..core import Board, Move, Side
from .evaluator import MoveEvaluator, ScoreBreakdown

logger = logging.getLogger(__name__)


class HeuristicSelector:
    """
    Picks moves for a computer-controlled side.

    Args:
        evaluator: Move evaluator to score candidates with (default weights,
            unseeded random tie-break if None)
    """

    def __init__(self, evaluator: Optional[MoveEvaluator] = None):
        self.evaluator = evaluator if evaluator is not None else MoveEvaluator()

    def select_move(self, board: Board, side: Side) -> Optional[Move]:
        """
        Choose the highest scoring legal move.

        Args:
            board: Current board (not modified)
            side: Side to move

        Returns:
            Best move, or None if the side has no legal move
        """
        moves = board.get_possible_moves(side)
        if not moves:
            logger.debug(f"No legal moves for {side.name}")
            return None

        baseline = self.evaluator.summarize(board, side)

        best_move = None
        best_score = None
        for move in moves:
            score = self.evaluator.evaluate(board, move, side, baseline=baseline)
            if best_score is None or score > best_score:
                best_score = score
                best_move = move

        logger.debug(
            f"{side.name}: best move {best_move} score {best_score} "
            f"({len(moves)} candidates)"
        )
        return best_move

    def rank_moves(self, board: Board, side: Side) -> List[Tuple[Move, ScoreBreakdown]]:
        """All legal moves with their score breakdowns, best first."""
        baseline = self.evaluator.summarize(board, side)
        scored = [
            (move, self.evaluator.breakdown(board, move, side, baseline=baseline))
            for move in board.get_possible_moves(side)
        ]
        scored.sort(key=lambda item: item[1].total, reverse=True)
        return scored


def select_move(
    board: Board, side: Side, evaluator: Optional[MoveEvaluator] = None
) -> Optional[Move]:
    """Convenience wrapper around HeuristicSelector.select_move."""
    return HeuristicSelector(evaluator).select_move(board, side)
