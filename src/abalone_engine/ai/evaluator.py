"""
Heuristic move evaluation.

A candidate move is scored as the sum of independent factors:

1. Push strength: size advantage of a push, a large bonus if it pushes a
   piece off the board, otherwise a bonus for driving the pushed line
   toward the edge.
2. Centering: the leading piece getting closer to the center.
3. Defensive: fewer opponent moves that would push one of our pieces off.
4. Board control: change in (our legal moves - their legal moves).
5. Edge vulnerability: change in how many of our pieces the opponent can
   push off (signed, so moves that expose pieces are penalised).

Factors 3-5 look one ply ahead by applying the move to a clone of the
board. A small random value breaks ties between equally scored moves.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from ..core import Board, Move, MoveAnalysis, Side
from ..core.geometry import HexGeometry
from .weights import DEFAULT_WEIGHTS, HeuristicWeights

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PositionSummary:
    """
    Mobility and threat counts of a position from one side's point of view.

    Attributes:
        mover_mobility: Legal moves available to the side
        opponent_mobility: Legal moves available to the other side
        threats: Opponent moves that would push one of the side's pieces off
    """

    mover_mobility: int
    opponent_mobility: int
    threats: int

    @property
    def mobility_differential(self) -> int:
        return self.mover_mobility - self.opponent_mobility


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-factor scores of one move."""

    push: int = 0
    centering: int = 0
    defensive: int = 0
    control: int = 0
    vulnerability: int = 0
    jitter: int = 0

    @property
    def total(self) -> int:
        return (
            self.push
            + self.centering
            + self.defensive
            + self.control
            + self.vulnerability
            + self.jitter
        )


def summarize_position(board: Board, side: Side) -> PositionSummary:
    """Count both sides' legal moves and the opponent's eliminating pushes."""
    opponent = board.opponent_of(side)
    opponent_moves = board.get_possible_moves(opponent)
    threats = sum(1 for move in opponent_moves if board.analyze_move(move).eliminates)
    return PositionSummary(
        mover_mobility=len(board.get_possible_moves(side)),
        opponent_mobility=len(opponent_moves),
        threats=threats,
    )


def score_push(analysis: MoveAnalysis, geometry: HexGeometry, weights: HeuristicWeights) -> int:
    """Push strength factor (0 for moves that are not pushes)."""
    if not analysis.is_push:
        return 0

    advantage = len(analysis.mover_group) - len(analysis.opponent_group)
    score = weights.push_per_piece * advantage

    if analysis.eliminates:
        score += weights.elimination
    else:
        before = geometry.edge_distance(analysis.opponent_group[-1])
        after = geometry.edge_distance(analysis.push_destination)
        if after < before:
            score += weights.edge_pressure * (before - after)

    return score


def score_centering(
    analysis: MoveAnalysis, geometry: HexGeometry, weights: HeuristicWeights
) -> int:
    """Reward the leading piece moving toward the center."""
    if not analysis.legal:
        return 0

    before = geometry.distance_from_center(analysis.leading_cell)
    after = geometry.distance_from_center(analysis.next_cell)
    if after < before:
        return weights.centering * (before - after)
    return 0


def score_defensive(
    before: PositionSummary, after: PositionSummary, weights: HeuristicWeights
) -> int:
    """Large reward for removing opponent winning moves; never negative."""
    if after.threats < before.threats:
        return weights.defensive * (before.threats - after.threats)
    return 0


def score_board_control(
    before: PositionSummary, after: PositionSummary, weights: HeuristicWeights
) -> int:
    return weights.control * (after.mobility_differential - before.mobility_differential)


def score_edge_vulnerability(
    before: PositionSummary, after: PositionSummary, weights: HeuristicWeights
) -> int:
    return weights.vulnerability * (before.threats - after.threats)


class MoveEvaluator:
    """
    Scores legal moves for a side.

    Args:
        weights: Heuristic weights (DEFAULT_WEIGHTS if None)
        rng: Random source for the tie-break (a fresh random.Random(seed) if None)
        seed: Seed for the fresh random source when rng is not given
    """

    def __init__(
        self,
        weights: Optional[HeuristicWeights] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        self.weights = weights if weights is not None else DEFAULT_WEIGHTS
        self.rng = rng if rng is not None else random.Random(seed)

    def summarize(self, board: Board, side: Side) -> PositionSummary:
        return summarize_position(board, side)

    def breakdown(
        self,
        board: Board,
        move: Move,
        side: Side,
        baseline: Optional[PositionSummary] = None,
    ) -> ScoreBreakdown:
        """
        Score a move factor by factor.

        Args:
            board: Current board (not modified)
            move: Candidate move
            side: Side making the move
            baseline: summarize(board, side), if already computed

        Returns:
            ScoreBreakdown, all zeros if the move is not a legal move for side
        """
        analysis = board.analyze_move(move)
        if not analysis.legal or analysis.mover is not side:
            return ScoreBreakdown()

        if baseline is None:
            baseline = self.summarize(board, side)

        simulated = board.clone()
        simulated.apply_move(move)
        after = self.summarize(simulated, side)

        geometry = board.geometry
        weights = self.weights
        return ScoreBreakdown(
            push=score_push(analysis, geometry, weights),
            centering=score_centering(analysis, geometry, weights),
            defensive=score_defensive(baseline, after, weights),
            control=score_board_control(baseline, after, weights),
            vulnerability=score_edge_vulnerability(baseline, after, weights),
            jitter=self._jitter(),
        )

    def evaluate(
        self,
        board: Board,
        move: Move,
        side: Side,
        baseline: Optional[PositionSummary] = None,
    ) -> int:
        """Total heuristic score of a move (see breakdown)."""
        return self.breakdown(board, move, side, baseline).total

    def _jitter(self) -> int:
        if self.weights.jitter == 0:
            return 0
        return self.rng.randrange(self.weights.jitter)
