"""Tests for the move heuristic."""

import random

import pytest
from abalone_engine.ai import (
    DEFAULT_WEIGHTS,
    DETERMINISTIC_WEIGHTS,
    HeuristicWeights,
    MoveEvaluator,
    PositionSummary,
    summarize_position,
)
from abalone_engine.ai.evaluator import (
    score_board_control,
    score_centering,
    score_defensive,
    score_edge_vulnerability,
    score_push,
)
from abalone_engine.core import Board, Move, Side, axial_to_index, create_starting_board

P = Side.PRIMARY
O = Side.OPPONENT


def cell(q, r):
    return axial_to_index(q, r)


def make_board(primary=(), opponent=()):
    occupancy = {idx: P for idx in primary}
    occupancy.update({idx: O for idx in opponent})
    return Board(occupancy)


def push_score(board, move):
    return score_push(board.analyze_move(move), board.geometry, DEFAULT_WEIGHTS)


def test_elimination_bonus():
    """Test an eliminating push scores at least 100 more than a plain push."""
    # 2 vs 1 on the middle row, opponent on the edge
    eliminating = make_board(primary=[cell(2, 0), cell(3, 0)], opponent=[cell(4, 0)])
    # 2 vs 1 toward the center (no edge pressure either)
    plain = make_board(primary=[cell(-4, 0), cell(-3, 0)], opponent=[cell(-2, 0)])

    elim_score = push_score(eliminating, Move(cell(2, 0), cell(3, 0)))
    plain_score = push_score(plain, Move(cell(-4, 0), cell(-3, 0)))

    assert plain_score == 10
    assert elim_score == 110
    assert elim_score - plain_score >= 100


def test_push_size_advantage():
    """Test push strength scales with the size difference."""
    board = make_board(
        primary=[cell(-4, 0), cell(-3, 0), cell(-2, 0)], opponent=[cell(-1, 0)]
    )
    # 3 vs 1, opponent moves from edge distance 3 to 4
    assert push_score(board, Move(cell(-4, 0), cell(-3, 0))) == 20


def test_edge_pressure():
    """Test pushing the opponent toward the edge earns the edge bonus."""
    board = make_board(primary=[cell(-2, 0), cell(-1, 0)], opponent=[cell(0, 0)])
    # Opponent goes from the center (edge distance 4) to (1, 0) (edge distance 3)
    assert push_score(board, Move(cell(-2, 0), cell(-1, 0))) == 10 + 30


def test_simple_move_has_no_push_score():
    """Test non-push moves get no push strength."""
    board = create_starting_board()
    assert push_score(board, Move(58, 52)) == 0


def test_centering():
    """Test only moves toward the center are rewarded."""
    board = make_board(primary=[cell(-4, 0)])
    geometry = board.geometry

    inward = board.analyze_move(Move(cell(-4, 0), cell(-3, 0)))
    along_edge = board.analyze_move(Move(cell(-4, 0), cell(-4, 1)))

    assert score_centering(inward, geometry, DEFAULT_WEIGHTS) == 20
    assert score_centering(along_edge, geometry, DEFAULT_WEIGHTS) == 0


def test_centering_uses_leading_piece():
    """Test centering measures the front piece of the moving line."""
    board = make_board(primary=[cell(-4, 0), cell(-3, 0)])
    analysis = board.analyze_move(Move(cell(-4, 0), cell(-3, 0)))

    assert analysis.leading_cell == cell(-3, 0)
    assert score_centering(analysis, board.geometry, DEFAULT_WEIGHTS) == 20


def test_simulation_factors():
    """Test the defensive, control and vulnerability arithmetic."""
    before = PositionSummary(mover_mobility=10, opponent_mobility=8, threats=2)
    after = PositionSummary(mover_mobility=12, opponent_mobility=7, threats=1)

    assert score_defensive(before, after, DEFAULT_WEIGHTS) == 10_000
    assert score_board_control(before, after, DEFAULT_WEIGHTS) == 5 * ((12 - 7) - (10 - 8))
    assert score_edge_vulnerability(before, after, DEFAULT_WEIGHTS) == 200


def test_exposing_pieces_is_penalised():
    """Test vulnerability is signed while the defensive factor never goes negative."""
    before = PositionSummary(mover_mobility=5, opponent_mobility=5, threats=0)
    after = PositionSummary(mover_mobility=5, opponent_mobility=5, threats=2)

    assert score_defensive(before, after, DEFAULT_WEIGHTS) == 0
    assert score_edge_vulnerability(before, after, DEFAULT_WEIGHTS) == -400
    assert score_board_control(before, after, DEFAULT_WEIGHTS) == 0


def threatened_board():
    """PRIMARY piece on the edge at (4, 0) facing an OPPONENT pair, plus a spare at cell 0."""
    return make_board(primary=[cell(4, 0), 0], opponent=[cell(2, 0), cell(3, 0)])


def test_summarize_counts_threats():
    """Test the opponent's eliminating pushes are counted."""
    summary = summarize_position(threatened_board(), P)

    assert summary.threats == 1
    assert summary.mover_mobility > 0
    assert summary.opponent_mobility > 0


def test_escaping_threat_dominates():
    """Test moving out of danger outscores every other move."""
    board = threatened_board()
    evaluator = MoveEvaluator(weights=DETERMINISTIC_WEIGHTS)

    escape = Move(cell(4, 0), cell(4, -1))
    idle = Move(0, 1)

    escape_score = evaluator.breakdown(board, escape, P)
    idle_score = evaluator.breakdown(board, idle, P)

    assert escape_score.defensive == 10_000
    assert escape_score.vulnerability == 200
    assert idle_score.defensive == 0
    assert escape_score.total > idle_score.total


def test_illegal_move_scores_zero():
    """Test illegal moves (or moves of the other side) score 0 with no randomness."""
    board = create_starting_board()
    evaluator = MoveEvaluator(seed=1)

    assert evaluator.evaluate(board, Move(30, 31), P) == 0
    assert evaluator.evaluate(board, Move(56, 58), P) == 0
    assert evaluator.evaluate(board, Move(2, 8), P) == 0


def test_jitter_range_and_seed():
    """Test the tie-break stays in [0, 9] and is reproducible with a seed."""
    board = create_starting_board()
    move = Move(58, 52)

    evaluator = MoveEvaluator(rng=random.Random(42))
    jitters = {evaluator.breakdown(board, move, P).jitter for _ in range(200)}
    assert jitters <= set(range(10))
    assert len(jitters) > 1

    first = MoveEvaluator(seed=7)
    second = MoveEvaluator(seed=7)
    assert [first.evaluate(board, move, P) for _ in range(5)] == [
        second.evaluate(board, move, P) for _ in range(5)
    ]


def test_deterministic_weights():
    """Test jitter=0 gives identical scores on every call."""
    board = create_starting_board()
    evaluator = MoveEvaluator(weights=DETERMINISTIC_WEIGHTS)
    move = Move(58, 52)

    scores = {evaluator.evaluate(board, move, P) for _ in range(10)}
    assert len(scores) == 1


def test_evaluation_does_not_mutate_board():
    """Test evaluation works on a clone."""
    board = threatened_board()
    before = board.occupancy

    MoveEvaluator(seed=3).evaluate(board, Move(cell(4, 0), cell(4, -1)), P)

    assert board.occupancy == before


def test_baseline_matches_fresh_summary():
    """Test passing a precomputed baseline gives the same result."""
    board = threatened_board()
    evaluator = MoveEvaluator(weights=DETERMINISTIC_WEIGHTS)
    move = Move(cell(4, 0), cell(4, -1))

    baseline = evaluator.summarize(board, P)
    assert evaluator.evaluate(board, move, P, baseline=baseline) == evaluator.evaluate(
        board, move, P
    )


def test_negative_jitter_rejected():
    """Test weights validation."""
    with pytest.raises(ValueError):
        HeuristicWeights(jitter=-1)
