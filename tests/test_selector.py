"""Tests for AI move selection."""

from abalone_engine.ai import (
    DETERMINISTIC_WEIGHTS,
    HeuristicSelector,
    MoveEvaluator,
    select_move,
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


def deterministic_selector():
    return HeuristicSelector(MoveEvaluator(weights=DETERMINISTIC_WEIGHTS))


def test_no_pieces_no_move():
    """Test a side without pieces gets None."""
    board = make_board(primary=[30])
    assert select_move(board, O) is None


def test_trapped_piece_no_move():
    """Test a side whose only piece is boxed in gets None."""
    # Corner cell 0 surrounded by single opponent pieces: every push is 1 vs 1
    board = make_board(primary=[0], opponent=[1, 5, 6])

    assert board.get_possible_moves(P) == []
    assert deterministic_selector().select_move(board, P) is None


def test_selects_elimination():
    """Test the AI pushes an opponent piece off the board when it can."""
    board = make_board(primary=[cell(2, 0), cell(3, 0)], opponent=[cell(4, 0)])

    move = deterministic_selector().select_move(board, P)

    assert move == Move(cell(2, 0), cell(3, 0))


def test_selects_escape_from_threat():
    """Test the AI moves a threatened edge piece out of the pushing line."""
    board = make_board(primary=[cell(4, 0), 0], opponent=[cell(2, 0), cell(3, 0)])

    move = deterministic_selector().select_move(board, P)

    assert move.from_idx == cell(4, 0)


def test_selection_does_not_mutate_board():
    """Test selection leaves the live board untouched."""
    board = create_starting_board()
    before = board.occupancy

    select_move(board, P, MoveEvaluator(seed=1))

    assert board.occupancy == before


def test_seeded_selection_is_reproducible():
    """Test equal seeds give equal choices."""
    board = create_starting_board()

    first = select_move(board, O, MoveEvaluator(seed=11))
    second = select_move(board, O, MoveEvaluator(seed=11))

    assert first == second
    assert board.is_legal_move(first)


def test_selected_move_has_top_score():
    """Test the chosen move has the maximal deterministic score."""
    board = create_starting_board()
    selector = deterministic_selector()

    ranked = selector.rank_moves(board, P)
    best = selector.select_move(board, P)

    top_score = ranked[0][1].total
    assert dict(ranked)[best].total == top_score


def test_rank_moves_sorted():
    """Test ranked moves cover every legal move, best first."""
    board = create_starting_board()
    ranked = deterministic_selector().rank_moves(board, O)

    totals = [score.total for _, score in ranked]
    assert totals == sorted(totals, reverse=True)
    assert {move for move, _ in ranked} == set(board.get_possible_moves(O))
