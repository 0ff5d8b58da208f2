"""Tests for game rules."""

from abalone_engine.core import (
    LOSS_THRESHOLD,
    STARTING_PIECES,
    STARTING_POSITIONS,
    Board,
    Side,
    create_starting_board,
    get_game_result,
    get_winner,
    is_game_over,
)
from abalone_engine.core.rules import pieces_lost


def board_with_counts(primary: int, opponent: int) -> Board:
    """Starting layout with pieces removed from the end of each side's list."""
    occupancy = {}
    for idx in STARTING_POSITIONS[Side.PRIMARY][:primary]:
        occupancy[idx] = Side.PRIMARY
    for idx in STARTING_POSITIONS[Side.OPPONENT][:opponent]:
        occupancy[idx] = Side.OPPONENT
    return Board(occupancy)


def test_starting_positions():
    """Test both sides start with 14 pieces in mirrored positions."""
    primary = STARTING_POSITIONS[Side.PRIMARY]
    opponent = STARTING_POSITIONS[Side.OPPONENT]

    assert len(primary) == len(set(primary)) == STARTING_PIECES
    assert len(opponent) == len(set(opponent)) == STARTING_PIECES
    assert not set(primary) & set(opponent)

    # Point reflection through the center maps index i to 60 - i
    assert {60 - idx for idx in primary} == set(opponent)


def test_fresh_game_not_over():
    """Test a fresh board scores 14-14 and is not over."""
    board = create_starting_board()

    assert board.scores() == {Side.PRIMARY: 14, Side.OPPONENT: 14}
    assert is_game_over(board) is False
    assert get_winner(board) is None
    assert get_game_result(board) is None


def test_game_over_at_threshold():
    """Test reducing a side to 8 pieces ends the game in the other side's favour."""
    board = board_with_counts(primary=LOSS_THRESHOLD, opponent=14)

    assert is_game_over(board) is True
    assert get_winner(board) is Side.OPPONENT


def test_not_over_above_threshold():
    """Test 9 pieces is still in the game."""
    board = board_with_counts(primary=9, opponent=9)

    assert is_game_over(board) is False
    assert get_winner(board) is None


def test_primary_wins():
    """Test the opponent dropping below the threshold."""
    board = board_with_counts(primary=12, opponent=7)

    assert is_game_over(board) is True
    assert get_winner(board) is Side.PRIMARY


def test_game_result_text():
    """Test the human-readable result uses display names."""
    board = board_with_counts(primary=8, opponent=11)
    names = {Side.PRIMARY: "Human", Side.OPPONENT: "AI"}

    result = get_game_result(board, names)
    assert result.startswith("AI wins")
    assert "11" in result and "8" in result

    assert get_game_result(board).startswith("Opponent wins")


def test_pieces_lost():
    """Test lost piece counting."""
    board = board_with_counts(primary=10, opponent=14)

    assert pieces_lost(board, Side.PRIMARY) == 4
    assert pieces_lost(board, Side.OPPONENT) == 0
