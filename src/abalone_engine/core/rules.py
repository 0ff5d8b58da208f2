"""
Game rules outside of single-move legality.

- Fixed 14-piece starting layout per side, mirrored top/bottom
- A side loses once it has LOSS_THRESHOLD (8) or fewer pieces left
- Having no legal move does not end the game
"""

from typing import Dict, Mapping, Optional, Tuple

from .board import Board
from .pieces import Side

STARTING_PIECES = 14
LOSS_THRESHOLD = 8

# PRIMARY fills the bottom two rows and the middle of the third,
# OPPONENT mirrors it at the top.
STARTING_POSITIONS: Dict[Side, Tuple[int, ...]] = {
    Side.PRIMARY: (
        56, 57, 58, 59, 60,
        50, 51, 52, 53, 54, 55,
        45, 46, 47,
    ),
    Side.OPPONENT: (
        0, 1, 2, 3, 4,
        5, 6, 7, 8, 9, 10,
        13, 14, 15,
    ),
}


def create_starting_board() -> Board:
    """
    Create the board at the start of a game.

    Returns:
        Board with both sides in their starting positions
    """
    occupancy = {}
    for side, cells in STARTING_POSITIONS.items():
        for cell in cells:
            occupancy[cell] = side
    return Board(occupancy)


def is_game_over(board: Board) -> bool:
    """True once either side is at or below the loss threshold."""
    scores = board.scores()
    return any(count <= LOSS_THRESHOLD for count in scores.values())


def get_winner(board: Board) -> Optional[Side]:
    """
    Winning side of a finished game.

    Args:
        board: Board to check

    Returns:
        The side that did NOT drop to the threshold, or None if the game is not over
    """
    scores = board.scores()
    if scores[Side.PRIMARY] <= LOSS_THRESHOLD:
        return Side.OPPONENT
    if scores[Side.OPPONENT] <= LOSS_THRESHOLD:
        return Side.PRIMARY
    return None


def pieces_lost(board: Board, side: Side) -> int:
    """Number of a side's pieces pushed off so far."""
    return STARTING_PIECES - board.count_pieces(side)


def get_game_result(board: Board, names: Optional[Mapping[Side, str]] = None) -> Optional[str]:
    """
    Get human-readable game result.

    Args:
        board: Board to check
        names: Optional display names per side (defaults to the side names)

    Returns:
        Result string or None if the game is not over
    """
    winner = get_winner(board)
    if winner is None:
        return None

    names = names or {side: side.name.capitalize() for side in Side}
    scores = board.scores()
    return (
        f"{names[winner]} wins "
        f"({scores[winner]} pieces left vs {scores[winner.other]})"
    )
