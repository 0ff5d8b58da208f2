"""Core board geometry, state and rules."""

from .errors import AbaloneError, GameOverError, IllegalMoveError, InvalidCellError
from .geometry import (
    DIRECTIONS,
    NUM_CELLS,
    HexGeometry,
    axial_to_index,
    get_geometry,
    hex_distance,
    index_to_axial,
    neighbors,
)
from .pieces import Move, Player, Side
from .board import Board, MoveAnalysis
from .rules import (
    LOSS_THRESHOLD,
    STARTING_PIECES,
    STARTING_POSITIONS,
    create_starting_board,
    get_game_result,
    get_winner,
    is_game_over,
)

__all__ = [
    "AbaloneError",
    "GameOverError",
    "IllegalMoveError",
    "InvalidCellError",
    "DIRECTIONS",
    "NUM_CELLS",
    "HexGeometry",
    "axial_to_index",
    "get_geometry",
    "hex_distance",
    "index_to_axial",
    "neighbors",
    "Move",
    "Player",
    "Side",
    "Board",
    "MoveAnalysis",
    "LOSS_THRESHOLD",
    "STARTING_PIECES",
    "STARTING_POSITIONS",
    "create_starting_board",
    "get_game_result",
    "get_winner",
    "is_game_over",
]
