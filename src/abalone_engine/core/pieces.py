"""
Value types shared by the board, the AI and the game session.

- Side: which of the two parties owns a piece (compared by identity)
- Player: a display name attached to a side, plus its current score
- Move: a requested one-step displacement from one cell to a neighbour
"""

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidCellError
from .geometry import is_cell_index


class Side(Enum):
    """The two competing sides. PRIMARY moves first."""

    PRIMARY = 0
    OPPONENT = 1

    @property
    def other(self) -> "Side":
        return Side.OPPONENT if self is Side.PRIMARY else Side.PRIMARY

    @property
    def symbol(self) -> str:
        """Single-character marker used by text renderings."""
        return "X" if self is Side.PRIMARY else "O"

    @classmethod
    def parse(cls, value: str) -> "Side":
        """Parse a side from its name (case-insensitive), e.g. 'primary'."""
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown side {value!r}, expected 'primary' or 'opponent'")


@dataclass(frozen=True)
class Move:
    """
    Immutable move request.

    The direction is derived from the two endpoints; a move is only legal if
    to_idx is a direct neighbour of from_idx.
    """

    from_idx: int
    to_idx: int

    def __post_init__(self) -> None:
        """Reject indices that are not board cells."""
        if not is_cell_index(self.from_idx):
            raise InvalidCellError(self.from_idx)
        if not is_cell_index(self.to_idx):
            raise InvalidCellError(self.to_idx)

    def __str__(self) -> str:
        return f"{self.from_idx}->{self.to_idx}"


@dataclass
class Player:
    """
    A participant in a game.

    The name is for presentation only; equality between sides always goes
    through `side`. `score` is the number of the side's pieces on the board
    and is overwritten from board counts, never incremented.
    """

    name: str
    side: Side
    is_ai: bool = False
    score: int = 0

    def __str__(self) -> str:
        return f"{self.name} ({self.side.symbol})"
