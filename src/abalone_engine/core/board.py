"""
Board state: which side occupies which cell, and the move rules over it.

A move names a cell holding one of the mover's pieces and a neighbouring
cell; the direction between them selects the line of pieces that moves.
The line (the "piece group") is every consecutive same-side piece from the
starting cell onward in that direction. The cell beyond the group decides
the kind of move:

- empty on-board cell: simple move, the whole group shifts one step
- off-board: illegal
- opponent piece: push, legal only if the mover group is strictly longer
  than the opponent group in front of it and the cell beyond that group is
  empty or off-board. Opponent pieces pushed off the board are removed.

There is no cap on the length of the pushing line; only the size
comparison limits pushes.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import IllegalMoveError
from .geometry import RADIUS, Direction, HexGeometry, get_geometry, is_cell_index
from .pieces import Move, Side

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveAnalysis:
    """
    Everything the rules need to know about a move on a given board.

    Attributes:
        move: The analysed move
        direction: Unit direction of the move, None if not a unit step
        mover: Side owning the from cell, None if it is empty
        mover_group: Mover's piece group starting at the from cell
        opponent_group: Opponent's piece group in front of the mover group (empty if none)
        next_cell: Cell just beyond the mover group, None if off-board
        push_destination: Cell just beyond the opponent group, None if off-board
        legal: Whether the move may be applied
    """

    move: Move
    direction: Optional[Direction]
    mover: Optional[Side]
    mover_group: Tuple[int, ...] = ()
    opponent_group: Tuple[int, ...] = ()
    next_cell: Optional[int] = None
    push_destination: Optional[int] = None
    legal: bool = False

    @property
    def is_push(self) -> bool:
        return self.legal and len(self.opponent_group) > 0

    @property
    def eliminates(self) -> bool:
        """True if applying the move pushes an opponent piece off the board."""
        return self.is_push and self.push_destination is None

    @property
    def leading_cell(self) -> Optional[int]:
        """Front piece of the mover group."""
        return self.mover_group[-1] if self.mover_group else None


class Board:
    """
    Mutable occupancy map over the shared hexagonal geometry.

    Args:
        occupancy: Initial mapping of cell index to owning side (empty board if None)
        geometry: Geometry tables (the shared instance if None)
    """

    def __init__(
        self,
        occupancy: Optional[Mapping[int, Side]] = None,
        geometry: Optional[HexGeometry] = None,
    ):
        self.geometry = geometry if geometry is not None else get_geometry()
        self._positions: Dict[int, Side] = {}

        for idx, side in (occupancy or {}).items():
            self.geometry.check_index(idx)
            if not isinstance(side, Side):
                raise ValueError(f"Cell {idx} must hold a Side, got {side!r}")
            self._positions[idx] = side

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_player_at(self, idx: int) -> Optional[Side]:
        """Side occupying a cell, or None if the cell is empty."""
        return self._positions.get(self.geometry.check_index(idx))

    def is_valid_position(self, idx: int) -> bool:
        """True if idx is one of the 61 board cells."""
        return is_cell_index(idx)

    def is_empty(self, idx: int) -> bool:
        return self.get_player_at(idx) is None

    def cells_of(self, side: Side) -> List[int]:
        """Sorted cell indices occupied by a side."""
        return sorted(idx for idx, owner in self._positions.items() if owner is side)

    def count_pieces(self, side: Side) -> int:
        """Number of a side's pieces on the board (always recounted)."""
        return sum(1 for owner in self._positions.values() if owner is side)

    def scores(self) -> Dict[Side, int]:
        """Piece counts for both sides."""
        return {side: self.count_pieces(side) for side in Side}

    @property
    def occupancy(self) -> Dict[int, Side]:
        """Copy of the occupancy map."""
        return dict(self._positions)

    def opponent_of(self, side: Side) -> Side:
        return side.other

    def get_valid_moves(self, idx: int) -> List[int]:
        """Empty neighbouring cells of idx."""
        return sorted(n for n in self.geometry.neighbors(idx) if n not in self._positions)

    def get_next_cell(self, from_idx: int, to_idx: int) -> Optional[int]:
        """
        Cell one step beyond to_idx, continuing the from -> to direction.

        Returns:
            Cell index, or None if off-board or the two cells are not neighbours
        """
        direction = self.geometry.direction_between(from_idx, to_idx)
        if direction is None:
            return None
        return self.geometry.step(to_idx, direction)

    def piece_group(self, start: int, direction: Direction) -> List[int]:
        """
        Consecutive cells owned by the owner of `start`, beginning at `start`.

        Args:
            start: First cell of the group (must be occupied)
            direction: Unit direction to extend the group in

        Returns:
            Ordered list of cell indices, nearest first
        """
        owner = self.get_player_at(start)
        if owner is None:
            raise ValueError(f"Cell {start} is empty")

        group = [start]
        current = self.geometry.step(start, direction)
        while current is not None and self._positions.get(current) is owner:
            group.append(current)
            current = self.geometry.step(current, direction)
        return group

    # ------------------------------------------------------------------
    # Move rules
    # ------------------------------------------------------------------

    def analyze_move(self, move: Move) -> MoveAnalysis:
        """Classify a move against the current position."""
        direction = self.geometry.direction_between(move.from_idx, move.to_idx)
        mover = self._positions.get(move.from_idx)
        if direction is None or mover is None:
            return MoveAnalysis(move=move, direction=direction, mover=mover)

        group = tuple(self.piece_group(move.from_idx, direction))
        next_cell = self.geometry.step(group[-1], direction)

        # Simple move
        if next_cell is not None and next_cell not in self._positions:
            return MoveAnalysis(
                move=move,
                direction=direction,
                mover=mover,
                mover_group=group,
                next_cell=next_cell,
                legal=True,
            )

        # Leading piece is on the edge
        if next_cell is None:
            return MoveAnalysis(move=move, direction=direction, mover=mover, mover_group=group)

        opponent_group = tuple(self.piece_group(next_cell, direction))
        push_destination = self.geometry.step(opponent_group[-1], direction)
        legal = len(group) > len(opponent_group) and (
            push_destination is None or push_destination not in self._positions
        )
        return MoveAnalysis(
            move=move,
            direction=direction,
            mover=mover,
            mover_group=group,
            opponent_group=opponent_group,
            next_cell=next_cell,
            push_destination=push_destination,
            legal=legal,
        )

    def is_legal_move(self, move: Move) -> bool:
        return self.analyze_move(move).legal

    def apply_move(self, move: Move) -> List[int]:
        """
        Apply a legal move in place.

        Args:
            move: Move to apply

        Returns:
            Cells whose (opponent) pieces were pushed off the board

        Raises:
            IllegalMoveError: If the move is not legal on this board
        """
        analysis = self.analyze_move(move)
        if not analysis.legal:
            raise IllegalMoveError(f"Illegal move {move}")

        eliminated = self._shift(analysis.opponent_group, analysis.direction)
        self._shift(analysis.mover_group, analysis.direction)

        if eliminated:
            logger.debug(f"Move {move} pushed {analysis.mover.other.name} off at {eliminated}")
        return eliminated

    def _shift(self, group: Iterable[int], direction: Direction) -> List[int]:
        """Shift a group one step, farthest piece first. Returns removed cells."""
        removed = []
        for cell in reversed(tuple(group)):
            owner = self._positions.pop(cell)
            dest = self.geometry.step(cell, direction)
            if dest is None:
                removed.append(cell)
            else:
                self._positions[dest] = owner
        return removed

    def get_possible_moves(self, side: Side) -> List[Move]:
        """All legal moves for a side, ordered by from cell then to cell."""
        moves = []
        for from_idx in self.cells_of(side):
            for to_idx in sorted(self.geometry.neighbors(from_idx)):
                move = Move(from_idx, to_idx)
                if self.is_legal_move(move):
                    moves.append(move)
        return moves

    # ------------------------------------------------------------------
    # Copies and display
    # ------------------------------------------------------------------

    def clone(self) -> "Board":
        """Copy of the occupancy map over the same (immutable) geometry."""
        new = self.__class__.__new__(self.__class__)
        new.geometry = self.geometry
        new._positions = dict(self._positions)
        return new

    def render(self, empty: str = ".") -> str:
        """Hexagon-shaped text rendering, one row per line."""
        lines = []
        for r in range(-RADIUS, RADIUS + 1):
            row = []
            for q in range(max(-RADIUS, -r - RADIUS), min(RADIUS, -r + RADIUS) + 1):
                owner = self._positions.get(self.geometry.axial_to_index(q, r))
                row.append(owner.symbol if owner is not None else empty)
            lines.append(" " * abs(r) + " ".join(row))
        return "\n".join(lines)

    def __str__(self) -> str:
        counts = self.scores()
        return (
            f"{self.render()}\n\n"
            f"{Side.PRIMARY.symbol}: {counts[Side.PRIMARY]}  "
            f"{Side.OPPONENT.symbol}: {counts[Side.OPPONENT]}"
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._positions == other._positions

    __hash__ = None

