"""
Hexagonal board geometry: cell indices, axial coordinates and adjacency.

The board is a hexagon of radius 4 in axial coordinates (q, r), where every
cell satisfies |q| <= 4, |r| <= 4 and |q + r| <= 4. Cells are numbered
row by row from r = -4 (top) to r = 4 (bottom), giving rows of
5, 6, 7, 8, 9, 8, 7, 6, 5 cells:

            0  1  2  3  4
          5  6  7  8  9 10
        11 12 13 14 15 16 17
       ...
            56 57 58 59 60

The tables never change, so a single HexGeometry is built lazily and shared
by every Board in the process.
"""

from typing import Dict, FrozenSet, List, Optional, Tuple

from .errors import InvalidCellError

Axial = Tuple[int, int]
Direction = Tuple[int, int]

RADIUS = 4
NUM_CELLS = 61
ROW_SIZES = (5, 6, 7, 8, 9, 8, 7, 6, 5)

# The six unit steps in axial coordinates
DIRECTIONS: Tuple[Direction, ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, -1),
    (-1, 1),
)

CENTER: Axial = (0, 0)


def hex_distance(a: Axial, b: Axial) -> int:
    """Axial hex distance: max(|dq|, |dr|, |dq + dr|)."""
    dq = a[0] - b[0]
    dr = a[1] - b[1]
    return max(abs(dq), abs(dr), abs(dq + dr))


def axial_edge_distance(coord: Axial) -> int:
    """Steps from a coordinate to the outer ring (0 on the ring itself)."""
    q, r = coord
    return min(RADIUS - abs(q), RADIUS - abs(r), RADIUS - abs(q + r))


class HexGeometry:
    """
    Immutable lookup tables for the 61-cell board.

    Attributes:
        index_to_coord: Tuple of (q, r) pairs, position i holds cell i
        coord_to_index: Mapping from (q, r) to cell index
        adjacency: Tuple of neighbour sets, position i holds cell i's neighbours
    """

    __slots__ = ("index_to_coord", "coord_to_index", "adjacency")

    def __init__(self) -> None:
        coords: List[Axial] = []
        for r in range(-RADIUS, RADIUS + 1):
            q_min = max(-RADIUS, -r - RADIUS)
            q_max = min(RADIUS, -r + RADIUS)
            for q in range(q_min, q_max + 1):
                coords.append((q, r))

        index_of: Dict[Axial, int] = {coord: i for i, coord in enumerate(coords)}

        neighbours: List[FrozenSet[int]] = []
        for q, r in coords:
            cells = set()
            for dq, dr in DIRECTIONS:
                idx = index_of.get((q + dq, r + dr))
                if idx is not None:
                    cells.add(idx)
            neighbours.append(frozenset(cells))

        self.index_to_coord: Tuple[Axial, ...] = tuple(coords)
        self.coord_to_index: Dict[Axial, int] = index_of
        self.adjacency: Tuple[FrozenSet[int], ...] = tuple(neighbours)

    def check_index(self, idx: int) -> int:
        """Return idx unchanged, or raise InvalidCellError if it is off the board."""
        if not is_cell_index(idx):
            raise InvalidCellError(idx)
        return idx

    def index_to_axial(self, idx: int) -> Axial:
        """Axial coordinate of a cell."""
        return self.index_to_coord[self.check_index(idx)]

    def axial_to_index(self, q: int, r: int) -> Optional[int]:
        """Cell index at (q, r), or None when the pair lies outside the hexagon."""
        return self.coord_to_index.get((q, r))

    def neighbors(self, idx: int) -> FrozenSet[int]:
        """On-board neighbours of a cell."""
        return self.adjacency[self.check_index(idx)]

    def step(self, idx: int, direction: Direction) -> Optional[int]:
        """
        Cell one step from idx in the given direction.

        Returns:
            Neighbouring index, or None if the step leaves the board
        """
        q, r = self.index_to_axial(idx)
        return self.coord_to_index.get((q + direction[0], r + direction[1]))

    def direction_between(self, from_idx: int, to_idx: int) -> Optional[Direction]:
        """Direction vector from one cell to another if it is a unit step, else None."""
        fq, fr = self.index_to_axial(from_idx)
        tq, tr = self.index_to_axial(to_idx)
        direction = (tq - fq, tr - fr)
        if direction in DIRECTIONS:
            return direction
        return None

    def distance_from_center(self, idx: int) -> int:
        return hex_distance(self.index_to_axial(idx), CENTER)

    def edge_distance(self, idx: int) -> int:
        return axial_edge_distance(self.index_to_axial(idx))

    def __len__(self) -> int:
        return len(self.index_to_coord)


def is_cell_index(idx) -> bool:
    """True if idx is an int in [0, 60]."""
    return isinstance(idx, int) and not isinstance(idx, bool) and 0 <= idx < NUM_CELLS


# Process-wide geometry (built on first use)
_geometry: Optional[HexGeometry] = None


def get_geometry() -> HexGeometry:
    """Return the shared HexGeometry, building it on first call."""
    global _geometry

    if _geometry is None:
        _geometry = HexGeometry()
    return _geometry


def index_to_axial(idx: int) -> Axial:
    return get_geometry().index_to_axial(idx)


def axial_to_index(q: int, r: int) -> Optional[int]:
    return get_geometry().axial_to_index(q, r)


def neighbors(idx: int) -> FrozenSet[int]:
    return get_geometry().neighbors(idx)
