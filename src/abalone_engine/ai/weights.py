"""Tunable constants for the move heuristic."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HeuristicWeights:
    """
    Multipliers for each heuristic factor.

    The defensive weight is far above everything else so that removing an
    immediate threat of losing a piece always wins over other factors.
    """

    # Push strength
    push_per_piece: int = 10  # per piece of size advantage
    elimination: int = 100  # flat bonus for pushing a piece off the board
    edge_pressure: int = 30  # per step the pushed group moves toward the edge

    # Positional
    centering: int = 20  # per step the leading piece moves toward the center

    # One-ply simulation
    defensive: int = 10_000  # per opponent winning move removed
    control: int = 5  # per point of mobility differential gained
    vulnerability: int = 200  # per exposed piece protected (signed)

    # Random tie-break, uniform in [0, jitter - 1]; 0 disables it
    jitter: int = 10

    def __post_init__(self) -> None:
        if self.jitter < 0:
            raise ValueError(f"jitter must be >= 0, got {self.jitter}")


DEFAULT_WEIGHTS = HeuristicWeights()

# Same factors without the random tie-break (reproducible scores)
DETERMINISTIC_WEIGHTS = HeuristicWeights(jitter=0)
