"""Game orchestration on top of the core engine."""

from .session import GameSession, TurnRecord
from .selfplay import GameOutcome, play_game, run_selfplay, summarize_outcomes

__all__ = [
    "GameSession",
    "TurnRecord",
    "GameOutcome",
    "play_game",
    "run_selfplay",
    "summarize_outcomes",
]
