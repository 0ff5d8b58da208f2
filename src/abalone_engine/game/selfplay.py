"""
AI-vs-AI games for exercising and comparing the heuristic.

Heuristic players can shuffle pieces back and forth forever, so every game
is bounded by max_turns. A game that reaches the bound is reported as
unfinished; the rules themselves have no draw.
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional

from tqdm import tqdm

from ..ai import HeuristicSelector, HeuristicWeights, MoveEvaluator
from ..core import Side
from .session import GameSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameOutcome:
    """Result of one self-play game."""

    winner: Optional[Side]  # None if unfinished
    turns: int
    scores: Dict[Side, int]
    eliminations: int


def play_game(session: GameSession, max_turns: int = 200) -> GameOutcome:
    """
    Play AI turns until the game ends or max_turns turns have been played.

    Args:
        session: Session to play (both sides are driven by its selector)
        max_turns: Upper bound on turns

    Returns:
        GameOutcome
    """
    eliminations = 0
    while not session.is_game_over() and len(session.history) < max_turns:
        record = session.play_ai_turn()
        eliminations += len(record.eliminated)

    winner = session.winner()
    return GameOutcome(
        winner=winner.side if winner is not None else None,
        turns=len(session.history),
        scores=session.board.scores(),
        eliminations=eliminations,
    )


def run_selfplay(
    games: int,
    max_turns: int = 200,
    seed: Optional[int] = None,
    weights: Optional[HeuristicWeights] = None,
    show_progress: bool = True,
) -> List[GameOutcome]:
    """
    Play a batch of AI-vs-AI games.

    Args:
        games: Number of games
        max_turns: Turn bound per game
        seed: Seed for the tie-break random source (reproducible batch)
        weights: Heuristic weights for both sides
        show_progress: Show a tqdm progress bar

    Returns:
        One GameOutcome per game
    """
    rng = random.Random(seed)
    selector = HeuristicSelector(MoveEvaluator(weights=weights, rng=rng))

    outcomes = []
    with tqdm(total=games, desc="Self-play", unit=" game", disable=not show_progress) as pbar:
        for game_number in range(1, games + 1):
            outcome = play_game(GameSession.ai_vs_ai(selector), max_turns=max_turns)
            outcomes.append(outcome)

            winner = outcome.winner.name if outcome.winner is not None else "unfinished"
            logger.debug(f"Game {game_number}: {winner} after {outcome.turns} turns")
            pbar.set_postfix(last=winner)
            pbar.update(1)

    return outcomes


def summarize_outcomes(outcomes: List[GameOutcome]) -> Dict[str, float]:
    """Aggregate win counts, unfinished games, average length and eliminations."""
    total = len(outcomes)
    return {
        "primary_wins": sum(1 for o in outcomes if o.winner is Side.PRIMARY),
        "opponent_wins": sum(1 for o in outcomes if o.winner is Side.OPPONENT),
        "unfinished": sum(1 for o in outcomes if o.winner is None),
        "avg_turns": sum(o.turns for o in outcomes) / total if total else 0.0,
        "eliminations": sum(o.eliminations for o in outcomes),
    }
