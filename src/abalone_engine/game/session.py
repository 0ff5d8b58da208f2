"""
Turn orchestration for one game.

The session owns the board and both players, enforces turn order,
recomputes scores after every move and reports the end of the game.
A side without a legal move simply passes; that alone never ends the game.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..ai import HeuristicSelector
from ..core import Board, GameOverError, IllegalMoveError, Move, Player, Side
from ..core.rules import create_starting_board, get_winner, is_game_over

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnRecord:
    """One played (or passed) turn."""

    turn: int
    side: Side
    move: Optional[Move]  # None if the side had to pass
    eliminated: Tuple[int, ...] = ()


@dataclass
class GameSession:
    """
    A game between two players on one board.

    Attributes:
        primary: Player for Side.PRIMARY
        opponent: Player for Side.OPPONENT
        board: Board to play on (starting layout if None)
        selector: Move selector for AI turns (default heuristic if None)
        current_side: Side to move
    """

    primary: Player
    opponent: Player
    board: Optional[Board] = None
    selector: Optional[HeuristicSelector] = None
    current_side: Side = Side.PRIMARY
    turn: int = 1
    history: List[TurnRecord] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.primary.side is not Side.PRIMARY or self.opponent.side is not Side.OPPONENT:
            raise ValueError("primary and opponent players must hold PRIMARY and OPPONENT sides")
        if self.board is None:
            self.board = create_starting_board()
        if self.selector is None:
            self.selector = HeuristicSelector()
        self.update_scores()

    @classmethod
    def human_vs_ai(
        cls,
        human_side: Side = Side.PRIMARY,
        selector: Optional[HeuristicSelector] = None,
    ) -> "GameSession":
        """Standard game: a human and the AI, PRIMARY moving first."""
        players = {
            human_side: Player("Human", human_side),
            human_side.other: Player("AI", human_side.other, is_ai=True),
        }
        return cls(players[Side.PRIMARY], players[Side.OPPONENT], selector=selector)

    @classmethod
    def ai_vs_ai(cls, selector: Optional[HeuristicSelector] = None) -> "GameSession":
        return cls(
            Player("AI 1", Side.PRIMARY, is_ai=True),
            Player("AI 2", Side.OPPONENT, is_ai=True),
            selector=selector,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def players(self) -> Dict[Side, Player]:
        return {Side.PRIMARY: self.primary, Side.OPPONENT: self.opponent}

    def player_for(self, side: Side) -> Player:
        return self.players[side]

    @property
    def current_player(self) -> Player:
        return self.player_for(self.current_side)

    def update_scores(self) -> None:
        """Overwrite both players' scores with fresh piece counts."""
        counts = self.board.scores()
        self.primary.score = counts[Side.PRIMARY]
        self.opponent.score = counts[Side.OPPONENT]

    def is_game_over(self) -> bool:
        return is_game_over(self.board)

    def winner(self) -> Optional[Player]:
        side = get_winner(self.board)
        return self.player_for(side) if side is not None else None

    def legal_moves(self) -> List[Move]:
        return self.board.get_possible_moves(self.current_side)

    # ------------------------------------------------------------------
    # Turns
    # ------------------------------------------------------------------

    def play_move(self, move: Move) -> TurnRecord:
        """
        Play a move for the side to move.

        Raises:
            GameOverError: If the game has already ended
            IllegalMoveError: If the from cell is not the mover's or the move is illegal
        """
        if self.is_game_over():
            raise GameOverError("Game is already over")

        owner = self.board.get_player_at(move.from_idx)
        if owner is not self.current_side:
            raise IllegalMoveError(
                f"Cell {move.from_idx} does not hold a {self.current_side.name} piece"
            )

        eliminated = self.board.apply_move(move)
        record = TurnRecord(self.turn, self.current_side, move, tuple(eliminated))
        self._end_turn(record)

        if eliminated:
            logger.info(
                f"{self.player_for(record.side).name} pushed a piece off "
                f"({self.primary.score}-{self.opponent.score})"
            )
        if self.is_game_over():
            logger.info(f"Game over after {record.turn} turns: {self.winner().name} wins")
        return record

    def pass_turn(self) -> TurnRecord:
        """Skip the current side's turn (used when it has no legal move)."""
        if self.is_game_over():
            raise GameOverError("Game is already over")

        logger.warning(f"{self.current_player.name} has no legal move, turn skipped")
        record = TurnRecord(self.turn, self.current_side, None)
        self._end_turn(record)
        return record

    def play_ai_turn(self) -> TurnRecord:
        """
        Let the selector choose and play a move for the side to move.

        Returns:
            The turn record; its move is None if the side had to pass
        """
        if self.is_game_over():
            raise GameOverError("Game is already over")

        move = self.selector.select_move(self.board, self.current_side)
        if move is None:
            return self.pass_turn()
        return self.play_move(move)

    def _end_turn(self, record: TurnRecord) -> None:
        self.history.append(record)
        self.update_scores()
        self.current_side = self.current_side.other
        self.turn += 1
