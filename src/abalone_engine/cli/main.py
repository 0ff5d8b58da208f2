"""
Main CLI for the Abalone engine.
"""

import argparse
import logging
import sys

from ..ai import HeuristicSelector, MoveEvaluator
from ..core import AbaloneError, Move, Side, create_starting_board
from ..core.rules import get_game_result
from ..game import GameSession, run_selfplay, summarize_outcomes
from ..utils.rich_display import BoardDisplay, setup_rich_logging

QUIT_WORDS = ("q", "quit", "exit")


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_move(text: str) -> Move:
    """
    Parse a move typed as two cell indices, e.g. "52 44" or "52,44".

    Raises:
        ValueError: If the text is not two integers or an index is off the board
    """
    parts = text.replace(",", " ").replace("->", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Expected FROM TO, got {text!r}")
    try:
        from_idx, to_idx = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Cell indices must be integers, got {text!r}")
    return Move(from_idx, to_idx)


def play_command(args, input_fn=input):
    """Play against the AI in the terminal."""
    setup_rich_logging(args.log_level)
    logger = logging.getLogger(__name__)

    human_side = Side.parse(args.human_side)
    selector = HeuristicSelector(MoveEvaluator(seed=args.seed))
    session = GameSession.human_vs_ai(human_side, selector)
    display = BoardDisplay()

    display.show_header("Abalone - Human vs AI", [session.primary, session.opponent])
    logger.debug(f"Human plays {human_side.name}, seed={args.seed}")

    while not session.is_game_over():
        display.show_board(session.board, title=f"Turn {session.turn}", with_indices=True)
        display.show_scores([session.primary, session.opponent])
        player = session.current_player

        if player.is_ai:
            record = session.play_ai_turn()
            if record.move is None:
                display.log_warning(f"{player.name} has no legal move and passes")
            else:
                display.log_info(f"{player.name} plays {record.move}")
            continue

        if not session.legal_moves():
            session.pass_turn()
            display.log_warning("You have no legal move and pass")
            continue

        try:
            raw = input_fn(f"{player.name} ({player.side.symbol}) move [FROM TO, q to quit]: ")
        except EOFError:
            raw = "q"
        if raw.strip().lower() in QUIT_WORDS:
            display.log("Game abandoned.")
            return

        try:
            session.play_move(parse_move(raw))
        except (AbaloneError, ValueError) as e:
            display.log_error(str(e))

    names = {side: p.name for side, p in session.players.items()}
    display.show_board(session.board, title="Final position")
    display.log_success(get_game_result(session.board, names))


def selfplay_command(args):
    """Run AI-vs-AI games and summarize the results."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    logger.info(f"Self-play: {args.games} games, max {args.max_turns} turns, seed={args.seed}")
    display = BoardDisplay()

    outcomes = run_selfplay(
        games=args.games,
        max_turns=args.max_turns,
        seed=args.seed,
        show_progress=not args.no_progress,
    )
    display.show_selfplay_summary(summarize_outcomes(outcomes), len(outcomes))


def moves_command(args):
    """List (and optionally score) the legal moves of the starting position."""
    setup_logging(args.log_level)

    side = Side.parse(args.side)
    board = create_starting_board()
    display = BoardDisplay()
    display.show_board(board, title="Starting position", with_indices=True)

    if args.scores:
        selector = HeuristicSelector(MoveEvaluator(seed=args.seed))
        display.show_ranked_moves(selector.rank_moves(board, side), limit=args.limit)
    else:
        display.show_move_list(board.get_possible_moves(side), side)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hexagonal marble-pushing game engine")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play against the AI")
    play_parser.add_argument(
        "--human-side",
        choices=["primary", "opponent"],
        default="primary",
        help="Side for the human player (primary moves first)",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for the AI tie-break"
    )
    play_parser.set_defaults(func=play_command)

    # Self-play command
    selfplay_parser = subparsers.add_parser("selfplay", help="Run AI-vs-AI games")
    selfplay_parser.add_argument("--games", type=int, default=10, help="Number of games")
    selfplay_parser.add_argument(
        "--max-turns", type=int, default=200, help="Turns before a game counts as unfinished"
    )
    selfplay_parser.add_argument("--seed", type=int, default=None)
    selfplay_parser.add_argument(
        "--no-progress", action="store_true", help="Hide the progress bar"
    )
    selfplay_parser.set_defaults(func=selfplay_command)

    # Moves command
    moves_parser = subparsers.add_parser("moves", help="List legal moves of the starting position")
    moves_parser.add_argument("--side", choices=["primary", "opponent"], default="primary")
    moves_parser.add_argument(
        "--scores", action="store_true", help="Show heuristic scores, best first"
    )
    moves_parser.add_argument("--limit", type=int, default=None, help="Show at most N moves")
    moves_parser.add_argument("--seed", type=int, default=None)
    moves_parser.set_defaults(func=moves_command)

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
