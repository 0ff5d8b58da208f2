"""
Rich-based terminal display for games.

Provides:
- Board rendering with colored pieces
- Cell index map (so moves can be typed as FROM TO)
- Score, move ranking and self-play summary tables
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..ai import ScoreBreakdown
from ..core import Board, Move, Player, Side
from ..core.geometry import RADIUS

console = Console()
logger = logging.getLogger(__name__)

SIDE_STYLES = {
    Side.PRIMARY: "bold cyan",
    Side.OPPONENT: "bold yellow",
}


class BoardDisplay:
    """Rich display for boards, scores and statistics."""

    def __init__(self, console: Console = console):
        self.console = console

    def log(self, message: str, style: str = ""):
        """Log a message using rich console."""
        self.console.print(message, style=style)

    def log_info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        self.console.print(f"[green]✓[/green] {message}")

    def log_warning(self, message: str):
        self.console.print(f"[yellow]⚠[/yellow]  {message}")

    def log_error(self, message: str):
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str, players: Sequence[Player]):
        """Show game header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        for player in players:
            style = SIDE_STYLES[player.side]
            kind = "AI" if player.is_ai else "human"
            self.console.print(f"[{style}]{player.side.symbol}[/{style}] {player.name} ({kind})")
        self.console.print()

    def board_text(self, board: Board, highlight: Sequence[int] = ()) -> Text:
        """Board as styled text, hexagon-shaped."""
        text = Text()
        geometry = board.geometry
        for r in range(-RADIUS, RADIUS + 1):
            text.append(" " * abs(r))
            q_min = max(-RADIUS, -r - RADIUS)
            q_max = min(RADIUS, -r + RADIUS)
            for q in range(q_min, q_max + 1):
                idx = geometry.axial_to_index(q, r)
                owner = board.get_player_at(idx)
                if owner is None:
                    symbol, style = ".", "dim"
                else:
                    symbol, style = owner.symbol, SIDE_STYLES[owner]
                if idx in highlight:
                    style += " reverse"
                text.append(symbol, style=style)
                if q < q_max:
                    text.append(" ")
            if r < RADIUS:
                text.append("\n")
        return text

    def index_map_text(self, board: Board) -> Text:
        """Cell indices laid out like the board."""
        text = Text()
        geometry = board.geometry
        for r in range(-RADIUS, RADIUS + 1):
            text.append("  " * abs(r))
            q_min = max(-RADIUS, -r - RADIUS)
            q_max = min(RADIUS, -r + RADIUS)
            cells = [geometry.axial_to_index(q, r) for q in range(q_min, q_max + 1)]
            for i, idx in enumerate(cells):
                owner = board.get_player_at(idx)
                style = SIDE_STYLES[owner] if owner is not None else "dim"
                text.append(f"{idx:>2}", style=style)
                if i < len(cells) - 1:
                    text.append("  ")
            if r < RADIUS:
                text.append("\n")
        return text

    def show_board(
        self,
        board: Board,
        title: str = "Board",
        highlight: Sequence[int] = (),
        with_indices: bool = False,
    ):
        """Print the board (optionally next to the index map)."""
        if with_indices:
            table = Table.grid(padding=(0, 4))
            table.add_row(self.board_text(board, highlight), self.index_map_text(board))
            self.console.print(Panel(table, title=title, expand=False))
        else:
            self.console.print(Panel(self.board_text(board, highlight), title=title, expand=False))

    def show_scores(self, players: Sequence[Player], turn: Optional[int] = None) -> Table:
        """Print and return the score table."""
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Player", style="cyan")
        table.add_column("Pieces", style="white")
        if turn is not None:
            table.add_row("Turn", str(turn))
        for player in players:
            style = SIDE_STYLES[player.side]
            table.add_row(f"[{style}]{player}[/{style}]", str(player.score))
        self.console.print(table)
        return table

    def show_ranked_moves(
        self, ranked: List[Tuple[Move, ScoreBreakdown]], limit: Optional[int] = None
    ) -> Table:
        """Print a table of moves with per-factor scores."""
        table = Table(title="Legal moves")
        table.add_column("Move", style="cyan")
        for column in ("Push", "Center", "Defense", "Control", "Exposure", "Jitter", "Total"):
            table.add_column(column, justify="right")

        rows = ranked if limit is None else ranked[:limit]
        for move, score in rows:
            table.add_row(
                str(move),
                str(score.push),
                str(score.centering),
                str(score.defensive),
                str(score.control),
                str(score.vulnerability),
                str(score.jitter),
                f"[bold]{score.total}[/bold]",
            )
        self.console.print(table)
        return table

    def show_move_list(self, moves: List[Move], side: Side) -> Table:
        table = Table(title=f"Legal moves for {side.name} ({len(moves)})")
        table.add_column("From", justify="right", style="cyan")
        table.add_column("To", justify="right")
        for move in moves:
            table.add_row(str(move.from_idx), str(move.to_idx))
        self.console.print(table)
        return table

    def show_selfplay_summary(self, stats: Dict[str, float], games: int) -> Table:
        """Print self-play results."""
        table = Table(title=f"Self-play results ({games} games)")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")

        table.add_row(
            f"[{SIDE_STYLES[Side.PRIMARY]}]PRIMARY wins[/{SIDE_STYLES[Side.PRIMARY]}]",
            str(int(stats["primary_wins"])),
        )
        table.add_row(
            f"[{SIDE_STYLES[Side.OPPONENT]}]OPPONENT wins[/{SIDE_STYLES[Side.OPPONENT]}]",
            str(int(stats["opponent_wins"])),
        )
        table.add_row("Unfinished", str(int(stats["unfinished"])))
        table.add_row("Avg turns", f"{stats['avg_turns']:.1f}")
        table.add_row("Pieces pushed off", str(int(stats["eliminations"])))
        self.console.print(table)
        return table


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
