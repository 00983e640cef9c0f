"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output and the shared keypress
reader for input.  Tiles are labelled ``1 .. N²-1`` (identifier + 1) so a
finished board reads in order; the empty slot is drawn as a dot.
"""

from __future__ import annotations

import logging
import random
import sys

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import MAX_SIZE, MENU_SIZES, MIN_SIZE
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import PuzzleSession
from backend.models.board import Board, Direction
from backend.models.session import SessionSnapshot
from frontend.cli.input_handler import get_key, get_key_timeout

logger = logging.getLogger(__name__)

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: int) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}"


def _tile_label(tile: int) -> str:
    return str(tile + 1)


def _stats_text(snapshot: SessionSnapshot) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(snapshot.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(snapshot.seconds), style="bold yellow")
    return stats


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, movable: tuple[int, ...] = ()) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(_tile_label(board.empty_tile - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r in range(board.size):
        cells: list[str] = []
        for c in range(board.size):
            position = r * board.size + c
            tile = board.get_tile(r, c)
            label = f"{_tile_label(tile):>{width}}"
            if tile == board.empty_tile:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(position):
                cells.append(f"[bold green]{label}[/bold green]")
            elif position in movable:
                cells.append(f"[bold cyan]{label}[/bold cyan]")
            else:
                cells.append(f"[bold white]{label}[/bold white]")
        table.add_row(*cells)

    return table


# -- input routing ------------------------------------------------------------


def _handle_key(session: PuzzleSession, key: str) -> str:
    """Apply a gameplay key to *session*.  Returns a status message."""
    if key in _DIRECTIONS:
        before = session.snapshot()
        after = session.move(_DIRECTIONS[key])
        if after.moves == before.moves:
            return "[dim]Nothing to slide that way.[/dim]"
        return ""

    if key.isdigit() and key != "0":
        tile = int(key) - 1
        snapshot = session.snapshot()
        if tile >= len(snapshot.board) - 1:
            return f"[yellow]There is no tile {key}.[/yellow]"
        after = session.apply_move(snapshot.board.index(tile))
        if after.moves == snapshot.moves:
            return f"[dim]Tile {key} is not next to the gap.[/dim]"
        return ""

    if key == "restart":
        session.create(session.snapshot().size)
        return "[yellow]Shuffled![/yellow]"

    return ""


# -- menu screen --------------------------------------------------------------


def _draw_menu(sel_size: int) -> None:
    """Draw the main menu."""
    console.clear()

    sizes = Text()
    for i, s in enumerate(sorted({*MENU_SIZES, sel_size})):
        if i:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]P I C T U R E   P U Z Z L E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _draw_game(session: PuzzleSession, status: str = "") -> None:
    """Draw the game screen."""
    console.clear()

    snapshot = session.snapshot()
    size = snapshot.size
    board_table = _render_board(snapshot.to_board(), session.movable_positions())

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("1-9", style="bold cyan")
    controls.append("  tile   ", style="dim")
    controls.append("P", style="bold cyan")
    controls.append("  peek   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(board_table),
        title=f"[bold cyan]Picture Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    # Save the cursor right before the stats line so _update_time() can
    # overwrite only this line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats_text(snapshot)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _update_time(snapshot: SessionSnapshot) -> None:
    """Overwrite just the stats line using the saved cursor position."""
    _DIM = "\033[2m"
    _YB = "\033[33;1m"
    _RS = "\033[0m"

    clock = _format_time(snapshot.seconds)
    stats_raw = (
        f"{_DIM}Moves: {_RS}{_YB}{snapshot.moves}{_RS}"
        f"    {_DIM}Time: {_RS}{_YB}{clock}{_RS}"
    )
    visible_len = len(f"Moves: {snapshot.moves}    Time: {clock}")
    pad = max(0, (console.width - visible_len) // 2)

    sys.stdout.write(f"\033[u\033[K{' ' * pad}{stats_raw}")
    sys.stdout.flush()


def _draw_peek(size: int) -> None:
    """Show the finished arrangement until a key is pressed."""
    console.clear()
    panel = Panel(
        Align.center(_render_board(GameGenerator.solved(size))),
        title="[bold yellow]Original[/bold yellow]",
        border_style="yellow",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to return.\n", style="dim")))


def _draw_win(snapshot: SessionSnapshot) -> None:
    console.clear()

    size = snapshot.size

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("SOLVED!", style="bold green")
    congrats.append("  Excellent work.  ", style="green")
    congrats.append("★\n", style="bold yellow")

    group = Group(
        Align.center(_render_board(snapshot.to_board())),
        Align.center(congrats),
        Align.center(_stats_text(snapshot)),
    )

    panel = Panel(
        group,
        title=f"[bold green]Picture Puzzle  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _play_game(session: PuzzleSession, size: int) -> None:
    session.create(size)
    status = ""

    while True:
        snapshot = session.sync_clock()

        if session.is_won:
            _draw_win(snapshot)
            while True:
                key = get_key()
                if key == "restart":
                    session.create(size)
                    break
                if key == "quit":
                    return
            continue

        _draw_game(session, status)
        status = ""

        # Poll with a short timeout so the clock keeps ticking.
        while True:
            key = get_key_timeout(0.5)
            if key is not None:
                break
            _update_time(session.sync_clock())

        session.sync_clock()
        if key == "quit":
            session.timer.cancel()
            return
        if key == "peek":
            _draw_peek(size)
            get_key()
            continue
        status = _handle_key(session, key)


# -- menu loop ----------------------------------------------------------------


def _menu_loop(session: PuzzleSession, sel_size: int) -> None:
    while True:
        _draw_menu(sel_size)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            sel_size = max(MIN_SIZE, sel_size - 1)
        elif key == "right":
            sel_size = min(MAX_SIZE, sel_size + 1)
        elif key in ("1", "enter"):
            _play_game(session, sel_size)


# -- public entry point -------------------------------------------------------


def run(size: int = 3, seed: int | None = None, play: bool = False) -> None:
    """Launch the Rich CLI, optionally skipping straight into a game."""
    session = PuzzleSession(rng=random.Random(seed))
    logger.debug("Launching rich frontend (size=%d, seed=%r)", size, seed)
    if play:
        _play_game(session, size)
        return
    _menu_loop(session, size)
