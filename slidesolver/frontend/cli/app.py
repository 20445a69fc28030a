"""Command-line frontends: solve a puzzle file, or generate one.

Usage::

    slidesolver puzzle.txt solution.txt          # solve, write 5-line report
    slidesolver puzzle.txt solution.txt --show   # also render board + stats
    slidesolver-generate 4 puzzle.txt --seed 7   # random solvable 4×4
"""

import logging
from pathlib import Path
from typing import Optional

import rich.box
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from slidesolver.engine.generator import GameGenerator
from slidesolver.engine.solver import Solver
from slidesolver.errors import PuzzleFormatError
from slidesolver.log import configure_logging
from slidesolver.models.board import Board
from slidesolver.models.puzzlefile import (
    prepare_output,
    read_puzzle,
    write_puzzle,
    write_result,
)
from slidesolver.models.result import SearchResult

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


# -- rendering ----------------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
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

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_result(result: SearchResult) -> Table:
    table = Table(show_header=False, box=rich.box.SIMPLE)
    table.add_column(style="dim")
    table.add_column(style="bold yellow", overflow="fold")
    table.add_row("Moves", str(result.length))
    table.add_row("Path", result.moves or "-")
    table.add_row("Visited", str(result.visited))
    table.add_row("Created", str(result.created))
    table.add_row("Updated", str(result.updated))
    return table


def _fail(message: str) -> typer.Exit:
    err_console.print(
        f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True
    )
    return typer.Exit(code=1)


# -- solve --------------------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    input_path: Path = typer.Argument(
        ..., metavar="INPUT", help="Puzzle file: side length, then the tiles."
    ),
    output_path: Path = typer.Argument(
        ..., metavar="OUTPUT", help="Where to write the solution report."
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
    show: bool = typer.Option(
        False, "--show",
        help="Render the start board and search statistics.",
    ),
) -> None:
    """Solve a sliding puzzle optimally."""
    configure_logging(verbose)

    try:
        board = read_puzzle(input_path)
    except OSError as exc:
        raise _fail(
            f"File {input_path} could not be found, or cannot be read! ({exc.strerror})"
        ) from exc
    except PuzzleFormatError as exc:
        raise _fail(f"Malformed puzzle in {input_path}: {exc}") from exc

    try:
        prepare_output(output_path)
    except OSError as exc:
        raise _fail(f"File {output_path} could not be deleted! ({exc.strerror})") from exc

    if show:
        console.print(_render_board(board))

    result = Solver.solve(board)
    if result is None:
        console.print("Board is not solvable!", soft_wrap=True)
        return

    try:
        write_result(output_path, result)
    except OSError as exc:
        raise _fail(f"File {output_path} could not be written! ({exc.strerror})") from exc

    logger.info("Solved in %d moves", result.length)
    if show:
        console.print(_render_result(result))


# -- generate -----------------------------------------------------------------

generate_app = typer.Typer(add_completion=False)


@generate_app.command()
def generate(
    size: int = typer.Argument(
        ..., min=2, max=15, help="Board side length."
    ),
    output_path: Path = typer.Argument(
        ..., metavar="OUTPUT", help="Where to write the puzzle file."
    ),
    steps: Optional[int] = typer.Option(
        None, "--steps", min=1,
        help="Random blank moves from the goal. Defaults to 100 per tile.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible puzzles.",
    ),
    show: bool = typer.Option(
        False, "--show",
        help="Render the generated board.",
    ),
) -> None:
    """Write a random solvable sliding puzzle."""
    configure_logging(False)

    board = GameGenerator.generate(size, steps=steps, seed=seed)
    try:
        write_puzzle(output_path, board)
    except OSError as exc:
        raise _fail(f"File {output_path} could not be written! ({exc.strerror})") from exc

    if show:
        console.print(_render_board(board))


if __name__ == "__main__":
    app()
