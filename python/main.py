#!/usr/bin/env python3
"""Block & Shoes Puzzle Solver.

Usage::

    python main.py                                  # solve the original puzzle
    python main.py -f rich                          # Rich terminal output
    python main.py --start "0,0 1,0 2,0 0,2"        # custom start state
    python main.py -v                               # log search statistics
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.state import InvalidConfigurationError, PuzzleState  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _parse_start(text: Optional[str]) -> PuzzleState:
    if text is None:
        return PuzzleState.initial()
    try:
        return PuzzleState.parse(text)
    except InvalidConfigurationError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--start'") from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the solution.",
    ),
    start: Optional[str] = typer.Option(
        None, "--start",
        help=(
            "Start state as eight integers in the order block, red, "
            "blue, black, e.g. \"0,0 2,0 1,1 0,2\". "
            "Defaults to the original puzzle."
        ),
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress and statistics.",
    ),
) -> None:
    """Block & Shoes Puzzle Solver."""
    _configure_logging(verbose)
    state = _parse_start(start)

    mod = importlib.import_module(_RUNNERS[frontend])
    if not mod.run(state):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
