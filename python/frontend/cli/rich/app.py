"""Rich terminal frontend — the solution path as a styled table.

Uses the ``rich`` library for output while sharing the same backend
as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from backend.engine.gamesolver import BreadthFirstSearch, Node
from backend.models.state import PuzzleState

console = Console()


def _render_path(goal: Node) -> Table:
    """Return a Rich Table with one row per step, start state first."""
    table = Table(
        box=rich.box.HEAVY,
        border_style="bright_blue",
        header_style="bold cyan",
    )
    table.add_column("Step", justify="right")
    table.add_column("Move", justify="center")
    table.add_column("Block · Red · Blue · Black")

    for node in BreadthFirstSearch.path(goal):
        move = (
            "[dim]start[/dim]"
            if node.direction is None
            else f"[bold]{node.direction.name}[/bold]"
        )
        state = (
            f"[bold green]{escape(str(node.state))}[/bold green]"
            if node.state.is_goal()
            else escape(str(node.state))
        )
        table.add_row(str(node.depth), move, state)

    return table


def run(state: PuzzleState) -> bool:
    """Solve *state* and print the outcome. Returns True if solved."""
    bfs = BreadthFirstSearch()
    goal = bfs.search(state)

    if goal is None:
        console.print(
            Panel(
                f"No solution reachable from {escape(str(state))}",
                title="[bold red]No solution[/bold red]",
                border_style="red",
            )
        )
        console.print(f"[dim]Explored {bfs.seen} states.[/dim]")
        return False

    console.print("[bold green]Solution:[/bold green]")
    console.print(_render_path(goal))
    console.print(
        f"[dim]{goal.depth} moves, "
        f"{bfs.expanded} expanded, {bfs.seen} states seen.[/dim]"
    )
    return True
