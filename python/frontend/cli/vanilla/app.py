"""Vanilla terminal frontend — no third-party dependencies.

Prints the solution path one node per line, the way the puzzle's
reference output reads::

    Solution:
    [(0,0),(2,0),(1,1),(0,2)]
    RIGHT [(0,1),(2,0),(1,1),(0,2)]
    ...
"""

from __future__ import annotations

from backend.engine.gamesolver import BreadthFirstSearch, Node
from backend.models.state import PuzzleState


def _render_path(goal: Node) -> str:
    return "\n".join(str(n) for n in BreadthFirstSearch.path(goal))


def run(state: PuzzleState) -> bool:
    """Solve *state* and print the outcome. Returns True if solved."""
    goal = BreadthFirstSearch().search(state)
    if goal is None:
        print("No solution")
        return False

    print("Solution:")
    print(_render_path(goal))
    return True
