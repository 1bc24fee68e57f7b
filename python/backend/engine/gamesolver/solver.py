"""Breadth-first solver for the block & shoes puzzle."""

from __future__ import annotations

import logging
from collections import deque

from backend.engine.gamesolver.node import Node
from backend.models.position import Direction
from backend.models.state import PuzzleState

logger = logging.getLogger(__name__)


class BreadthFirstSearch:
    """One breadth-first search over the states reachable from a start.

    Each call to :meth:`search` owns its frontier and seen-set; the
    counters describe the most recent call.
    """

    def __init__(self) -> None:
        self.expanded: int = 0
        self.seen: int = 0

    def search(self, state: PuzzleState) -> Node | None:
        """Return a goal node at minimum depth, or ``None`` if unreachable."""
        logger.debug("Searching from %s", state)
        start = Node(state.copy())
        frontier: deque[Node] = deque([start])
        seen: set[Node] = {start}
        self.expanded = 0

        while frontier:
            # A node counts as a solution as soon as it heads the queue.
            selected = frontier[0]
            if selected.state.is_goal():
                self.seen = len(seen)
                logger.debug(
                    "Solved at depth %d (expanded %d, seen %d)",
                    selected.depth, self.expanded, self.seen,
                )
                return selected

            frontier.popleft()
            self.expanded += 1
            while selected.has_next_child():
                child = selected.next_child()
                if child not in seen:
                    frontier.append(child)
                    seen.add(child)

        self.seen = len(seen)
        logger.debug(
            "No solution (expanded %d, seen %d)", self.expanded, self.seen
        )
        return None

    @staticmethod
    def path(node: Node) -> list[Node]:
        """Return the nodes from the root down to *node*."""
        nodes: list[Node] = []
        current: Node | None = node
        while current is not None:
            nodes.append(current)
            current = current.parent
        nodes.reverse()
        return nodes


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def search(state: PuzzleState) -> Node | None:
        """Return the goal node of a shortest solution, or ``None``."""
        return BreadthFirstSearch().search(state)

    @staticmethod
    def solve(state: PuzzleState) -> list[Direction] | None:
        """Return a shortest move sequence for *state*.

        ``[]`` means *state* is already solved, ``None`` that no goal is
        reachable.
        """
        goal = Solver.search(state)
        if goal is None:
            return None
        return [n.direction for n in BreadthFirstSearch.path(goal)[1:]]

    @staticmethod
    def hint(state: PuzzleState) -> Direction | None:
        """Return the first move of a shortest solution, or ``None`` if solved / unsolvable."""
        if state.is_goal():
            return None

        moves = Solver.solve(state)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(state: PuzzleState) -> bool:
        """Return True if *state* can reach a goal state."""
        return Solver.search(state) is not None
