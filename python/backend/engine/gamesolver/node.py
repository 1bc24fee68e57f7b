"""Search-tree node wrapping a puzzle state."""

from __future__ import annotations

from backend.models.position import Direction
from backend.models.state import PuzzleState


class NoNextChildError(LookupError):
    """Raised when a node has no unexplored directions left."""


class Node:
    """A puzzle state plus the bookkeeping breadth-first search needs.

    Nodes compare and hash by their state alone, so two nodes reached
    along different paths are the same node to the search. A node is
    never equal to itself: equality is meant for comparing distinct
    nodes only.
    """

    def __init__(
        self,
        state: PuzzleState,
        parent: Node | None = None,
        direction: Direction | None = None,
    ) -> None:
        self.state = state
        self.parent = parent
        self.direction = direction
        self.depth: int = 0 if parent is None else parent.depth + 1
        legal = state.legal_moves()
        self._operators: list[Direction] = [d for d in Direction if d in legal]

    # -- expansion ------------------------------------------------------------

    def has_next_child(self) -> bool:
        return bool(self._operators)

    def next_child(self) -> Node:
        """Consume one unexplored direction and return the resulting child."""
        if not self._operators:
            raise NoNextChildError(f"No unexplored moves left from {self.state}.")
        direction = self._operators.pop(0)
        state = self.state.copy()
        state.move(direction)
        return Node(state, self, direction)

    # -- value semantics ------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if other is self:
            return False
        return isinstance(other, Node) and self.state == other.state

    def __hash__(self) -> int:
        return hash(self.state)

    def __str__(self) -> str:
        if self.parent is None:
            return str(self.state)
        return f"{self.direction.name} {self.state}"

    def __repr__(self) -> str:
        return f"Node({self})"
