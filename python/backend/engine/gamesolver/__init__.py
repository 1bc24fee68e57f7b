from backend.engine.gamesolver.node import Node, NoNextChildError
from backend.engine.gamesolver.solver import BreadthFirstSearch, Solver

__all__ = ["BreadthFirstSearch", "Node", "NoNextChildError", "Solver"]
