# gridpath/pathfinding/heuristics.py
"""
Stock distance estimates for AStarPathfinder.

Each heuristic takes (point, goal) coordinates and returns a number. Any
callable with that signature works with the pathfinder; these are the
common ones.
"""

import math
from typing import Callable, Dict

from gridpath.pathfinding.grid import Coordinate


class UnknownHeuristicError(KeyError):
    """Raised when a heuristic name is not registered."""


def euclidean(point: Coordinate, goal: Coordinate) -> float:
    return math.hypot(point[0] - goal[0], point[1] - goal[1])


def manhattan(point: Coordinate, goal: Coordinate) -> float:
    return abs(point[0] - goal[0]) + abs(point[1] - goal[1])


def diagonal(point: Coordinate, goal: Coordinate) -> float:
    """Chebyshev distance: the number of king moves between the cells."""
    return max(abs(point[0] - goal[0]), abs(point[1] - goal[1]))


def octile(point: Coordinate, goal: Coordinate) -> float:
    """Diagonal distance with sqrt(2) cost for the diagonal part."""
    dx = abs(point[0] - goal[0])
    dy = abs(point[1] - goal[1])
    return max(dx, dy) + (math.sqrt(2) - 1) * min(dx, dy)


def zero(point: Coordinate, goal: Coordinate) -> float:
    """No estimate at all; the search degrades to Dijkstra."""
    return 0


HEURISTICS: Dict[str, Callable[[Coordinate, Coordinate], float]] = {
    'euclidean': euclidean,
    'manhattan': manhattan,
    'diagonal': diagonal,
    'octile': octile,
    'zero': zero,
}


def get_heuristic(name: str) -> Callable[[Coordinate, Coordinate], float]:
    """Look up a stock heuristic by name."""
    try:
        return HEURISTICS[name.lower()]
    except KeyError:
        raise UnknownHeuristicError(
            f"Unknown heuristic '{name}'. Available: {', '.join(sorted(HEURISTICS))}"
        ) from None
