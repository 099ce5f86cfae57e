# gridpath/__init__.py
from .pathfinding import AStarPathfinder

__version__ = "0.1.0"

__all__ = ['AStarPathfinder']
