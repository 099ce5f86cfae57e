# gridpath/pathfinding/__init__.py
from .astar_pathfinder import AStarPathfinder, PathfindingRequest, PathfindingResult
from .grid import GridShapeError, validate_grid, path_cost, is_contiguous, visualize_grid
from .heuristics import HEURISTICS, UnknownHeuristicError, get_heuristic

__all__ = [
    'AStarPathfinder', 'PathfindingRequest', 'PathfindingResult',
    'GridShapeError', 'validate_grid', 'path_cost', 'is_contiguous', 'visualize_grid',
    'HEURISTICS', 'UnknownHeuristicError', 'get_heuristic',
]
