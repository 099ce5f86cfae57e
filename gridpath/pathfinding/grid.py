# gridpath/pathfinding/grid.py
"""
Read-only helpers for weighted grids.

A grid is indexed grid[row][column]; a cell value of 0 is blocked and any
positive value is the cost of entering that cell. Coordinates are (x, y)
with x the column and y the row.
"""

from typing import List, Optional, Sequence, Tuple

Coordinate = Tuple[int, int]
Grid = Sequence[Sequence[int]]


class GridShapeError(ValueError):
    """Raised when a grid is empty, ragged, or holds invalid weights."""


def validate_grid(grid: Grid) -> Tuple[int, int]:
    """Check that the grid is a non-empty rectangle of non-negative integers and return (width, height)."""
    if not grid or not grid[0]:
        raise GridShapeError("grid must have at least one row and one column")

    width = len(grid[0])
    for y, row in enumerate(grid):
        if len(row) != width:
            raise GridShapeError(f"row {y} has {len(row)} cells, expected {width}")
        for x, value in enumerate(row):
            if isinstance(value, bool) or not isinstance(value, int):
                raise GridShapeError(f"cell ({x}, {y}) is not an integer: {value!r}")
            if value < 0:
                raise GridShapeError(f"cell ({x}, {y}) has negative weight {value}")

    return width, len(grid)


def in_bounds(grid: Grid, point: Coordinate) -> bool:
    x, y = point
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def is_walkable(grid: Grid, point: Coordinate) -> bool:
    """True when the point lies on the grid and its weight is non-zero."""
    return in_bounds(grid, point) and grid[point[1]][point[0]] > 0


def path_cost(grid: Grid, path: Sequence[Coordinate]) -> int:
    """Sum of the weights of every cell entered along the path (the start cell is free)."""
    return sum(grid[y][x] for x, y in path[1:])


def is_contiguous(path: Sequence[Coordinate], allow_diagonal: bool) -> bool:
    """Check that each consecutive pair of cells is a single move apart."""
    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        dx, dy = abs(x2 - x1), abs(y2 - y1)
        if max(dx, dy) != 1:
            return False
        if not allow_diagonal and dx + dy != 1:
            return False
    return True


def visualize_grid(grid: Grid, path: Optional[Sequence[Coordinate]] = None) -> str:
    """
    Create a simple ASCII visualization of the grid.

    '#' blocked, '.' walkable, '*' path, 'S' and 'G' the path endpoints.
    """
    path = [tuple(p) for p in path] if path else []
    on_path = set(path)
    visualization: List[str] = []

    for y, row in enumerate(grid):
        line = ""
        for x, value in enumerate(row):
            if path and (x, y) == path[0]:
                line += "S"
            elif path and (x, y) == path[-1]:
                line += "G"
            elif (x, y) in on_path:
                line += "*"
            elif value == 0:
                line += "#"
            else:
                line += "."
        visualization.append(line)

    return "\n".join(visualization)
