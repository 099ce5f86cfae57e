# gridpath/pathfinding/astar_pathfinder.py
import heapq
import logging
import random
import threading
import time
from typing import List, Tuple, Dict, Optional, Callable, Iterator
from dataclasses import dataclass, field

from gridpath.utils.logger_config import SEARCH_LOGGER_NAME, get_search_logger
from gridpath.pathfinding.grid import (
    Coordinate,
    Grid,
    GridShapeError,
    is_walkable,
    path_cost,
    validate_grid,
)

logger = logging.getLogger(__name__)
search_logger = get_search_logger(SEARCH_LOGGER_NAME + ".astar")

Heuristic = Callable[[Coordinate, Coordinate], float]

ORTHOGONAL_DIRECTIONS = [(0, 1), (1, 0), (0, -1), (-1, 0)]
DIAGONAL_DIRECTIONS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]


@dataclass
class GridNode:
    """Search-scoped node for A* pathfinding."""
    x: int
    y: int
    g_cost: float = 0.0  # Cost from start
    h_cost: float = 0.0  # Heuristic cost to goal
    f_cost: float = field(init=False)

    def __post_init__(self):
        self.f_cost = self.g_cost + self.h_cost

    @property
    def position(self) -> Coordinate:
        return self.x, self.y


@dataclass
class PathfindingRequest:
    """Request for pathfinding service."""
    grid: Grid
    start: Coordinate
    goal: Coordinate
    max_expansions: Optional[int] = None  # Give up after this many node expansions


@dataclass
class PathfindingResult:
    """Result of pathfinding operation."""
    success: bool
    path: List[Coordinate] = field(default_factory=list)
    path_cost: float = 0.0
    computation_time: float = 0.0
    nodes_explored: int = 0
    failure_reason: Optional[str] = None


@dataclass
class _SearchOutcome:
    path: List[Coordinate]
    nodes_explored: int
    budget_exhausted: bool = False


class AStarPathfinder:
    """
    A* pathfinding over a weighted grid.

    Features:
    - Cell weights as entry costs (0 = blocked)
    - Orthogonal or 8-directional movement
    - Caller supplied heuristic
    - Random choice among frontier nodes sharing the lowest f cost

    The grid is never written to and every call allocates its own open set,
    cost map and predecessor map, so one instance can serve several threads.
    """

    def __init__(self, heuristic: Heuristic, allow_diagonal: bool = False,
                 allow_corner_cutting: bool = False, rng: Optional[random.Random] = None):
        self.heuristic = heuristic
        self.allow_diagonal = allow_diagonal
        self.allow_corner_cutting = allow_corner_cutting
        self.rng = rng if rng is not None else random.Random()

        self.directions = list(ORTHOGONAL_DIRECTIONS)
        if allow_diagonal:
            self.directions.extend(DIAGONAL_DIRECTIONS)

        # Statistics
        self._stats_lock = threading.Lock()
        self.total_requests = 0
        self.successful_paths = 0

    def get_path(self, grid: Grid, start: Coordinate, goal: Coordinate) -> List[Coordinate]:
        """
        Find a lowest-cost path from start to goal.

        Returns the cells from start to goal inclusive, or an empty list when
        start equals goal, either endpoint is blocked or out of bounds, or the
        goal cannot be reached.
        """
        start, goal = tuple(start), tuple(goal)
        if start == goal:
            return []
        if not is_walkable(grid, start) or not is_walkable(grid, goal):
            return []

        outcome = self._search(grid, start, goal)
        if outcome.path:
            search_logger.debug(f"Path {start} -> {goal}: {len(outcome.path)} cells",
                                expansions=outcome.nodes_explored)
        else:
            search_logger.debug(f"No path {start} -> {goal}", expansions=outcome.nodes_explored)
        return outcome.path

    def find_path(self, request: PathfindingRequest) -> PathfindingResult:
        """Run a search for a request and report cost, timing and failure reason."""
        start_time = time.time()

        with self._stats_lock:
            self.total_requests += 1

        try:
            validate_grid(request.grid)
        except GridShapeError as e:
            logger.warning(f"Rejected pathfinding request: {e}")
            return PathfindingResult(success=False, failure_reason=f"invalid grid: {e}")

        start, goal = tuple(request.start), tuple(request.goal)
        if start == goal:
            return PathfindingResult(success=False, failure_reason="start equals goal")
        if not is_walkable(request.grid, start) or not is_walkable(request.grid, goal):
            return PathfindingResult(success=False, failure_reason="start or goal not walkable")

        outcome = self._search(request.grid, start, goal, request.max_expansions)
        computation_time = time.time() - start_time

        if not outcome.path:
            reason = "expansion budget exhausted" if outcome.budget_exhausted else "no path found"
            search_logger.debug(f"No path {start} -> {goal}: {reason}", expansions=outcome.nodes_explored)
            return PathfindingResult(
                success=False,
                computation_time=computation_time,
                nodes_explored=outcome.nodes_explored,
                failure_reason=reason
            )

        with self._stats_lock:
            self.successful_paths += 1

        cost = path_cost(request.grid, outcome.path)
        search_logger.debug(f"Path {start} -> {goal}: {len(outcome.path)} cells, cost {cost}, "
                            f"{computation_time:.4f}s", expansions=outcome.nodes_explored)
        return PathfindingResult(
            success=True,
            path=outcome.path,
            path_cost=cost,
            computation_time=computation_time,
            nodes_explored=outcome.nodes_explored
        )

    def _search(self, grid: Grid, start: Coordinate, goal: Coordinate,
                max_expansions: Optional[int] = None) -> _SearchOutcome:
        open_heap: List[Tuple[float, int, GridNode]] = []
        best_cost: Dict[Coordinate, float] = {start: 0}
        came_from: Dict[Coordinate, Coordinate] = {}
        counter = 0

        start_node = GridNode(x=start[0], y=start[1], g_cost=0, h_cost=self.heuristic(start, goal))
        heapq.heappush(open_heap, (start_node.f_cost, counter, start_node))
        nodes_explored = 0

        while open_heap:
            current = self._pop_lowest(open_heap, best_cost)
            if current is None:
                break
            current_pos = current.position

            if current_pos == goal:
                return _SearchOutcome(self._reconstruct_path(came_from, goal), nodes_explored)

            if max_expansions is not None and nodes_explored >= max_expansions:
                return _SearchOutcome([], nodes_explored, budget_exhausted=True)

            nodes_explored += 1

            for neighbor_pos in self._get_neighbors(grid, current_pos):
                tentative_g_cost = current.g_cost + grid[neighbor_pos[1]][neighbor_pos[0]]
                known = best_cost.get(neighbor_pos)
                if known is not None and tentative_g_cost >= known:
                    continue

                # Strictly better route: a closed cell goes back on the frontier
                best_cost[neighbor_pos] = tentative_g_cost
                came_from[neighbor_pos] = current_pos
                neighbor = GridNode(
                    x=neighbor_pos[0],
                    y=neighbor_pos[1],
                    g_cost=tentative_g_cost,
                    h_cost=self.heuristic(neighbor_pos, goal)
                )
                counter += 1
                heapq.heappush(open_heap, (neighbor.f_cost, counter, neighbor))

        return _SearchOutcome([], nodes_explored)

    def _pop_lowest(self, open_heap: List[Tuple[float, int, GridNode]],
                    best_cost: Dict[Coordinate, float]) -> Optional[GridNode]:
        """Pop every live entry sharing the lowest f cost and pick one of them at random."""
        ties: List[Tuple[float, int, GridNode]] = []
        while open_heap:
            entry = heapq.heappop(open_heap)
            node = entry[2]
            # Every pushed node has a best_cost entry
            if best_cost.get(node.position) != node.g_cost:
                continue  # superseded by a cheaper route
            if ties and entry[0] != ties[0][0]:
                heapq.heappush(open_heap, entry)
                break
            ties.append(entry)

        if not ties:
            return None

        chosen = ties.pop(self.rng.randrange(len(ties)))
        for entry in ties:
            heapq.heappush(open_heap, entry)
        return chosen[2]

    def _get_neighbors(self, grid: Grid, pos: Coordinate) -> Iterator[Coordinate]:
        """Yield walkable neighbor cells under the movement rule."""
        x, y = pos
        for dx, dy in self.directions:
            neighbor = (x + dx, y + dy)
            if not is_walkable(grid, neighbor):
                continue
            if dx and dy and not self.allow_corner_cutting:
                # Diagonal steps need both flanking cells open
                if not is_walkable(grid, (x + dx, y)) or not is_walkable(grid, (x, y + dy)):
                    continue
            yield neighbor

    def _reconstruct_path(self, came_from: Dict[Coordinate, Coordinate], goal: Coordinate) -> List[Coordinate]:
        """Reconstruct path from goal to start."""
        path = [goal]
        current = goal

        while current in came_from:
            current = came_from[current]
            path.append(current)

        path.reverse()
        return path

    def get_statistics(self) -> Dict:
        """Get pathfinding statistics."""
        with self._stats_lock:
            total_requests = self.total_requests
            successful_paths = self.successful_paths
        success_rate = (successful_paths / total_requests * 100) if total_requests > 0 else 0

        return {
            'total_requests': total_requests,
            'successful_paths': successful_paths,
            'success_rate': success_rate,
            'heuristic': getattr(self.heuristic, '__name__', repr(self.heuristic)),
            'allow_diagonal': self.allow_diagonal,
            'allow_corner_cutting': self.allow_corner_cutting
        }
