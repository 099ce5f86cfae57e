#!/usr/bin/env python3
# gridpath/main.py

"""
Command-line entry point for the gridpath pathfinder.

Loads a YAML map (grid, start, goal), builds an AStarPathfinder from
pathfinder.yml plus command-line overrides, and prints the path, its cost
and an ASCII rendering of the grid.
"""

import logging
import argparse
from collections import Counter
from typing import List, Optional

from gridpath.pathfinding.astar_pathfinder import PathfindingRequest
from gridpath.pathfinding.grid import visualize_grid
from gridpath.utils.config_loader import ConfigLoader, build_pathfinder
from gridpath.utils.logger_config import setup_logging
from config.schemas import HeuristicName, LoggingSettings, PathfinderSettings

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_INVALID_INPUT = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find a lowest-cost path on a weighted grid with A*")
    parser.add_argument("map_file", help="YAML file with 'grid', 'start' and 'goal'")
    parser.add_argument("--config", help="Settings file (defaults to config/pathfinder.yml)")
    parser.add_argument("--heuristic", choices=[h.value for h in HeuristicName],
                        help="Override the configured heuristic")
    parser.add_argument("--diagonal", dest="allow_diagonal", action="store_true", default=None,
                        help="Allow 8-directional movement")
    parser.add_argument("--no-diagonal", dest="allow_diagonal", action="store_false",
                        help="Orthogonal movement only")
    parser.add_argument("--corner-cutting", dest="allow_corner_cutting", action="store_true", default=None,
                        help="Allow diagonal steps past a blocked flanking cell")
    parser.add_argument("--seed", type=int, help="Seed the tie-break random generator")
    parser.add_argument("--max-expansions", type=int, help="Give up after this many node expansions")
    parser.add_argument("--repeat", type=int, default=1,
                        help="Run the query several times and report the distinct paths found")
    parser.add_argument("--log-level", help="Console log level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    loader = ConfigLoader()

    overrides = {
        key: value for key, value in {
            'heuristic': args.heuristic,
            'allow_diagonal': args.allow_diagonal,
            'allow_corner_cutting': args.allow_corner_cutting,
            'seed': args.seed,
            'max_expansions': args.max_expansions,
        }.items() if value is not None
    }

    try:
        app_config = loader.load_app_config(args.config)
        grid_map = loader.load_grid_map(args.map_file)
        settings = PathfinderSettings.model_validate({**app_config.pathfinder.model_dump(), **overrides})
        logging_settings = app_config.logging
        if args.log_level:
            logging_settings = LoggingSettings(level=args.log_level, dir=logging_settings.dir)
    except (FileNotFoundError, ValueError) as e:
        # Logging is not configured yet
        print(f"❌ {e}")
        return EXIT_INVALID_INPUT

    setup_logging(logging_settings.level, logging_settings.dir)
    logger.info(f"Pathfinder settings: {settings.model_dump(mode='json')}")

    pathfinder = build_pathfinder(settings)
    request = PathfindingRequest(
        grid=grid_map.grid,
        start=grid_map.start,
        goal=grid_map.goal,
        max_expansions=settings.max_expansions
    )

    results = [pathfinder.find_path(request) for _ in range(max(1, args.repeat))]
    result = results[0]

    if not result.success:
        print(f"No path from {list(grid_map.start)} to {list(grid_map.goal)}: {result.failure_reason}")
        print(visualize_grid(grid_map.grid))
        return EXIT_NO_PATH

    print(f"Path ({len(result.path)} cells, cost {result.path_cost}, "
          f"{result.nodes_explored} expansions):")
    print(" -> ".join(f"({x},{y})" for x, y in result.path))
    print(visualize_grid(grid_map.grid, result.path))

    if len(results) > 1:
        distinct = Counter(tuple(r.path) for r in results)
        print(f"\n{len(distinct)} distinct path(s) over {len(results)} runs")
        for path, count in distinct.most_common():
            print(f"  {count:>4}x  " + " -> ".join(f"({x},{y})" for x, y in path))

    stats = pathfinder.get_statistics()
    logger.info(f"Success rate {stats['success_rate']:.1f}% over {stats['total_requests']} request(s)")
    return EXIT_FOUND


if __name__ == "__main__":
    import sys
    sys.exit(main(sys.argv[1:]))
