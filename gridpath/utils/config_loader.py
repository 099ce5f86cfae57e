"""
Configuration loader for the gridpath pathfinder.
Loads settings and map files from YAML and validates them with the pydantic schemas.
"""

import random
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union

from pydantic import ValidationError

from config.schemas import AppConfig, GridMap, PathfinderSettings
from config import settings as config_settings
from config.settings import PATHFINDER_CONFIG_FILE
from gridpath.pathfinding.astar_pathfinder import AStarPathfinder
from gridpath.pathfinding.heuristics import get_heuristic

DEFAULT_CONFIG_DIR = Path(config_settings.__file__).resolve().parent


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return data


class ConfigLoader:
    """load yaml files and validate them into settings models"""

    def __init__(self, config_dir: Union[str, Path] = DEFAULT_CONFIG_DIR):
        self.config_dir = Path(config_dir)

    def load_app_config(self, config_file: Optional[Union[str, Path]] = None) -> AppConfig:
        """load pathfinder.yml (or an explicit file) into AppConfig"""
        path = Path(config_file) if config_file else self.config_dir / PATHFINDER_CONFIG_FILE
        try:
            return AppConfig.model_validate(_read_yaml(path))
        except ValidationError as e:
            raise ValueError(f"Invalid configuration in {path}: {e}") from e

    def load_grid_map(self, map_file: Union[str, Path]) -> GridMap:
        """load a map file holding grid, start and goal"""
        path = Path(map_file)
        if not path.is_absolute() and not path.exists():
            path = self.config_dir / "maps" / path
        try:
            return GridMap.model_validate(_read_yaml(path))
        except ValidationError as e:
            raise ValueError(f"Invalid map in {path}: {e}") from e


def build_pathfinder(settings: PathfinderSettings) -> AStarPathfinder:
    """create a pathfinder from validated settings"""
    rng = random.Random(settings.seed) if settings.seed is not None else None
    return AStarPathfinder(
        heuristic=get_heuristic(settings.heuristic.value),
        allow_diagonal=settings.allow_diagonal,
        allow_corner_cutting=settings.allow_corner_cutting,
        rng=rng
    )


# global config loader instance
_config_loader: Optional[ConfigLoader] = None

def get_config_loader() -> ConfigLoader:
    """get global config loader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader

def load_pathfinder_settings() -> PathfinderSettings:
    """convenient function - load pathfinder settings"""
    return get_config_loader().load_app_config().pathfinder
