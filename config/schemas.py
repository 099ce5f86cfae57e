# config/schemas.py
from typing import Optional, List, Tuple
from pydantic import BaseModel, Field, field_validator, model_validator
from enum import Enum
from gridpath.pathfinding.grid import validate_grid, in_bounds
from config.settings import DEFAULT_HEURISTIC, ALLOW_DIAGONAL, ALLOW_CORNER_CUTTING, LOG_LEVEL, LOG_DIR

# --- Enums ---

class HeuristicName(str, Enum):
    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"
    DIAGONAL = "diagonal"    # Chebyshev distance
    OCTILE = "octile"
    ZERO = "zero"            # Dijkstra

# --- Configuration file sections ---

class PathfinderSettings(BaseModel):
    """Settings used to build an AStarPathfinder."""
    heuristic: HeuristicName = Field(HeuristicName(DEFAULT_HEURISTIC), description="Name of the stock heuristic.")
    allow_diagonal: bool = Field(ALLOW_DIAGONAL, description="Allow 8-directional movement.")
    allow_corner_cutting: bool = Field(ALLOW_CORNER_CUTTING, description="Allow diagonal steps past a blocked flanking cell.")
    seed: Optional[int] = Field(None, description="Seed for the tie-break random generator.")
    max_expansions: Optional[int] = Field(None, gt=0, description="Give up after this many node expansions.")

class LoggingSettings(BaseModel):
    level: str = Field(LOG_LEVEL, description="Console log level name.")
    dir: str = Field(LOG_DIR, description="Directory for rotating log files.")

    @field_validator('level')
    @classmethod
    def known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return value

class AppConfig(BaseModel):
    """Top level of pathfinder.yml."""
    pathfinder: PathfinderSettings = Field(default_factory=PathfinderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

# --- Map files ---

class GridMap(BaseModel):
    """A weighted grid with the query to run on it."""
    grid: List[List[int]] = Field(..., description="Rows of cell weights, 0 = blocked.")
    start: Tuple[int, int] = Field(..., description="Start cell as [x, y].")
    goal: Tuple[int, int] = Field(..., description="Goal cell as [x, y].")

    @model_validator(mode='after')
    def check_shape(self):
        # GridShapeError is a ValueError, so pydantic reports it as a validation error
        validate_grid(self.grid)
        for name, point in (("start", self.start), ("goal", self.goal)):
            if not in_bounds(self.grid, point):
                raise ValueError(f"{name} {list(point)} lies outside the grid")
        return self
