"""Island counting over land/water grids."""

from .config import IslandsConfig, RenderConfig, TraversalConfig
from .counter import IslandCounter, StepEvent, count_islands
from .grid import Cell, GridModel, OutOfBounds, ShapeError

__all__ = [
    "Cell",
    "GridModel",
    "IslandCounter",
    "IslandsConfig",
    "OutOfBounds",
    "RenderConfig",
    "ShapeError",
    "StepEvent",
    "TraversalConfig",
    "count_islands",
]
