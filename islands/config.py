"""Configuration models for island counting and playback."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


DEFAULT_ROWS = 4
DEFAULT_COLS = 5
DEFAULT_DENSITY = 0.45

DEPTH_FIRST = "depth-first"
BREADTH_FIRST = "breadth-first"
STRATEGIES = (DEPTH_FIRST, BREADTH_FIRST)

# Row/column offsets: down, up, right, left.
DEFAULT_NEIGHBOR_ORDER: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

SAMPLE_GRID: tuple[tuple[int, ...], ...] = (
    (1, 1, 0, 0, 0),
    (1, 1, 0, 0, 0),
    (0, 0, 1, 0, 0),
    (0, 0, 0, 1, 1),
)


@dataclass(frozen=True)
class TraversalConfig:
    """Controls flood-fill frontier discipline and neighbor expansion order."""

    strategy: str = DEPTH_FIRST
    neighbor_order: tuple[tuple[int, int], ...] = DEFAULT_NEIGHBOR_ORDER


@dataclass(frozen=True)
class RenderConfig:
    """Cell raster layout, colors and playback pacing."""

    cell_px: int = 50
    gap_px: int = 4
    padding_px: int = 16
    land_rgb: tuple[int, int, int] = (52, 199, 89)
    water_rgb: tuple[int, int, int] = (179, 215, 255)
    in_progress_rgb: tuple[int, int, int] = (255, 149, 0)
    background_rgb: tuple[int, int, int] = (235, 235, 235)
    step_delay_s: float = 0.3


@dataclass(frozen=True)
class IslandsConfig:
    """Primary configuration."""

    traversal: TraversalConfig = field(default_factory=TraversalConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
