"""Raster rendering of grid states."""

from __future__ import annotations

import numpy as np

from islands.config import RenderConfig
from islands.grid import Cell, GridModel


def cell_colormap(config: RenderConfig | None = None) -> np.ndarray:
    """Return a (3, 3) uint8 lookup table indexed by cell code."""

    cfg = config or RenderConfig()
    lut = np.zeros((len(Cell), 3), dtype=np.uint8)
    lut[Cell.WATER] = cfg.water_rgb
    lut[Cell.LAND] = cfg.land_rgb
    lut[Cell.IN_PROGRESS] = cfg.in_progress_rgb
    return lut


def grid_rgb(grid: GridModel, config: RenderConfig | None = None) -> np.ndarray:
    """Render the grid as square colored tiles separated by gaps on a padded background."""

    cfg = config or RenderConfig()
    if cfg.cell_px <= 0:
        raise ValueError("cell_px must be positive")
    if cfg.gap_px < 0 or cfg.padding_px < 0:
        raise ValueError("gap_px and padding_px must be non-negative")

    rows, cols = grid.dimensions()
    pitch = cfg.cell_px + cfg.gap_px
    tiles_h = max(rows * pitch - cfg.gap_px, 0)
    tiles_w = max(cols * pitch - cfg.gap_px, 0)
    background = np.array(cfg.background_rgb, dtype=np.uint8)

    out = np.empty((tiles_h + 2 * cfg.padding_px, tiles_w + 2 * cfg.padding_px, 3), dtype=np.uint8)
    out[...] = background

    colors = cell_colormap(cfg)[grid.cells.astype(np.intp)]
    tiles = np.repeat(np.repeat(colors, pitch, axis=0), pitch, axis=1)
    tiles[(np.arange(tiles.shape[0]) % pitch) >= cfg.cell_px, :] = background
    tiles[:, (np.arange(tiles.shape[1]) % pitch) >= cfg.cell_px] = background

    pad = cfg.padding_px
    out[pad : pad + tiles_h, pad : pad + tiles_w] = tiles[:tiles_h, :tiles_w]
    return out
