"""Seeded random land/water grids."""

from __future__ import annotations

import numpy as np

from islands.grid import GridModel


def random_grid(rows: int, cols: int, *, density: float, seed: int | None = None) -> GridModel:
    """Return a grid whose cells are land with probability `density`.

    The same `seed` always yields the same grid; `None` draws fresh entropy.
    """

    if rows < 0 or cols < 0:
        raise ValueError("rows and cols must be non-negative")
    if not 0.0 <= density <= 1.0:
        raise ValueError("density must be within [0, 1]")

    land = np.random.default_rng(seed).random((rows, cols)) < density
    return GridModel.from_array(land.astype(np.int8))
