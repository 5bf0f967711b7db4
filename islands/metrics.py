"""Island size and coverage metrics."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from islands.grid import Cell, GridModel


@dataclass(frozen=True)
class IslandMetrics:
    """Connected component and coverage summary for a land grid."""

    num_islands: int
    largest_island_area: int
    total_land_cells: int
    largest_land_ratio: float
    land_fraction: float


def island_sizes(mask: np.ndarray) -> list[int]:
    """Return 4-connected component sizes of a boolean mask in row-major discovery order."""

    if mask.ndim != 2:
        raise ValueError("mask must be 2D")

    mask_bool = mask.astype(bool, copy=False)
    height, width = mask_bool.shape
    flat = mask_bool.ravel()
    visited = np.zeros(flat.shape[0], dtype=np.uint8)
    sizes: list[int] = []

    for start in np.flatnonzero(flat):
        if visited[start]:
            continue
        visited[start] = 1
        stack = [int(start)]
        component_size = 0

        while stack:
            current = stack.pop()
            component_size += 1
            y = current // width
            x = current - y * width

            for ny, nx in ((y - 1, x), (y + 1, x), (y, x - 1), (y, x + 1)):
                if not (0 <= ny < height and 0 <= nx < width):
                    continue
                idx = ny * width + nx
                if flat[idx] and not visited[idx]:
                    visited[idx] = 1
                    stack.append(idx)

        sizes.append(component_size)

    return sizes


def island_metrics(grid: GridModel) -> IslandMetrics:
    """Compute island statistics without modifying the grid."""

    mask = grid.cells == Cell.LAND
    rows, cols = grid.dimensions()
    total_cells = rows * cols
    total_land = int(mask.sum())

    if total_land == 0:
        return IslandMetrics(0, 0, 0, 0.0, 0.0)

    sizes = island_sizes(mask)
    largest = max(sizes)
    return IslandMetrics(
        num_islands=len(sizes),
        largest_island_area=largest,
        total_land_cells=total_land,
        largest_land_ratio=float(largest / total_land),
        land_fraction=float(total_land / total_cells),
    )
