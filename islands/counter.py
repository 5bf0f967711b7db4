"""Island counting by flood-fill sinking, with an observable step stream."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import logging
from typing import Any, Iterator, Sequence

from islands.config import BREADTH_FIRST, DEFAULT_NEIGHBOR_ORDER, STRATEGIES, TraversalConfig
from islands.grid import Cell, GridModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepEvent:
    """One cell transition emitted by `IslandCounter.traverse`."""

    row: int
    col: int
    value: Cell
    starts_island: bool
    island: int


class IslandCounter:
    """Count 4-connected islands of `Cell.LAND`, sinking them to `Cell.WATER`.

    Islands are discovered in row-major order. Within an island, cells are
    expanded in `TraversalConfig.neighbor_order` (down, up, right, left by
    default); the depth-first strategy visits cells in the same order as a
    recursive flood-fill would, without growing the call stack.
    """

    def __init__(self, config: TraversalConfig | None = None) -> None:
        cfg = config or TraversalConfig()
        if cfg.strategy not in STRATEGIES:
            raise ValueError(f"strategy must be one of {', '.join(STRATEGIES)}, got {cfg.strategy!r}")
        order = tuple((int(dr), int(dc)) for dr, dc in cfg.neighbor_order)
        if sorted(order) != sorted(DEFAULT_NEIGHBOR_ORDER):
            raise ValueError("neighbor_order must list each of the four edge neighbors exactly once")
        self.config = cfg
        self._order = order

    def count(self, grid: GridModel) -> int:
        """Return the number of islands; every land cell is left as water."""

        rows, cols = grid.dimensions()
        islands = 0
        for r in range(rows):
            for c in range(cols):
                if grid.get(r, c) != Cell.LAND:
                    continue
                islands += 1
                size = 0
                for cr, cc in self._flood(grid, r, c):
                    grid.set(cr, cc, Cell.WATER)
                    size += 1
                logger.debug("island %d at (%d, %d): %d cells", islands, r, c, size)

        logger.debug("counted %d islands in %dx%d grid", islands, rows, cols)
        return islands

    def traverse(self, grid: GridModel) -> Iterator[StepEvent]:
        """Lazily sink islands, yielding each cell transition.

        Every visited cell yields an `IN_PROGRESS` event followed by a `WATER`
        event; the first cell of each island carries `starts_island=True`.
        The grid is mutated as events are pulled, so stopping early leaves
        the current island partly sunk and later islands untouched.
        """

        rows, cols = grid.dimensions()
        island = 0
        for r in range(rows):
            for c in range(cols):
                if grid.get(r, c) != Cell.LAND:
                    continue
                island += 1
                logger.debug("island %d discovered at (%d, %d)", island, r, c)
                starts = True
                for cr, cc in self._flood(grid, r, c):
                    grid.set(cr, cc, Cell.IN_PROGRESS)
                    yield StepEvent(cr, cc, Cell.IN_PROGRESS, starts, island)
                    starts = False
                    grid.set(cr, cc, Cell.WATER)
                    yield StepEvent(cr, cc, Cell.WATER, False, island)

    def _flood(self, grid: GridModel, r: int, c: int) -> Iterator[tuple[int, int]]:
        # Callers must take each yielded cell off LAND before resuming.
        if self.config.strategy == BREADTH_FIRST:
            frontier: Any = deque([(r, c)])
            take = frontier.popleft
            expand = self._order
        else:
            frontier = [(r, c)]
            take = frontier.pop
            expand = self._order[::-1]

        while frontier:
            cr, cc = take()
            if grid.get(cr, cc) != Cell.LAND:
                continue
            yield cr, cc
            for dr, dc in expand:
                nr, nc = cr + dr, cc + dc
                if grid.in_bounds(nr, nc) and grid.get(nr, nc) == Cell.LAND:
                    frontier.append((nr, nc))


def count_islands(rows: Sequence[Sequence[Any]], config: TraversalConfig | None = None) -> int:
    """Count islands in raw 0/1 rows without modifying them."""

    return IslandCounter(config).count(GridModel(rows))
