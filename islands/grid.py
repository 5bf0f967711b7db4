"""Rectangular land/water grid with bounds-checked cell access."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Sequence

import numpy as np


class Cell(IntEnum):
    """Cell states. Codes match the 0/1/2 integers accepted on input."""

    WATER = 0
    LAND = 1
    IN_PROGRESS = 2


class ShapeError(ValueError):
    """Raised when grid input is not a rectangular 2D layout."""


class OutOfBounds(IndexError):
    """Raised when a cell accessor is called outside the grid."""


def cell_code(value: Any) -> int:
    """Return the integer code for a `Cell` or 0/1/2 value."""

    try:
        return int(Cell(value))
    except (TypeError, ValueError):
        raise ValueError(f"invalid cell value: {value!r}") from None


class GridModel:
    """R x C grid of `Cell` values backed by an int8 numpy array.

    The grid is mutated in place by `IslandCounter`; `reset()` restores the
    cells the grid was constructed with.
    """

    def __init__(self, rows: Sequence[Sequence[Any]] = ()) -> None:
        self._cells = _rows_to_array(rows)
        self._initial = self._cells.copy()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> "GridModel":
        return cls(rows)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "GridModel":
        """Build a grid from a 2D array of cell codes or booleans."""

        values = np.asarray(array)
        if values.ndim != 2:
            raise ShapeError(f"grid array must be 2D, got {values.ndim}D")
        if values.size and not np.isin(values, [int(cell) for cell in Cell]).all():
            raise ValueError("grid array contains values other than 0, 1, 2")
        grid = cls()
        grid._cells = values.astype(np.int8, copy=True)
        grid._initial = grid._cells.copy()
        return grid

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell codes."""

        view = self._cells.view()
        view.flags.writeable = False
        return view

    def dimensions(self) -> tuple[int, int]:
        rows, cols = self._cells.shape
        return int(rows), int(cols)

    def in_bounds(self, r: int, c: int) -> bool:
        rows, cols = self._cells.shape
        return 0 <= r < rows and 0 <= c < cols

    def get(self, r: int, c: int) -> Cell:
        self._check_bounds(r, c)
        return Cell(int(self._cells[r, c]))

    def set(self, r: int, c: int, value: Cell | int) -> None:
        self._check_bounds(r, c)
        self._cells[r, c] = cell_code(value)

    def land_cells(self) -> int:
        return int(np.count_nonzero(self._cells == Cell.LAND))

    def copy(self) -> "GridModel":
        twin = GridModel()
        twin._cells = self._cells.copy()
        twin._initial = self._initial.copy()
        return twin

    def reset(self) -> None:
        """Restore the cells this grid was constructed with."""

        self._cells[...] = self._initial

    def to_rows(self) -> list[list[int]]:
        return self._cells.astype(int).tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridModel):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        rows, cols = self.dimensions()
        return f"GridModel({rows}x{cols}, land={self.land_cells()})"

    def _check_bounds(self, r: int, c: int) -> None:
        if not self.in_bounds(r, c):
            rows, cols = self._cells.shape
            raise OutOfBounds(f"cell ({r}, {c}) is outside the {rows}x{cols} grid")


def _rows_to_array(rows: Sequence[Sequence[Any]]) -> np.ndarray:
    if isinstance(rows, (str, bytes)):
        raise ShapeError("grid rows must be a sequence of rows, not a string")
    try:
        row_iter = iter(rows)
    except TypeError:
        raise ShapeError(f"grid rows must be a sequence of rows, got {type(rows).__name__}") from None

    materialized: list[list[Any]] = []
    for index, row in enumerate(row_iter):
        if isinstance(row, (str, bytes)):
            raise ShapeError(f"row {index} is not a sequence")
        try:
            materialized.append(list(row))
        except TypeError:
            raise ShapeError(f"row {index} is not a sequence") from None

    if not materialized:
        return np.zeros((0, 0), dtype=np.int8)

    width = len(materialized[0])
    for index, row in enumerate(materialized):
        if len(row) != width:
            raise ShapeError(f"row {index} has {len(row)} columns, expected {width}")

    codes = [[cell_code(value) for value in row] for row in materialized]
    return np.array(codes, dtype=np.int8).reshape(len(materialized), width)
