"""Parsing of textual land/water grids."""

from __future__ import annotations

import re

from islands.grid import Cell, GridModel, ShapeError

LAND_SYMBOLS = frozenset("1#Xx")
WATER_SYMBOLS = frozenset("0.~")

_SEPARATOR_RE = re.compile(r"[\s,]+")
_EXAMPLE_ROWS = ["11000", "##...", "1 1 0 0 0", "1,1,0,0,0"]


class GridParseError(ValueError):
    """Raised when grid text contains a symbol that is neither land nor water."""


def parse_symbol(symbol: str) -> Cell:
    if symbol in LAND_SYMBOLS:
        return Cell.LAND
    if symbol in WATER_SYMBOLS:
        return Cell.WATER
    raise GridParseError(_error_message(f"Unknown cell symbol {symbol!r}."))


def parse_grid(text: str) -> GridModel:
    """Parse one row per line; cells are single characters or separated tokens.

    Blank lines and lines starting with ``;`` are skipped. Raises
    `islands.grid.ShapeError` when rows differ in length.
    """

    rows: list[list[Cell]] = []
    first_line = 0
    for line_no, line in enumerate(text.splitlines(), start=1):
        raw = line.strip()
        if not raw or raw.startswith(";"):
            continue
        tokens = _SEPARATOR_RE.split(raw) if _SEPARATOR_RE.search(raw) else list(raw)
        try:
            row = [parse_symbol(token) for token in tokens if token]
        except GridParseError as exc:
            raise GridParseError(f"line {line_no}: {exc}") from None
        if not rows:
            first_line = line_no
        elif len(row) != len(rows[0]):
            raise ShapeError(
                f"line {line_no} has {len(row)} cells, expected {len(rows[0])} as on line {first_line}"
            )
        rows.append(row)
    return GridModel(rows)


def format_grid(grid: GridModel, *, land: str = "1", water: str = "0", in_progress: str = "*") -> str:
    """Render a grid as text, one row per line."""

    symbols = {Cell.LAND: land, Cell.WATER: water, Cell.IN_PROGRESS: in_progress}
    return "\n".join("".join(symbols[Cell(code)] for code in row) for row in grid.to_rows())


def _error_message(reason: str) -> str:
    examples = ", ".join(repr(row) for row in _EXAMPLE_ROWS)
    return f"{reason} Land is one of 1 # X, water is one of 0 . ~. Example rows: {examples}"
