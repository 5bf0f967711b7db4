"""CLI entry point for island counting."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
import time
from typing import TextIO

from islands.animate import paced, play, write_frames
from islands.config import (
    DEFAULT_COLS,
    DEFAULT_DENSITY,
    DEFAULT_ROWS,
    DEPTH_FIRST,
    SAMPLE_GRID,
    STRATEGIES,
    IslandsConfig,
    TraversalConfig,
)
from islands.counter import IslandCounter, StepEvent
from islands.grid import GridModel
from islands.io import read_grid, resolve_output_dir
from islands.metrics import island_metrics
from islands.parse import format_grid
from islands.rng import random_grid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Count 4-connected islands of land in a grid")
    parser.add_argument("--grid", help="Grid text file, one row per line (1/0, #/. or X/~ symbols)")
    parser.add_argument("--random", action="store_true", help="Count a seeded random grid instead of the sample")
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Random grid rows")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Random grid columns")
    parser.add_argument("--density", type=float, default=DEFAULT_DENSITY, help="Random grid land probability")
    parser.add_argument("--seed", type=int, default=0, help="Random grid seed")
    parser.add_argument("--strategy", choices=STRATEGIES, default=DEPTH_FIRST, help="Flood-fill frontier order")
    parser.add_argument("--animate", action="store_true", help="Print the grid after every traversal step (to stderr with --json)")
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds between traversal steps (default: 0.3 with --animate, 0 otherwise)",
    )
    parser.add_argument("--frames", help="Write one PNG frame per traversal step into this directory")
    parser.add_argument("--overwrite", action="store_true", help="Replace frames in an existing frame directory")
    parser.add_argument(
        "--json",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Print a JSON summary instead of text",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if args.grid and args.random:
        parser.error("--grid and --random cannot be combined")
    if args.delay is not None and args.delay < 0:
        parser.error("--delay must be non-negative")
    if args.frames and args.animate:
        parser.error("--frames and --animate cannot be combined")

    try:
        grid = _load_grid(args)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    config = IslandsConfig(traversal=TraversalConfig(strategy=args.strategy))
    counter = IslandCounter(config.traversal)
    metrics = island_metrics(grid)
    rows, cols = grid.dimensions()

    start = time.perf_counter()
    frames: tuple[Path, ...] = ()
    if args.frames or args.animate:
        delay = args.delay
        if delay is None:
            delay = config.render.step_delay_s if args.animate else 0.0
        events = paced(counter.traverse(grid), delay)
        if args.frames:
            try:
                out_dir = resolve_output_dir(args.frames, overwrite=args.overwrite)
            except FileExistsError as exc:
                parser.error(str(exc))
            result = write_frames(grid, events, out_dir, config=config.render)
            frames = result.frames
        else:
            trace = sys.stderr if args.json else sys.stdout
            result = play(events, on_step=lambda event: _print_step(grid, event, trace))
        islands, steps = result.islands, result.steps
    else:
        islands, steps = counter.count(grid), 0
    seconds = time.perf_counter() - start

    if args.json:
        summary = {
            "rows": rows,
            "cols": cols,
            "islands": islands,
            "steps": steps,
            "frames": len(frames),
            "config": config.to_dict(),
            "metrics": {
                "total_land_cells": metrics.total_land_cells,
                "largest_island_area": metrics.largest_island_area,
                "largest_land_ratio": metrics.largest_land_ratio,
                "land_fraction": metrics.land_fraction,
            },
        }
        print(json.dumps(summary, indent=2, sort_keys=True))
        return 0

    print(f"Islands found: {islands}")
    print(
        f"Grid {rows}x{cols}; "
        f"land cells {metrics.total_land_cells}; "
        f"largest island {metrics.largest_island_area}; "
        f"land fraction {metrics.land_fraction:.3f}"
    )
    if steps:
        print(f"Traversal steps: {steps} ({args.strategy})")
    if frames:
        print(f"Frames written: {len(frames)} to {frames[0].parent}")
    print(f"Counting time: {seconds:.3f} s")
    return 0


def _load_grid(args: argparse.Namespace) -> GridModel:
    if args.grid:
        return read_grid(args.grid)
    if args.random:
        return random_grid(args.rows, args.cols, density=args.density, seed=args.seed)
    return GridModel(SAMPLE_GRID)


def _print_step(grid: GridModel, event: StepEvent, out: TextIO) -> None:
    marker = " (new island)" if event.starts_island else ""
    print(f"island {event.island}: ({event.row}, {event.col}) -> {event.value.name.lower()}{marker}", file=out)
    print(format_grid(grid, land="#", water=".", in_progress="*"), file=out)
    print(file=out)


if __name__ == "__main__":
    raise SystemExit(main())
