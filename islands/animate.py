"""Caller-paced playback of traversal step events."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import time
from typing import Callable, Iterable, Iterator

from islands.config import RenderConfig
from islands.counter import StepEvent
from islands.grid import GridModel
from islands.io import write_png_rgb
from islands.render import grid_rgb

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaybackResult:
    """Totals from draining a step stream."""

    islands: int
    steps: int
    frames: tuple[Path, ...] = ()


def paced(
    events: Iterable[StepEvent],
    interval_s: float,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> Iterator[StepEvent]:
    """Pull one event per tick, sleeping `interval_s` between events."""

    if interval_s < 0:
        raise ValueError("interval_s must be non-negative")
    first = True
    for event in events:
        if not first and interval_s > 0:
            sleep(interval_s)
        first = False
        yield event


def play(
    events: Iterable[StepEvent],
    *,
    on_step: Callable[[StepEvent], None] | None = None,
) -> PlaybackResult:
    """Drain `events`, calling `on_step` after each one is applied."""

    islands = 0
    steps = 0
    for event in events:
        steps += 1
        if event.starts_island:
            islands += 1
        if on_step is not None:
            on_step(event)
    return PlaybackResult(islands=islands, steps=steps)


def write_frames(
    grid: GridModel,
    events: Iterable[StepEvent],
    out_dir: Path,
    *,
    config: RenderConfig | None = None,
) -> PlaybackResult:
    """Save the initial grid and the grid after every event as numbered PNG frames.

    `events` must come from a traversal of `grid`.
    """

    cfg = config or RenderConfig()
    frames = [out_dir / "frame_00000.png"]
    write_png_rgb(frames[0], grid_rgb(grid, cfg))

    def _save(event: StepEvent) -> None:
        path = out_dir / f"frame_{len(frames):05d}.png"
        write_png_rgb(path, grid_rgb(grid, cfg))
        frames.append(path)

    result = play(events, on_step=_save)
    logger.debug("wrote %d frames to %s", len(frames), out_dir)
    return PlaybackResult(islands=result.islands, steps=result.steps, frames=tuple(frames))
