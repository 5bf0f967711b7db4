from __future__ import annotations

from PIL import Image
import numpy as np
import pytest

from islands.animate import PlaybackResult, paced, play, write_frames
from islands.config import SAMPLE_GRID
from islands.counter import IslandCounter
from islands.grid import GridModel
from islands.render import grid_rgb


def test_paced_sleeps_between_events_only() -> None:
    sleeps: list[float] = []
    events = list(IslandCounter().traverse(GridModel([[1, 0, 1]])))

    pulled = list(paced(iter(events), 0.3, sleep=sleeps.append))

    assert pulled == events
    assert sleeps == [0.3] * (len(events) - 1)


def test_paced_is_pull_based() -> None:
    sleeps: list[float] = []
    grid = GridModel(SAMPLE_GRID)
    stream = paced(IslandCounter().traverse(grid), 1.0, sleep=sleeps.append)

    next(stream)
    assert sleeps == []
    assert grid.land_cells() == 6


def test_paced_rejects_negative_interval() -> None:
    with pytest.raises(ValueError):
        list(paced([], -1.0))


def test_play_tallies_islands_and_steps() -> None:
    seen = []
    result = play(IslandCounter().traverse(GridModel(SAMPLE_GRID)), on_step=seen.append)

    assert result == PlaybackResult(islands=3, steps=14)
    assert len(seen) == 14


def test_write_frames_saves_every_step(tmp_path) -> None:
    grid = GridModel(SAMPLE_GRID)
    result = write_frames(grid, IslandCounter().traverse(grid), tmp_path)

    assert result.islands == 3
    assert result.steps == 14
    assert len(result.frames) == 15
    assert all(path.exists() for path in result.frames)
    assert result.frames[0].name == "frame_00000.png"

    with Image.open(result.frames[-1]) as image:
        assert np.array_equal(np.asarray(image), grid_rgb(grid))
    with Image.open(result.frames[0]) as image:
        assert np.array_equal(np.asarray(image), grid_rgb(GridModel(SAMPLE_GRID)))
