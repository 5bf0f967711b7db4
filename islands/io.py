"""Grid file input and frame/summary output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np
from PIL import Image

from islands.grid import GridModel
from islands.parse import parse_grid

FRAME_GLOB = "frame_*.png"


def read_grid(path: str | Path) -> GridModel:
    return parse_grid(Path(path).read_text(encoding="utf-8"))


def resolve_output_dir(out_dir: str | Path, *, overwrite: bool) -> Path:
    """Create and return the frame directory, clearing stale frames when overwriting."""

    target = Path(out_dir)
    if target.exists() and any(target.iterdir()):
        if not overwrite:
            raise FileExistsError(
                f"Output directory already exists and is not empty: {target}. Use --overwrite to replace frames."
            )
        for child in target.glob(FRAME_GLOB):
            if child.is_file() or child.is_symlink():
                child.unlink()
    target.mkdir(parents=True, exist_ok=True)
    return target


def write_png_rgb(path: str | Path, raster_rgb: np.ndarray) -> None:
    if raster_rgb.ndim != 3 or raster_rgb.shape[2] != 3:
        raise ValueError("raster must have shape (height, width, 3)")
    image = Image.fromarray(raster_rgb.astype(np.uint8))
    image.save(Path(path))


def write_json(path: str | Path, payload: dict[str, Any]) -> None:
    text = json.dumps(payload, indent=2, sort_keys=True)
    Path(path).write_text(text + "\n", encoding="utf-8")
