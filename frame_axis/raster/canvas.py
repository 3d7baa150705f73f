from __future__ import annotations

import math

import numpy as np

from frame_axis.text.renderer import RGBA


TRANSPARENT: RGBA = (0, 0, 0, 0)


def canvas_shape(width: float, height: float) -> tuple[int, int]:
    """Pixel extent covering a fractional surface size."""

    return (max(0, int(math.ceil(height))), max(0, int(math.ceil(width))))


def new_canvas(width: int, height: int, color: RGBA = TRANSPARENT) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    fill_canvas(canvas, color)
    return canvas


def fill_canvas(dst: np.ndarray, color: RGBA) -> None:
    dst[:, :, 0] = color[0]
    dst[:, :, 1] = color[1]
    dst[:, :, 2] = color[2]
    dst[:, :, 3] = color[3]
