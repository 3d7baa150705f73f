from __future__ import annotations

import numpy as np

from frame_axis.compile.write_batch import WriteBatch, compile_full_rewrite_batch, compile_replace_rect_batch
from frame_axis.text.renderer import RGBA, TextLayoutMetrics, TextMeasureRequest, TextRenderBatch

from .canvas import TRANSPARENT, canvas_shape, fill_canvas, new_canvas
from .draw_text import draw_text, text_size


class RasterAxisSurface:
    """Pillow-measured labels drawn into an RGBA numpy canvas.

    Serves as both the label metrics source and the drawing surface of an
    `AxisWidget`. The canvas is reallocated whenever the cleared size changes.
    """

    def __init__(self, background: RGBA = TRANSPARENT) -> None:
        self.background = background
        self._canvas = new_canvas(0, 0, color=background)

    @property
    def rgba(self) -> np.ndarray:
        return self._canvas

    def measure_text(self, request: TextMeasureRequest) -> TextLayoutMetrics:
        w, h = text_size(request.text, font=request.font)
        return TextLayoutMetrics(width_px=float(w), height_px=float(h))

    def clear(self, width: float, height: float) -> None:
        shape = canvas_shape(width, height)
        if self._canvas.shape[:2] != shape:
            self._canvas = new_canvas(shape[1], shape[0], color=self.background)
            return
        fill_canvas(self._canvas, self.background)

    def draw_text_batch(self, batch: TextRenderBatch) -> None:
        for command in batch.commands:
            _, h = text_size(command.text, font=command.font)
            draw_text(
                self._canvas,
                int(round(command.x)),
                int(round(command.y)) - h,
                command.text,
                command.color,
                font=command.font,
            )

    def compile_write_batch(self, *, x: int | None = None, y: int | None = None) -> WriteBatch:
        """Full rewrite, or a rect write when the axis sits at (x, y) of a larger window."""

        if x is None and y is None:
            return compile_full_rewrite_batch(self._canvas)
        height, width = self._canvas.shape[:2]
        return compile_replace_rect_batch(self._canvas, x=x or 0, y=y or 0, width=width, height=height)
