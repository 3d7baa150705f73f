from .canvas import canvas_shape, fill_canvas, new_canvas
from .draw_text import draw_text, text_size
from .surface import RasterAxisSurface

__all__ = [
    "RasterAxisSurface",
    "canvas_shape",
    "draw_text",
    "fill_canvas",
    "new_canvas",
    "text_size",
]
