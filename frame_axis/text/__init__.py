"""Text measurement and draw contracts for the frame axis."""

from .renderer import (
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE_PX,
    RGBA,
    AxisSurface,
    FontSpec,
    LabelMetrics,
    TextLayoutMetrics,
    TextMeasureRequest,
    TextRenderBatch,
    TextRenderCommand,
)

__all__ = [
    "AxisSurface",
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_FONT_SIZE_PX",
    "FontSpec",
    "LabelMetrics",
    "RGBA",
    "TextLayoutMetrics",
    "TextMeasureRequest",
    "TextRenderBatch",
    "TextRenderCommand",
]
