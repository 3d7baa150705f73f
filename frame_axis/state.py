from __future__ import annotations

from dataclasses import dataclass, field
import math

from frame_axis.scales import AxisRange, sample_label
from frame_axis.style import DEFAULT_STYLE, AxisStyle
from frame_axis.text.renderer import LabelMetrics, TextMeasureRequest


PREFERRED_HEIGHT_SAMPLE = "8"


def clamp_extent(value: float) -> float:
    extent = float(value)
    if not math.isfinite(extent) or extent < 0.0:
        return 0.0
    return extent


@dataclass
class AxisState:
    """Everything a render pass reads. Owned and mutated only by `AxisWidget`."""

    axis_range: AxisRange = field(default_factory=AxisRange)
    style: AxisStyle = DEFAULT_STYLE
    width: float = 0.0
    height: float = 0.0
    major_tick: int = 1

    def __post_init__(self) -> None:
        self.width = clamp_extent(self.width)
        self.height = clamp_extent(self.height)

    def label_pixel_width(self, metrics: LabelMetrics) -> float:
        """Reserved width per label: the widest sample label times the gap scale."""

        measured = metrics.measure_text(TextMeasureRequest(text=sample_label(self.axis_range), font=self.style.font))
        return float(measured.width_px) * self.style.tick_spacing_scale

    def digit_height(self, metrics: LabelMetrics) -> float:
        measured = metrics.measure_text(TextMeasureRequest(text=PREFERRED_HEIGHT_SAMPLE, font=self.style.font))
        return float(measured.height_px)
