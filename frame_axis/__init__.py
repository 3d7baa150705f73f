from frame_axis.scales import NO_FIT, AxisRange, TickMark, layout_ticks, sample_label, select_major_tick
from frame_axis.state import AxisState
from frame_axis.style import DEFAULT_STYLE, AxisStyle, parse_hex_color, validate_axis_style
from frame_axis.text.renderer import FontSpec
from frame_axis.widget import AxisRenderPlan, AxisWidget, recompute_layout, recompute_major_tick

__all__ = [
    "AxisRange",
    "AxisRenderPlan",
    "AxisState",
    "AxisStyle",
    "AxisWidget",
    "DEFAULT_STYLE",
    "FontSpec",
    "NO_FIT",
    "TickMark",
    "layout_ticks",
    "parse_hex_color",
    "recompute_layout",
    "recompute_major_tick",
    "sample_label",
    "select_major_tick",
    "validate_axis_style",
]
