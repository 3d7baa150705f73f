from __future__ import annotations

from dataclasses import dataclass, field
import math
import re
from typing import Any, Mapping

from frame_axis.text.renderer import RGBA, FontSpec

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

WHITE: RGBA = (255, 255, 255, 255)


def clamp_spacing_scale(value: float) -> float:
    scale = float(value)
    if math.isnan(scale) or scale < 0.0:
        return 0.0
    return scale


def parse_hex_color(value: str) -> RGBA:
    if not isinstance(value, str) or not _HEX_COLOR.match(value):
        raise ValueError(f"color `{value}` must be a hex color (#RRGGBB or #RRGGBBAA)")
    raw = value[1:]
    alpha = int(raw[6:8], 16) if len(raw) == 8 else 255
    return (int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16), alpha)


@dataclass(frozen=True)
class AxisStyle:
    """Styleable inputs of the axis: label font, label color and gap scaling."""

    font: FontSpec = field(default_factory=FontSpec)
    text_color: RGBA = WHITE
    tick_spacing_scale: float = 1.0

    def __post_init__(self) -> None:
        if len(self.text_color) != 4 or any(not 0 <= int(c) <= 255 for c in self.text_color):
            raise ValueError("AxisStyle `text_color` must be an RGBA tuple with channels in [0, 255]")
        object.__setattr__(self, "text_color", tuple(int(c) for c in self.text_color))
        object.__setattr__(self, "tick_spacing_scale", clamp_spacing_scale(self.tick_spacing_scale))


DEFAULT_STYLE = AxisStyle()

_STYLE_KEYS = ("font_family", "font_size_px", "font_file_path", "text_color", "tick_spacing_scale")


def validate_axis_style(overrides: Mapping[str, Any] | None = None) -> AxisStyle:
    """Validate and merge flat style overrides against the defaults."""

    raw: dict[str, Any] = {
        "font_family": DEFAULT_STYLE.font.family,
        "font_size_px": DEFAULT_STYLE.font.size_px,
        "font_file_path": DEFAULT_STYLE.font.file_path,
        "text_color": "#FFFFFF",
        "tick_spacing_scale": DEFAULT_STYLE.tick_spacing_scale,
    }
    if overrides:
        for key, value in overrides.items():
            if key not in _STYLE_KEYS:
                raise ValueError(f"Unknown axis style key: {key}")
            raw[key] = value

    text_color = parse_hex_color(raw["text_color"])

    if not isinstance(raw["font_family"], str) or not raw["font_family"].strip():
        raise ValueError("Style `font_family` must be a non-empty string")

    if isinstance(raw["font_size_px"], bool) or not isinstance(raw["font_size_px"], (int, float)) or float(raw["font_size_px"]) <= 0:
        raise ValueError("Style `font_size_px` must be a positive number")

    if raw["font_file_path"] is not None and (not isinstance(raw["font_file_path"], str) or not raw["font_file_path"].strip()):
        raise ValueError("Style `font_file_path` must be a non-empty string when provided")

    if isinstance(raw["tick_spacing_scale"], bool) or not isinstance(raw["tick_spacing_scale"], (int, float)):
        raise ValueError("Style `tick_spacing_scale` must be a number")

    return AxisStyle(
        font=FontSpec(
            family=str(raw["font_family"]),
            size_px=float(raw["font_size_px"]),
            file_path=raw["font_file_path"],
        ),
        text_color=text_color,
        tick_spacing_scale=float(raw["tick_spacing_scale"]),
    )
