from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import Any, Callable

from frame_axis.raster.surface import RasterAxisSurface
from frame_axis.scales import NO_FIT, AxisRange, TickMark, coerce_frame, layout_ticks, select_major_tick
from frame_axis.state import AxisState, clamp_extent
from frame_axis.style import DEFAULT_STYLE, AxisStyle
from frame_axis.text.renderer import (
    RGBA,
    AxisSurface,
    FontSpec,
    LabelMetrics,
    TextMeasureRequest,
    TextRenderBatch,
    TextRenderCommand,
)


LOGGER = logging.getLogger(__name__)

DEFAULT_COMPONENT_ID = "frame_axis"

ChangeListener = Callable[[str, Any, Any], None]
Change = tuple[str, Any, Any]


@dataclass(frozen=True)
class AxisRenderPlan:
    """Result of one render pass: clear `width` x `height`, then draw `labels`."""

    width: float
    height: float
    major_tick: int
    baseline_y: float
    ticks: tuple[TickMark, ...]
    labels: TextRenderBatch


def recompute_major_tick(state: AxisState, metrics: LabelMetrics) -> int:
    if state.axis_range.is_degenerate or state.height <= 0:
        return NO_FIT
    return select_major_tick(state.axis_range.length, state.width, state.label_pixel_width(metrics))


def recompute_layout(
    state: AxisState,
    metrics: LabelMetrics,
    *,
    component_id: str = DEFAULT_COMPONENT_ID,
) -> AxisRenderPlan:
    """Lay out labels for the interval already stored in `state.major_tick`.

    Pure: the same state and metrics always give the same plan.
    """

    font = state.style.font
    baseline_y = state.digit_height(metrics)

    def label_width_of(value: int) -> float:
        return float(metrics.measure_text(TextMeasureRequest(text=str(value), font=font)).width_px)

    ticks = tuple(layout_ticks(state.major_tick, state.axis_range, state.width, label_width_of))
    commands = tuple(
        TextRenderCommand(
            component_id=component_id,
            text=mark.label,
            x=mark.left,
            y=baseline_y,
            font=font,
            color=state.style.text_color,
        )
        for mark in ticks
    )
    return AxisRenderPlan(
        width=state.width,
        height=state.height,
        major_tick=state.major_tick,
        baseline_y=baseline_y,
        ticks=ticks,
        labels=TextRenderBatch(commands=commands),
    )


class AxisWidget:
    """Frame-number axis that keeps its major tick and label layout current.

    Every mutation runs synchronously: range, font, spacing scale and size
    changes recompute the major tick before laying out and drawing; a text
    color change only redraws. Listeners receive `(name, old, new)` once the
    pass has finished, so they always observe the updated widget.
    """

    def __init__(
        self,
        metrics: LabelMetrics | None = None,
        *,
        surface: AxisSurface | None = None,
        component_id: str = DEFAULT_COMPONENT_ID,
        start_frame: int = 0,
        end_frame: int = 180,
        style: AxisStyle | None = None,
        width: float = 0.0,
        height: float = 0.0,
    ) -> None:
        if metrics is None:
            raster = RasterAxisSurface()
            metrics = raster
            if surface is None:
                surface = raster
        self.component_id = component_id
        self._metrics = metrics
        self._surface = surface
        self._listeners: list[ChangeListener] = []
        self._state = AxisState(
            axis_range=AxisRange(
                start=coerce_frame(start_frame, name="start_frame"),
                end=coerce_frame(end_frame, name="end_frame"),
            ),
            style=style or DEFAULT_STYLE,
            width=width,
            height=height,
        )
        self._preferred_height = self._state.digit_height(metrics)
        self._last_plan: AxisRenderPlan | None = None
        self._state.major_tick = recompute_major_tick(self._state, metrics)
        self._render()

    # Listeners

    def add_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ChangeListener) -> None:
        self._listeners.remove(listener)

    # Attributes

    @property
    def start_frame(self) -> int:
        return self._state.axis_range.start

    @start_frame.setter
    def start_frame(self, value: int) -> None:
        self.set_range(value, self.end_frame)

    @property
    def end_frame(self) -> int:
        return self._state.axis_range.end

    @end_frame.setter
    def end_frame(self, value: int) -> None:
        self.set_range(self.start_frame, value)

    @property
    def axis_range(self) -> AxisRange:
        return self._state.axis_range

    @property
    def style(self) -> AxisStyle:
        return self._state.style

    @property
    def font(self) -> FontSpec:
        return self._state.style.font

    @font.setter
    def font(self, value: FontSpec) -> None:
        self.apply_style(replace(self._state.style, font=value))

    @property
    def text_color(self) -> RGBA:
        return self._state.style.text_color

    @text_color.setter
    def text_color(self, value: RGBA) -> None:
        self.apply_style(replace(self._state.style, text_color=value))

    @property
    def tick_spacing_scale(self) -> float:
        return self._state.style.tick_spacing_scale

    @tick_spacing_scale.setter
    def tick_spacing_scale(self, value: float) -> None:
        self.apply_style(replace(self._state.style, tick_spacing_scale=value))

    @property
    def major_tick(self) -> int:
        """Last computed interval; `NO_FIT` when no labels fit."""
        return self._state.major_tick

    @property
    def width(self) -> float:
        return self._state.width

    @width.setter
    def width(self, value: float) -> None:
        self.resize(value, self.height)

    @property
    def height(self) -> float:
        return self._state.height

    @height.setter
    def height(self, value: float) -> None:
        self.resize(self.width, value)

    @property
    def preferred_height(self) -> float:
        return self._preferred_height

    @property
    def last_plan(self) -> AxisRenderPlan | None:
        return self._last_plan

    # Mutators

    def set_range(self, start_frame: int, end_frame: int) -> None:
        old = self._state.axis_range
        new = AxisRange(
            start=coerce_frame(start_frame, name="start_frame"),
            end=coerce_frame(end_frame, name="end_frame"),
        )
        if new == old:
            return
        self._state.axis_range = new
        changes: list[Change] = []
        if new.start != old.start:
            changes.append(("start_frame", old.start, new.start))
        if new.end != old.end:
            changes.append(("end_frame", old.end, new.end))
        self._commit(changes, relayout=True)

    def resize(self, width: float, height: float) -> None:
        old_w, old_h = self._state.width, self._state.height
        new_w, new_h = clamp_extent(width), clamp_extent(height)
        if (new_w, new_h) == (old_w, old_h):
            return
        self._state.width = new_w
        self._state.height = new_h
        changes: list[Change] = []
        if new_w != old_w:
            changes.append(("width", old_w, new_w))
        if new_h != old_h:
            changes.append(("height", old_h, new_h))
        self._commit(changes, relayout=True)

    def apply_style(self, style: AxisStyle) -> None:
        old = self._state.style
        if style == old:
            return
        self._state.style = style
        changes: list[Change] = []
        if style.font != old.font:
            changes.append(("font", old.font, style.font))
        if style.text_color != old.text_color:
            changes.append(("text_color", old.text_color, style.text_color))
        if style.tick_spacing_scale != old.tick_spacing_scale:
            changes.append(("tick_spacing_scale", old.tick_spacing_scale, style.tick_spacing_scale))
        if style.font != old.font:
            preferred = self._state.digit_height(self._metrics)
            if preferred != self._preferred_height:
                changes.append(("preferred_height", self._preferred_height, preferred))
                self._preferred_height = preferred
        relayout = style.font != old.font or style.tick_spacing_scale != old.tick_spacing_scale
        self._commit(changes, relayout=relayout)

    # Render pass

    def _commit(self, changes: list[Change], *, relayout: bool) -> None:
        if relayout:
            changes.extend(self._update_major_tick())
        self._render()
        for name, old, new in changes:
            for listener in list(self._listeners):
                listener(name, old, new)

    def _update_major_tick(self) -> list[Change]:
        old = self._state.major_tick
        new = recompute_major_tick(self._state, self._metrics)
        if new == NO_FIT:
            LOGGER.debug(
                "%s: no major tick fits range=%s width=%.1f",
                self.component_id,
                self._state.axis_range,
                self._state.width,
            )
        if new == old:
            return []
        LOGGER.debug("%s: major tick %d -> %d", self.component_id, old, new)
        self._state.major_tick = new
        return [("major_tick", old, new)]

    def _render(self) -> None:
        plan = recompute_layout(self._state, self._metrics, component_id=self.component_id)
        self._last_plan = plan
        if self._surface is None:
            return
        self._surface.clear(plan.width, plan.height)
        if plan.labels.commands:
            self._surface.draw_text_batch(plan.labels)
