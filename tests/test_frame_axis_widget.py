from __future__ import annotations

import unittest

from frame_axis.scales import NO_FIT, AxisRange
from frame_axis.state import AxisState
from frame_axis.style import AxisStyle
from frame_axis.text.renderer import (
    AxisSurface,
    FontSpec,
    LabelMetrics,
    TextLayoutMetrics,
    TextMeasureRequest,
    TextRenderBatch,
)
from frame_axis.widget import AxisWidget, recompute_layout, recompute_major_tick


class _MonoMetrics(LabelMetrics):
    """Every glyph is `size_px - 3` wide and labels are `size_px - 1` tall."""

    def __init__(self) -> None:
        self.requests: list[TextMeasureRequest] = []

    def measure_text(self, request: TextMeasureRequest) -> TextLayoutMetrics:
        self.requests.append(request)
        size = request.font.size_px
        return TextLayoutMetrics(width_px=(size - 3.0) * len(request.text), height_px=size - 1.0)

    def sample_measure_count(self) -> int:
        return sum(1 for req in self.requests if set(req.text) == {"8"} and len(req.text) > 1)


class _CaptureSurface(AxisSurface):
    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    def clear(self, width: float, height: float) -> None:
        self.calls.append(("clear", (width, height)))

    def draw_text_batch(self, batch: TextRenderBatch) -> None:
        self.calls.append(("draw", batch))

    def batches(self) -> list[TextRenderBatch]:
        return [payload for kind, payload in self.calls if kind == "draw"]


class AxisWidgetTests(unittest.TestCase):
    def setUp(self) -> None:
        self.metrics = _MonoMetrics()
        self.surface = _CaptureSurface()
        self.events: list[tuple[str, object, object]] = []

    def _widget(self, **kwargs) -> AxisWidget:
        widget = AxisWidget(self.metrics, surface=self.surface, **kwargs)
        widget.add_listener(lambda name, old, new: self.events.append((name, old, new)))
        return widget

    def test_defaults(self) -> None:
        widget = self._widget()
        self.assertEqual((widget.start_frame, widget.end_frame), (0, 180))
        self.assertEqual(widget.text_color, (255, 255, 255, 255))
        self.assertEqual(widget.tick_spacing_scale, 1.0)
        self.assertEqual(widget.font, FontSpec())
        self.assertEqual(AxisState().major_tick, 1)
        # a zero-width surface cannot hold a label
        self.assertEqual(widget.major_tick, NO_FIT)

    def test_resize_recomputes_major_tick_and_draws_labels(self) -> None:
        widget = self._widget()
        self.surface.calls.clear()
        widget.resize(800.0, 20.0)

        self.assertEqual(widget.major_tick, 10)
        self.assertEqual(self.surface.calls[0], ("clear", (800.0, 20.0)))
        batch = self.surface.calls[1][1]
        self.assertEqual([cmd.text for cmd in batch.commands], [str(v) for v in range(10, 180, 10)])
        first = batch.commands[0]
        self.assertAlmostEqual(first.x, 10 / 181 * 800.0 - 10.0)
        self.assertEqual(first.y, 12.0)
        self.assertEqual(first.color, (255, 255, 255, 255))
        self.assertIn(("width", 0.0, 800.0), self.events)
        self.assertIn(("major_tick", NO_FIT, 10), self.events)

    def test_listener_sees_attribute_before_derived_major_tick(self) -> None:
        widget = self._widget(width=800.0, height=20.0)
        widget.end_frame = 1000
        self.assertEqual(self.events, [("end_frame", 180, 1000), ("major_tick", 10, 100)])
        self.assertEqual(widget.last_plan.major_tick, 100)

    def test_setting_current_value_is_a_no_op(self) -> None:
        widget = self._widget(width=800.0, height=20.0)
        self.surface.calls.clear()
        widget.start_frame = 0
        widget.resize(800.0, 20.0)
        widget.text_color = (255, 255, 255, 255)
        self.assertEqual(self.events, [])
        self.assertEqual(self.surface.calls, [])

    def test_text_color_redraws_without_recomputing_interval(self) -> None:
        widget = self._widget(width=800.0, height=20.0)
        sample_measures = self.metrics.sample_measure_count()
        self.surface.calls.clear()

        widget.text_color = (255, 0, 0, 255)

        self.assertEqual(self.metrics.sample_measure_count(), sample_measures)
        self.assertEqual([kind for kind, _ in self.surface.calls], ["clear", "draw"])
        self.assertTrue(all(cmd.color == (255, 0, 0, 255) for cmd in self.surface.batches()[0].commands))
        self.assertEqual(self.events, [("text_color", (255, 255, 255, 255), (255, 0, 0, 255))])

    def test_font_change_updates_preferred_height_and_interval(self) -> None:
        widget = self._widget(width=800.0, height=20.0)
        self.assertEqual(widget.preferred_height, 12.0)
        widget.font = FontSpec(size_px=23.0)
        self.assertEqual(widget.preferred_height, 22.0)
        # "888" is now 60px wide: 181 / (800 / 60) = 13.6 -> 20
        self.assertEqual(widget.major_tick, 20)
        names = [name for name, _, _ in self.events]
        self.assertEqual(names, ["font", "preferred_height", "major_tick"])

    def test_spacing_scale_spreads_ticks(self) -> None:
        widget = self._widget(width=800.0, height=20.0)
        widget.tick_spacing_scale = 2.0
        self.assertEqual(widget.major_tick, 20)

    def test_negative_spacing_scale_is_clamped(self) -> None:
        widget = self._widget(width=800.0, height=20.0)
        widget.tick_spacing_scale = -3.0
        self.assertEqual(widget.tick_spacing_scale, 0.0)
        self.assertEqual(widget.major_tick, 1)

    def test_reversed_range_clears_without_drawing(self) -> None:
        widget = self._widget(width=800.0, height=20.0)
        self.surface.calls.clear()
        widget.end_frame = -5
        self.assertEqual(widget.major_tick, NO_FIT)
        self.assertEqual(self.surface.calls, [("clear", (800.0, 20.0))])
        self.assertEqual(widget.last_plan.ticks, ())

    def test_single_frame_range_draws_nothing(self) -> None:
        widget = self._widget(width=800.0, height=20.0)
        widget.set_range(50, 50)
        self.assertEqual(widget.major_tick, 1)
        self.assertEqual(widget.last_plan.labels.commands, ())

    def test_zero_width_is_no_fit(self) -> None:
        widget = self._widget(width=800.0, height=20.0)
        self.surface.calls.clear()
        widget.width = 0.0
        self.assertEqual(widget.major_tick, NO_FIT)
        self.assertEqual(self.surface.calls, [("clear", (0.0, 20.0))])

    def test_zero_height_is_no_fit(self) -> None:
        widget = self._widget(width=800.0, height=0.0)
        self.assertEqual(widget.major_tick, NO_FIT)
        self.assertEqual(self.surface.calls, [("clear", (800.0, 0.0))])
        self.assertEqual(widget.last_plan.labels.commands, ())

    def test_collapsing_height_clears_without_drawing(self) -> None:
        widget = self._widget(width=800.0, height=20.0)
        self.surface.calls.clear()
        widget.height = 0.0
        self.assertEqual(widget.major_tick, NO_FIT)
        self.assertEqual(self.surface.calls, [("clear", (800.0, 0.0))])
        self.assertIn(("major_tick", 10, NO_FIT), self.events)

    def test_fractional_frame_is_rejected(self) -> None:
        widget = self._widget(width=800.0, height=20.0)
        with self.assertRaisesRegex(ValueError, "start_frame"):
            widget.start_frame = 10.7
        with self.assertRaisesRegex(ValueError, "end_frame"):
            widget.set_range(0, "180")
        with self.assertRaisesRegex(ValueError, "integral frame number"):
            AxisWidget(self.metrics, start_frame=2.5)
        self.assertEqual((widget.start_frame, widget.end_frame), (0, 180))
        self.assertEqual(self.events, [])

    def test_integral_float_frame_is_accepted(self) -> None:
        widget = self._widget(width=800.0, height=20.0)
        widget.end_frame = 1000.0
        self.assertEqual(widget.end_frame, 1000)
        self.assertIsInstance(widget.end_frame, int)

    def test_negative_size_is_clamped(self) -> None:
        widget = self._widget()
        widget.resize(-10.0, -2.0)
        self.assertEqual((widget.width, widget.height), (0.0, 0.0))

    def test_apply_style_recomputes_once(self) -> None:
        widget = self._widget(width=800.0, height=20.0)
        self.surface.calls.clear()
        widget.apply_style(AxisStyle(font=FontSpec(size_px=23.0), text_color=(0, 255, 0, 255), tick_spacing_scale=1.5))
        self.assertEqual([kind for kind, _ in self.surface.calls], ["clear", "draw"])
        names = [name for name, _, _ in self.events]
        self.assertEqual(names[:3], ["font", "text_color", "tick_spacing_scale"])

    def test_removed_listener_is_not_called(self) -> None:
        widget = AxisWidget(self.metrics, surface=self.surface, width=800.0, height=20.0)
        seen: list[str] = []

        def listener(name: str, old: object, new: object) -> None:
            seen.append(name)

        widget.add_listener(listener)
        widget.start_frame = 5
        widget.remove_listener(listener)
        widget.start_frame = 6
        self.assertEqual(seen, ["start_frame"])


class RecomputeLayoutTests(unittest.TestCase):
    def test_layout_is_pure(self) -> None:
        metrics = _MonoMetrics()
        state = AxisState(axis_range=AxisRange(0, 180), width=800.0, height=20.0)
        state.major_tick = recompute_major_tick(state, metrics)
        first = recompute_layout(state, metrics)
        second = recompute_layout(state, metrics)
        self.assertEqual(first, second)
        self.assertEqual(state.major_tick, 10)
        self.assertEqual(first.baseline_y, 12.0)

    def test_no_fit_plan_has_no_labels(self) -> None:
        metrics = _MonoMetrics()
        state = AxisState(axis_range=AxisRange(0, 180), width=20.0, height=20.0)
        state.major_tick = recompute_major_tick(state, metrics)
        plan = recompute_layout(state, metrics)
        self.assertEqual(plan.major_tick, NO_FIT)
        self.assertEqual(plan.labels.commands, ())
        self.assertEqual((plan.width, plan.height), (20.0, 20.0))

    def test_label_pixel_width_scales_sample(self) -> None:
        metrics = _MonoMetrics()
        state = AxisState(axis_range=AxisRange(0, 180), style=AxisStyle(tick_spacing_scale=1.5))
        self.assertEqual(state.label_pixel_width(metrics), 45.0)
        self.assertEqual(metrics.requests[-1].text, "888")


if __name__ == "__main__":
    unittest.main()
