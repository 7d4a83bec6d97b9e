from __future__ import annotations

import unittest

import numpy as np

from linechart import ChartConfig, ChartDataError, LineChart, Selection, TouchEvent
from linechart.colors import hex_to_rgba, lighten
from linechart.config import Animation
from linechart.dataset import ChartData


class _RecordingDelegate:
    def __init__(self) -> None:
        self.calls: list[tuple[float, list[float]]] = []

    def did_select_data_point(self, x: float, y_values: list[float]) -> None:
        self.calls.append((x, y_values))


def _has_color(frame: np.ndarray, rgba: tuple[int, int, int, int]) -> bool:
    return bool(np.any(np.all(frame == np.asarray(rgba, dtype=np.uint8).reshape(1, 1, 4), axis=2)))


class LineChartRenderTests(unittest.TestCase):
    def test_render_is_deterministic_rgba(self) -> None:
        chart = LineChart(width=215, height=115)
        chart.add_line([1, 5, 3, 8, 2])
        frame_1 = chart.render()
        frame_2 = chart.render()
        self.assertEqual(frame_1.shape, (115, 215, 4))
        self.assertEqual(frame_1.dtype, np.uint8)
        self.assertTrue(np.array_equal(frame_1, frame_2))

    def test_line_drawn_in_series_color(self) -> None:
        chart = LineChart(width=215, height=115)
        chart.add_line([1, 5, 3, 8, 2])
        chart.add_line([2, 2, 6, 1, 4])
        frame = chart.render()
        self.assertTrue(_has_color(frame, hex_to_rgba(chart.config.colors[0])))
        self.assertTrue(_has_color(frame, hex_to_rgba(chart.config.colors[1])))

    def test_grid_and_axes_without_data(self) -> None:
        chart = LineChart(width=120, height=80)
        frame = chart.render()
        self.assertTrue(np.any(frame[:, :, 3] > 0))
        self.assertTrue(_has_color(frame, hex_to_rgba(chart.config.y.axis.color)))

    def test_visibility_flags_change_output(self) -> None:
        chart = LineChart(width=215, height=115)
        chart.add_line([1, 5, 3, 8, 2])
        full = chart.render()
        chart.config.area = False
        chart.config.dots.visible = False
        chart.config.x.grid.visible = False
        bare = chart.render()
        self.assertFalse(np.array_equal(full, bare))
        self.assertTrue(_has_color(bare, hex_to_rgba(chart.config.colors[0])))

    def test_clear_keeps_grid(self) -> None:
        chart = LineChart(width=215, height=115)
        chart.add_line([1, 5, 3, 8, 2])
        chart.clear()
        frame = chart.render()
        self.assertTrue(chart.data.is_empty)
        self.assertTrue(np.any(frame[:, :, 3] > 0))
        self.assertFalse(_has_color(frame, hex_to_rgba(chart.config.colors[0])))

    def test_clear_all_blanks_next_frame_only(self) -> None:
        chart = LineChart(width=215, height=115)
        chart.add_line([1, 5, 3, 8, 2])
        chart.clear_all()
        blank = chart.render()
        self.assertFalse(np.any(blank))
        after = chart.render()
        self.assertTrue(np.any(after[:, :, 3] > 0))

    def test_resize_recomputes_scales(self) -> None:
        chart = LineChart(width=215, height=115)
        chart.add_line([1, 5, 3, 8, 2])
        before = chart.layout()
        chart.resize(415, 215)
        after = chart.layout()
        assert before is not None and after is not None
        self.assertEqual(before.x_scale.range, (0.0, 200.0))
        self.assertEqual(after.x_scale.range, (0.0, 400.0))
        self.assertEqual(after.y_scale.range, (0.0, 200.0))
        self.assertEqual(chart.render().shape, (215, 415, 4))

    def test_tiny_view_renders_background_only(self) -> None:
        chart = LineChart(width=10, height=10)
        chart.add_line([1, 2, 3])
        self.assertFalse(np.any(chart.render()))

    def test_rejects_bad_sizes_and_data(self) -> None:
        with self.assertRaises(ValueError):
            LineChart(width=0, height=10)
        chart = LineChart(width=100, height=100)
        with self.assertRaises(ValueError):
            chart.resize(100, -1)
        with self.assertRaises(ChartDataError):
            chart.add_line([])

    def test_rejects_invalid_config(self) -> None:
        config = ChartConfig()
        config.x.grid.count = 0
        with self.assertRaises(ValueError):
            LineChart(width=100, height=100, config=config)


class LineChartAnimationTests(unittest.TestCase):
    def test_progress_zero_hides_line(self) -> None:
        chart = LineChart(width=215, height=115)
        chart.add_line([1, 5, 3, 8, 2])
        start = chart.render(progress=0.0)
        end = chart.render(progress=1.0)
        self.assertFalse(np.array_equal(start, end))
        self.assertFalse(_has_color(start, hex_to_rgba(chart.config.colors[0])))

    def test_render_at_follows_animation_config(self) -> None:
        chart = LineChart(width=215, height=115)
        chart.add_line([1, 5, 3, 8, 2])
        self.assertTrue(np.array_equal(chart.render_at(5.0), chart.render()))
        self.assertTrue(np.array_equal(chart.render_at(0.5), chart.render(progress=0.5)))
        chart.config.animation = Animation(enabled=False)
        self.assertTrue(np.array_equal(chart.render_at(0.0), chart.render()))


class LineChartTouchTests(unittest.TestCase):
    def test_touch_selects_index_and_notifies_delegate(self) -> None:
        delegate = _RecordingDelegate()
        chart = LineChart(width=215, height=115, delegate=delegate)
        chart.add_line([1, 5, 3, 8, 2])
        chart.add_line([4, 6])
        selection = chart.handle_touch(TouchEvent(phase="ended", x=165.0, y=50.0))
        self.assertEqual(selection, Selection(index=3, y_values=(8.0, 6.0)))
        self.assertEqual(chart.highlighted_index, 3)
        self.assertEqual(delegate.calls, [(3.0, [8.0, 6.0])])

    def test_touch_before_first_point_clamps_values(self) -> None:
        delegate = _RecordingDelegate()
        chart = LineChart(width=215, height=115, delegate=delegate)
        chart.add_line([1, 5, 3, 8, 2])
        selection = chart.handle_touch(TouchEvent(phase="moved", x=-85.0, y=0.0))
        self.assertEqual(selection, Selection(index=-2, y_values=(1.0,)))
        self.assertEqual(delegate.calls, [(-2.0, [1.0])])

    def test_began_and_cancelled_are_ignored(self) -> None:
        delegate = _RecordingDelegate()
        chart = LineChart(width=215, height=115, delegate=delegate)
        chart.add_line([1, 5, 3, 8, 2])
        self.assertIsNone(chart.handle_touch(TouchEvent(phase="began", x=100.0, y=0.0)))
        self.assertIsNone(chart.handle_touch(TouchEvent(phase="cancelled", x=100.0, y=0.0)))
        self.assertEqual(delegate.calls, [])
        self.assertIsNone(chart.highlighted_index)

    def test_touch_without_data_is_ignored(self) -> None:
        chart = LineChart(width=215, height=115)
        self.assertIsNone(chart.handle_touch(TouchEvent(phase="ended", x=100.0, y=0.0)))

    def test_handle_event_parses_payload(self) -> None:
        chart = LineChart(width=215, height=115)
        chart.add_line([1, 5, 3, 8, 2])
        selection = chart.handle_event("touch", {"phase": "moved", "x": 65.0, "y": 10.0})
        self.assertEqual(selection, Selection(index=1, y_values=(5.0,)))
        self.assertIsNone(chart.handle_event("scroll", {"phase": "moved", "x": 65.0}))

    def test_highlight_recolors_selected_dot(self) -> None:
        chart = LineChart(width=215, height=115)
        chart.add_line([1, 5, 3, 8, 2])
        chart.config.area = False
        before = chart.render()
        chart.handle_touch(TouchEvent(phase="ended", x=115.0, y=0.0))
        after = chart.render()
        self.assertFalse(np.array_equal(before, after))
        highlight = lighten(hex_to_rgba(chart.config.colors[0]))
        self.assertFalse(_has_color(before, highlight))
        self.assertTrue(_has_color(after, highlight))

    def test_clear_drops_highlight(self) -> None:
        chart = LineChart(width=215, height=115)
        chart.add_line([1, 5, 3, 8, 2])
        chart.handle_touch(TouchEvent(phase="ended", x=115.0, y=0.0))
        chart.clear()
        self.assertIsNone(chart.highlighted_index)

    def test_repeated_moves_skip_layout_warnings(self) -> None:
        chart = LineChart(width=215, height=115, config=ChartConfig(font_size_px=14.0))
        chart.add_line([1, 5, 3, 8, 2])
        with self.assertNoLogs("linechart.layout", level="WARNING"):
            for x in range(15, 215, 20):
                selection = chart.handle_touch(TouchEvent(phase="moved", x=float(x), y=10.0))
                self.assertIsNotNone(selection)
        self.assertEqual(chart.highlighted_index, 4)
        with self.assertLogs("linechart.layout", level="WARNING"):
            chart.render()


class LineChartStateTests(unittest.TestCase):
    def test_internal_state_is_not_a_constructor_argument(self) -> None:
        with self.assertRaises(TypeError):
            LineChart(10, 10, ChartConfig(), None, ChartData())  # type: ignore[call-arg]
        with self.assertRaises(TypeError):
            LineChart(width=10, height=10, _highlighted=2)  # type: ignore[call-arg]

    def test_repr_omits_internal_state(self) -> None:
        chart = LineChart(width=215, height=115)
        chart.add_line([1, 5, 3, 8, 2])
        self.assertNotIn("_data", repr(chart))


if __name__ == "__main__":
    unittest.main()
