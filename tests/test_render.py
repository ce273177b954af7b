"""
Tests for render replay.

Uses a recording draw context (see conftest.RecordingContext).
"""

from squiggles.core.render import StrokeStyle, draw_points, replay
from squiggles.core.stroke import DrawMode, Point, SolidBrush


BRUSH = SolidBrush(0.1, 0.2, 0.3)


class TestDrawPoints:

    def test_line_is_open_stroked_path(self, recorder):
        points = [Point(0, 0), Point(10, 0), Point(10, 10)]

        assert draw_points(recorder, points, DrawMode.LINE, BRUSH)

        assert recorder.ops() == ["begin_path", "move_to", "line_to", "line_to", "stroke"]
        assert recorder.calls[1] == ("move_to", 1, 0, 0)
        assert recorder.calls[3] == ("line_to", 1, 10, 10)
        assert recorder.calls[4] == ("stroke", 1, BRUSH, StrokeStyle())

    def test_fill_closes_then_fills(self, recorder):
        points = [Point(0, 0), Point(10, 0), Point(10, 10)]

        draw_points(recorder, points, DrawMode.FILL, BRUSH)

        assert recorder.ops() == ["begin_path", "move_to", "line_to", "line_to", "close_path", "fill"]
        assert recorder.calls[-1] == ("fill", 1, BRUSH)

    def test_single_point_fill_does_not_fail(self, recorder):
        assert draw_points(recorder, [Point(5, 5)], DrawMode.FILL, BRUSH)
        assert recorder.ops() == ["begin_path", "move_to", "close_path", "fill"]

    def test_empty_points_skipped(self, recorder):
        assert not draw_points(recorder, [], DrawMode.LINE, BRUSH)
        assert recorder.calls == []

    def test_mode_none_draws_nothing(self, recorder):
        assert not draw_points(recorder, [Point(1, 1)], DrawMode.NONE, BRUSH)
        assert recorder.calls == []

    def test_custom_style(self, recorder):
        style = StrokeStyle(width=4.0)
        draw_points(recorder, [Point(0, 0), Point(1, 1)], DrawMode.LINE, BRUSH, style)
        assert recorder.paints()[0][3] is style


class TestReplay:

    def test_empty_state_draws_nothing(self, recorder, state):
        assert replay(recorder, state) == 0
        assert recorder.calls == []

    def test_strokes_in_insertion_order(self, recorder, state):
        state.mouse_down(1, 0, 0)
        state.mouse_move(1, 0)
        state.mouse_up(1)
        state.mouse_down(2, 5, 5)
        state.mouse_move(6, 5)
        state.mouse_move(6, 6)
        state.mouse_up(2)
        state.mouse_down(1, 9, 9)
        state.mouse_up(1)

        assert replay(recorder, state) == 3

        moves = [call for call in recorder.calls if call[0] == "move_to"]
        assert [call[2:] for call in moves] == [(0, 0), (5, 5), (9, 9)]
        assert [call[0] for call in recorder.paints()] == ["stroke", "fill", "stroke"]
        assert [call[2] for call in recorder.paints()] == [s.brush for s in state.strokes]

    def test_pending_capture_drawn_first_with_pending_brush(self, recorder, state):
        state.mouse_down(1, 0, 0)
        state.mouse_up(1)
        state.mouse_down(3, 2, 2)
        state.mouse_move(3, 3)

        assert replay(recorder, state) == 2

        first, second = recorder.paints()
        assert first[0] == "fill"
        assert first[2] == state.brushes.pending_brush()
        assert second[2] == state.strokes[0].brush

    def test_replay_is_repeatable(self, recorder, state):
        state.mouse_down(1, 0, 0)
        state.mouse_move(2, 2)
        state.mouse_up(1)

        replay(recorder, state)
        first = list(recorder.calls)
        recorder.calls.clear()
        replay(recorder, state)

        assert [c[0] for c in recorder.calls] == [c[0] for c in first]
