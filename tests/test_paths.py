"""Tests for arclength-indexed path primitives."""

import math

import pytest

from path_mover.paths import (
    ApproxBezier,
    Arc,
    BezierCurve,
    LineSegment,
    SegmentedPath,
    lerp,
    lerp_point,
)
from path_mover.types import Vector2


def v(x: float, y: float) -> Vector2:
    return Vector2(x=x, y=y)


class TestLerp:
    def test_lerp_start(self) -> None:
        assert lerp(0, 100, 0) == 0

    def test_lerp_end(self) -> None:
        assert lerp(0, 100, 1) == 100

    def test_lerp_middle(self) -> None:
        assert lerp(0, 100, 0.5) == 50

    def test_lerp_point(self) -> None:
        result = lerp_point(v(0, 0), v(100, 100), 0.5)
        assert result == v(50, 50)


class TestLineSegment:
    def test_length(self) -> None:
        assert LineSegment(v(0, 0), v(3, 4)).length() == 5

    def test_at_midpoint(self) -> None:
        result = LineSegment(v(0, 0), v(3, 4)).at(2.5)
        assert result.position.x == pytest.approx(1.5)
        assert result.position.y == pytest.approx(2)
        assert result.direction.x == pytest.approx(0.6)

    def test_at_clamps(self) -> None:
        line = LineSegment(v(0, 0), v(2, 0))
        assert line.at(-1).position == v(0, 0)
        assert line.at(10).position == v(2, 0)

    def test_degenerate_line(self) -> None:
        line = LineSegment(v(1, 1), v(1, 1))
        assert line.length() == 0
        assert line.at(0).position == v(1, 1)


class TestArc:
    def test_quarter_turn_counter_clockwise(self) -> None:
        arc = Arc(v(0, 0), 2, 0, math.pi / 2)
        assert arc.length() == pytest.approx(math.pi)
        end = arc.at_end()
        assert end.position.x == pytest.approx(0, abs=1e-12)
        assert end.position.y == pytest.approx(2)
        assert end.direction.x == pytest.approx(-1)

    def test_clockwise_tangent(self) -> None:
        arc = Arc(v(0, 0), 1, 0, -math.pi / 2)
        start = arc.at_start()
        assert not arc.counter_clockwise
        assert start.direction.x == pytest.approx(0, abs=1e-12)
        assert start.direction.y == pytest.approx(-1)

    def test_span_beyond_full_turn(self) -> None:
        """Spans over 2 pi are kept and make a longer path."""
        arc = Arc(v(0, 0), 1, 0, 3 * math.pi)
        assert arc.length() == pytest.approx(3 * math.pi)

    def test_zero_radius_has_zero_length(self) -> None:
        arc = Arc(v(1, 1), 0, 0, math.pi)
        assert arc.length() == 0
        assert arc.at(0.5).position == v(1, 1)


class TestBezierCurve:
    def test_endpoints(self) -> None:
        curve = BezierCurve([v(0, 0), v(0, 1), v(1, 1), v(1, 0)])
        assert curve.evaluate(0) == v(0, 0)
        assert curve.evaluate(1) == v(1, 0)

    def test_midpoint(self) -> None:
        curve = BezierCurve([v(0, 0), v(0, 1), v(1, 1), v(1, 0)])
        mid = curve.evaluate(0.5)
        assert mid.x == pytest.approx(0.5)
        assert mid.y == pytest.approx(0.75)

    def test_derivative_at_ends(self) -> None:
        """Hodograph gives 3 * (p1 - p0) and 3 * (p3 - p2)."""
        curve = BezierCurve([v(0, 0), v(0, 1), v(1, 1), v(1, 0)])
        assert curve.derivative(0) == v(0, 3)
        assert curve.derivative(1) == v(0, -3)


class TestSegmentedPath:
    @pytest.fixture
    def path(self) -> SegmentedPath:
        return SegmentedPath(
            [
                LineSegment(v(0, 0), v(2, 0)),
                Arc(v(2, 1), 1, -math.pi / 2, 0),
                LineSegment(v(3, 1), v(3, 4)),
            ]
        )

    def test_length_is_sum_of_children(self, path: SegmentedPath) -> None:
        assert path.length() == pytest.approx(sum(c.length() for c in path.curves))

    def test_endpoints_match_children_exactly(self, path: SegmentedPath) -> None:
        assert path.at(0) == path.curves[0].at_start()
        assert path.at(path.length()) == path.curves[-1].at_end()

    def test_determine_segment(self, path: SegmentedPath) -> None:
        index, local = path.determine_segment(2 + math.pi / 4)
        assert index == 1
        assert local == pytest.approx(math.pi / 4)

    def test_at_inside_last_segment(self, path: SegmentedPath) -> None:
        result = path.at(path.length() - 1)
        assert result.position.x == pytest.approx(3)
        assert result.position.y == pytest.approx(3)

    def test_empty_path_is_degenerate(self) -> None:
        path = SegmentedPath([], v(5, 5), v(0, 1))
        assert path.length() == 0
        result = path.at(3)
        assert result.position == v(5, 5)
        assert result.direction == v(0, 1)


class TestApproxBezier:
    def test_endpoints_and_directions(self) -> None:
        approx = ApproxBezier(BezierCurve([v(0, 0), v(0, 1), v(1, 1), v(1, 0)]), 50)
        assert approx.at_start().position == v(0, 0)
        assert approx.at_end().position.x == pytest.approx(1)
        assert approx.start_direction == v(0, 1)
        assert approx.end_direction == v(0, -1)

    def test_length_approaches_true_length(self) -> None:
        straight = ApproxBezier(BezierCurve([v(0, 0), v(1, 0), v(2, 0), v(3, 0)]), 10)
        assert straight.length() == pytest.approx(3)

    def test_segment_count_floor(self) -> None:
        approx = ApproxBezier(BezierCurve([v(0, 0), v(1, 1), v(2, 1), v(3, 0)]), 0)
        assert approx.segments == 1
        assert len(approx.inner.curves) == 1
