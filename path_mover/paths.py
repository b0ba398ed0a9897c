"""Path primitives indexed by arclength.

Every path answers ``length()`` and ``at(t)``, where ``t`` is a distance
along the path clamped to [0, length()]. These are pure value objects:
no side effects or I/O.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from bisect import bisect_right
from collections.abc import Sequence

from path_mover.types import UNIT_X, ZERO, PathEval, Vector2, clamp_value


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between two values."""
    return a + (b - a) * t


def lerp_point(p1: Vector2, p2: Vector2, t: float) -> Vector2:
    """Linearly interpolate between two points."""
    return Vector2(x=lerp(p1.x, p2.x, t), y=lerp(p1.y, p2.y, t))


class Path(ABC):
    """Common contract of every path primitive."""

    @abstractmethod
    def length(self) -> float: ...

    @abstractmethod
    def at(self, t: float) -> PathEval: ...

    def at_start(self) -> PathEval:
        return self.at(0.0)

    def at_end(self) -> PathEval:
        return self.at(self.length())


class LineSegment(Path):
    def __init__(self, start: Vector2, end: Vector2) -> None:
        self.start = start
        self.end = end
        self.direction = (end - start).normalized()
        self._length = (end - start).length()

    def length(self) -> float:
        return self._length

    def at(self, t: float) -> PathEval:
        clamped = clamp_value(t, 0.0, self._length)
        return PathEval(position=self.start + self.direction * clamped, direction=self.direction)

    def __repr__(self) -> str:
        return f"LineSegment({self.start!r}, {self.end!r})"


class Arc(Path):
    """Circular arc swept from start_angle to end_angle.

    end_angle > start_angle sweeps counter-clockwise. Spans beyond a full
    turn are kept as-is and simply make a longer path.
    """

    def __init__(
        self, center: Vector2, radius: float, start_angle: float, end_angle: float
    ) -> None:
        self.center = center
        self.radius = radius
        self.start_angle = start_angle
        self.end_angle = end_angle

    @property
    def counter_clockwise(self) -> bool:
        return self.end_angle > self.start_angle

    def length(self) -> float:
        return abs(self.end_angle - self.start_angle) * self.radius

    def at(self, t: float) -> PathEval:
        length = self.length()
        if length == 0:
            angle = self.start_angle
        else:
            clamped = clamp_value(t, 0.0, length)
            angle = self.start_angle + (self.end_angle - self.start_angle) * (clamped / length)
        position = self.center + Vector2.from_angle(angle, self.radius)
        if self.counter_clockwise:
            direction = Vector2(x=-math.sin(angle), y=math.cos(angle))
        else:
            direction = Vector2(x=math.sin(angle), y=-math.cos(angle))
        return PathEval(position=position, direction=direction)

    def __repr__(self) -> str:
        return (
            f"Arc({self.center!r}, radius={self.radius}, "
            f"start_angle={self.start_angle}, end_angle={self.end_angle})"
        )


class BezierCurve:
    """Bezier curve of any degree, evaluated by de Casteljau's algorithm.

    This is parametrized by t in [0, 1], not by arclength; wrap it in
    ApproxBezier to use it as a Path.
    """

    def __init__(self, points: Sequence[Vector2]) -> None:
        self.points = tuple(points)

    def evaluate(self, t: float) -> Vector2:
        points = list(self.points)
        if not points:
            return ZERO
        n = len(points)
        for r in range(1, n):
            for i in range(n - r):
                points[i] = lerp_point(points[i], points[i + 1], t)
        return points[0]

    def hodograph(self) -> BezierCurve:
        """Derivative curve: n * (p[i+1] - p[i])."""
        n = len(self.points) - 1
        return BezierCurve(
            [(self.points[i + 1] - self.points[i]) * n for i in range(n)]
        )

    def derivative(self, t: float) -> Vector2:
        return self.hodograph().evaluate(t)


class SegmentedPath(Path):
    """Concatenation of paths indexed by cumulative arclength.

    A path with zero total length always evaluates to
    (start_position, start_direction).
    """

    def __init__(
        self,
        curves: Sequence[Path],
        start_position: Vector2 = ZERO,
        start_direction: Vector2 = UNIT_X,
    ) -> None:
        self.curves = tuple(curves)
        self.start_position = start_position
        self.start_direction = start_direction
        self.cumulative_lengths: list[float] = []
        total = 0.0
        for curve in self.curves:
            total += curve.length()
            self.cumulative_lengths.append(total)
        self.total_length = total

    def length(self) -> float:
        return self.total_length

    def determine_segment(self, t: float) -> tuple[int, float]:
        """Find the child owning arclength t and the offset inside it."""
        index = min(bisect_right(self.cumulative_lengths, t), len(self.curves) - 1)
        segment_start = self.cumulative_lengths[index - 1] if index > 0 else 0.0
        return index, t - segment_start

    def at(self, t: float) -> PathEval:
        if self.total_length == 0:
            return PathEval(position=self.start_position, direction=self.start_direction)
        if t <= 0:
            return self.curves[0].at_start()
        if t >= self.total_length:
            return self.curves[-1].at_end()
        index, local_t = self.determine_segment(t)
        return self.curves[index].at(local_t)

    def __repr__(self) -> str:
        return f"SegmentedPath({len(self.curves)} curves, length={self.total_length})"


class ApproxBezier(Path):
    """Polyline approximation of a Bezier curve.

    The curve is sampled at uniform parameter steps, so traversal speed
    varies with curvature even under uniform easing.
    """

    def __init__(self, bezier: BezierCurve, segments: int) -> None:
        self.bezier = bezier
        self.segments = max(1, int(segments))
        samples = [bezier.evaluate(i / self.segments) for i in range(self.segments + 1)]
        lines = [LineSegment(a, b) for a, b in zip(samples[:-1], samples[1:], strict=True)]
        self.start_direction = bezier.derivative(0.0).normalized()
        self.end_direction = bezier.derivative(1.0).normalized()
        self.inner = SegmentedPath(lines, samples[0], self.start_direction)

    def length(self) -> float:
        return self.inner.length()

    def at(self, t: float) -> PathEval:
        return self.inner.at(t)

    def __repr__(self) -> str:
        return f"ApproxBezier({self.bezier.points!r}, segments={self.segments})"


__all__ = [
    "ApproxBezier",
    "Arc",
    "BezierCurve",
    "LineSegment",
    "Path",
    "SegmentedPath",
    "lerp",
    "lerp_point",
]
