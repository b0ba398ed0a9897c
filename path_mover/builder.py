"""Cursor-threading path and mover builders.

A builder carries a cursor (position plus tangent direction) through a
chain of path calls. Builders are values: every call returns a new builder
and leaves the receiver untouched, so a partially built chain can be reused.

Absolute calls (``start``, ``line``, ``arc``, ``bezier``) take literal
points. ``*_continue`` calls are relative to the cursor and start tangent to
whatever precedes them.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace

from path_mover.config import settings
from path_mover.easing import (
    COSINE,
    INVERSE_SMOOTH_STEP,
    SINE,
    SMOOTH_STEP,
    UNIFORM,
    EasingCurve,
)
from path_mover.mover import Mover, SequencedMover, SimpleMover
from path_mover.paths import ApproxBezier, Arc, BezierCurve, LineSegment, Path, SegmentedPath
from path_mover.types import (
    UNIT_X,
    ZERO,
    ArcContinueStatement,
    ArcStatement,
    BezierContinueStatement,
    BezierStatement,
    LineContinueStatement,
    LineStatement,
    PathStatement,
    StartStatement,
    Vector2,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cursor:
    """Current position and unit tangent direction."""

    position: Vector2 = ZERO
    direction: Vector2 = UNIT_X

    def advance(self, position: Vector2, direction: Vector2) -> Cursor:
        """Move to a new endpoint; an undefined tangent keeps the old one."""
        if direction.length() == 0:
            direction = self.direction
        return Cursor(position=position, direction=direction)


def arc_center(cursor: Cursor, radius: float, angle_radian: float) -> Vector2:
    """Center of a tangent-continuous arc starting at the cursor.

    Positive sweeps turn left, so the center sits on the left normal.
    """
    normal = cursor.direction.perpendicular()
    if angle_radian <= 0:
        normal = -normal
    return cursor.position + normal * radius


@dataclass(frozen=True)
class PathBuilder:
    """Accumulates path segments while threading the cursor."""

    cursor: Cursor = field(default_factory=Cursor)
    paths: tuple[Path, ...] = ()

    @property
    def last_position(self) -> Vector2:
        return self.cursor.position

    @property
    def last_direction(self) -> Vector2:
        return self.cursor.direction

    def _push(self, path: Path, cursor: Cursor) -> PathBuilder:
        return replace(self, cursor=cursor, paths=(*self.paths, path))

    def start(self, start: Vector2) -> PathBuilder:
        return replace(self, cursor=Cursor(position=start, direction=self.cursor.direction))

    def line(self, end: Vector2) -> PathBuilder:
        segment = LineSegment(self.cursor.position, end)
        return self._push(segment, self.cursor.advance(end, segment.direction))

    def line_continue(self, length: float) -> PathBuilder:
        return self.line(self.cursor.position + self.cursor.direction * length)

    def arc(self, center: Vector2, angle_radian: float) -> PathBuilder:
        offset = self.cursor.position - center
        radius = offset.length()
        start_angle = offset.angle()
        end_angle = start_angle + angle_radian
        end_position = center + Vector2.from_angle(end_angle, radius)
        turn = math.pi / 2 if angle_radian > 0 else -math.pi / 2
        direction = Vector2.from_angle(end_angle + turn)
        return self._push(
            Arc(center, radius, start_angle, end_angle),
            self.cursor.advance(end_position, direction),
        )

    def arc_continue(self, radius: float, angle_radian: float) -> PathBuilder:
        return self.arc(arc_center(self.cursor, radius, angle_radian), angle_radian)

    def bezier(
        self,
        c1: Vector2,
        c2: Vector2,
        end: Vector2,
        segments: int | None = None,
    ) -> PathBuilder:
        if segments is None:
            segments = settings.default_bezier_segments
        curve = ApproxBezier(BezierCurve([self.cursor.position, c1, c2, end]), segments)
        return self._push(curve, self.cursor.advance(end, curve.end_direction))

    def bezier_continue(
        self,
        c1_offset: float,
        c2: Vector2,
        end: Vector2,
        segments: int | None = None,
    ) -> PathBuilder:
        c1 = self.cursor.position + self.cursor.direction * c1_offset
        return self.bezier(c1, c2, end, segments)

    def apply(self, statement: PathStatement) -> PathBuilder:
        """Replay one path statement."""
        match statement:
            case StartStatement(start=start):
                return self.start(start)
            case LineStatement(end=end):
                return self.line(end)
            case LineContinueStatement(length=length):
                return self.line_continue(length)
            case ArcStatement(center=center, angle=angle):
                return self.arc(center, angle)
            case ArcContinueStatement(radius=radius, angle=angle):
                return self.arc_continue(radius, angle)
            case BezierStatement(c1=c1, c2=c2, end=end, segments=segments):
                return self.bezier(c1, c2, end, segments)
            case BezierContinueStatement(c1_offset=c1_offset, c2=c2, end=end, segments=segments):
                return self.bezier_continue(c1_offset, c2, end, segments)
            case _:
                raise TypeError(f"Unknown path statement: {statement!r}")

    def apply_all(self, statements: Iterable[PathStatement]) -> PathBuilder:
        builder = self
        for statement in statements:
            builder = builder.apply(statement)
        return builder

    def build(self) -> SegmentedPath:
        """Concatenate the segments; an empty path rests at the final cursor."""
        return SegmentedPath(self.paths, self.cursor.position, self.cursor.direction)


PathBuildFn = Callable[[PathBuilder], PathBuilder]


@dataclass(frozen=True)
class SequencedMoverBuilder:
    """Chains easing phases, passing the end cursor of one to the next."""

    cursor: Cursor = field(default_factory=Cursor)
    movers: tuple[Mover, ...] = ()

    def phase(
        self, duration: float, curve: EasingCurve, build_path: PathBuildFn
    ) -> SequencedMoverBuilder:
        builder = build_path(PathBuilder(cursor=self.cursor))
        mover = SimpleMover(builder.build(), duration, curve)
        logger.debug(
            f"Built {curve.name} phase: duration={duration}, "
            f"segments={len(builder.paths)}, length={mover.path.length():.3f}"
        )
        return replace(self, cursor=builder.cursor, movers=(*self.movers, mover))

    def uniform(self, duration: float, build_path: PathBuildFn) -> SequencedMoverBuilder:
        return self.phase(duration, UNIFORM, build_path)

    def sine(self, duration: float, build_path: PathBuildFn) -> SequencedMoverBuilder:
        return self.phase(duration, SINE, build_path)

    def cosine(self, duration: float, build_path: PathBuildFn) -> SequencedMoverBuilder:
        return self.phase(duration, COSINE, build_path)

    def smooth_step(self, duration: float, build_path: PathBuildFn) -> SequencedMoverBuilder:
        return self.phase(duration, SMOOTH_STEP, build_path)

    def inverse_smooth_step(
        self, duration: float, build_path: PathBuildFn
    ) -> SequencedMoverBuilder:
        return self.phase(duration, INVERSE_SMOOTH_STEP, build_path)

    def wait(
        self, duration: float, build_path: PathBuildFn = lambda pb: pb
    ) -> SequencedMoverBuilder:
        return self.phase(duration, UNIFORM, build_path)

    def build(self) -> SequencedMover:
        return SequencedMover(self.movers)


__all__ = [
    "Cursor",
    "PathBuilder",
    "SequencedMoverBuilder",
    "arc_center",
]
