"""Control-point projection and inverse edits.

``to_control_points`` replays a program with the same cursor threading the
builder uses and freezes, for each literal, the geometry needed to invert a
drag. ``apply_change`` inverts one drag back into exactly one literal.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from path_mover.builder import Cursor, PathBuilder, arc_center
from path_mover.types import (
    ArcContinueStatement,
    ArcStatement,
    BezierContinueStatement,
    BezierStatement,
    ControlPath,
    ControlPoint,
    FreeControlPoint,
    LineContinueStatement,
    LineStatement,
    OnArcControlPoint,
    PathStatement,
    RadiusControlPoint,
    RayControlPoint,
    StartStatement,
    Vector2,
    wrap_angle,
)

if TYPE_CHECKING:
    from path_mover.program import Program

logger = logging.getLogger(__name__)

# Smallest sweep an edit may leave on a sign-locked arc
MIN_SWEEP = 0.01


def _statement_control_points(
    builder: PathBuilder, statement: PathStatement, mover_index: int, path_index: int
) -> list[ControlPoint]:
    """Handles owned by one statement, given the builder state before it."""

    def at(argument_index: int) -> ControlPath:
        return ControlPath(mover_index, path_index, argument_index)

    position = builder.last_position
    direction = builder.last_direction

    match statement:
        case StartStatement(start=start):
            return [
                FreeControlPoint(
                    control_path=at(0), path_type="Start", render_type="Start", position=start
                )
            ]
        case LineStatement(end=end):
            return [
                FreeControlPoint(
                    control_path=at(0), path_type="Line", render_type="KeyPoint", position=end
                )
            ]
        case LineContinueStatement(length=length):
            return [
                RayControlPoint(
                    control_path=at(0),
                    path_type="Line",
                    render_type="KeyPoint",
                    anchor=position,
                    direction=direction,
                    length=length,
                )
            ]
        case ArcStatement(center=center, angle=angle):
            offset = position - center
            return [
                FreeControlPoint(
                    control_path=at(0), path_type="Arc", render_type="Arc", position=center
                ),
                OnArcControlPoint(
                    control_path=at(1),
                    path_type="Arc",
                    render_type="KeyPoint",
                    center=center,
                    radius=offset.length(),
                    base_angle=offset.angle(),
                    angle=angle,
                    keep_positivity=False,
                ),
            ]
        case ArcContinueStatement(radius=radius, angle=angle):
            center = arc_center(Cursor(position, direction), radius, angle)
            return [
                RadiusControlPoint(
                    control_path=at(0),
                    path_type="Arc",
                    render_type="Arc",
                    start=position,
                    direction=direction,
                    counter_clockwise=angle > 0,
                    radius=radius,
                ),
                OnArcControlPoint(
                    control_path=at(1),
                    path_type="Arc",
                    render_type="KeyPoint",
                    center=center,
                    radius=radius,
                    base_angle=(position - center).angle(),
                    angle=angle,
                    keep_positivity=True,
                ),
            ]
        case BezierStatement(c1=c1, c2=c2, end=end):
            return [
                FreeControlPoint(
                    control_path=at(0), path_type="Bezier", render_type="Bezier", position=c1
                ),
                FreeControlPoint(
                    control_path=at(1), path_type="Bezier", render_type="Bezier", position=c2
                ),
                FreeControlPoint(
                    control_path=at(2), path_type="Bezier", render_type="KeyPoint", position=end
                ),
            ]
        case BezierContinueStatement(c1_offset=c1_offset, c2=c2, end=end):
            return [
                RayControlPoint(
                    control_path=at(0),
                    path_type="Bezier",
                    render_type="Bezier",
                    anchor=position,
                    direction=direction,
                    length=c1_offset,
                ),
                FreeControlPoint(
                    control_path=at(1), path_type="Bezier", render_type="Bezier", position=c2
                ),
                FreeControlPoint(
                    control_path=at(2), path_type="Bezier", render_type="KeyPoint", position=end
                ),
            ]
        case _:
            raise TypeError(f"Unknown path statement: {statement!r}")


def to_control_points(program: Program) -> list[ControlPoint]:
    """Derive the editable handles of a program, in statement order."""
    control_points: list[ControlPoint] = []
    cursor = Cursor()
    for mover_index, mover in enumerate(program.movers):
        builder = PathBuilder(cursor=cursor)
        for path_index, statement in enumerate(mover.path_statements):
            control_points.extend(
                _statement_control_points(builder, statement, mover_index, path_index)
            )
            builder = builder.apply(statement)
        cursor = builder.cursor
    return control_points


def control_point_position(control_point: ControlPoint) -> Vector2:
    """Where a handle is drawn."""
    return control_point.handle_position()


def _drag_free(
    statement: PathStatement, argument_index: int, new_position: Vector2
) -> PathStatement | None:
    match statement:
        case StartStatement():
            return statement.model_copy(update={"start": new_position})
        case LineStatement():
            return statement.model_copy(update={"end": new_position})
        case ArcStatement():
            return statement.model_copy(update={"center": new_position})
        case BezierStatement() if argument_index in (0, 1, 2):
            field_name = ("c1", "c2", "end")[argument_index]
            return statement.model_copy(update={field_name: new_position})
        case BezierContinueStatement() if argument_index in (1, 2):
            field_name = ("c2", "end")[argument_index - 1]
            return statement.model_copy(update={field_name: new_position})
    return None


def _drag_ray(
    statement: PathStatement, control_point: RayControlPoint, new_position: Vector2
) -> PathStatement | None:
    # Perpendicular component of the drag is discarded
    length = (new_position - control_point.anchor).dot(control_point.direction.normalized())
    match statement:
        case LineContinueStatement():
            return statement.model_copy(update={"length": length})
        case BezierContinueStatement():
            return statement.model_copy(update={"c1_offset": length})
    return None


def _drag_on_arc(
    statement: PathStatement, control_point: OnArcControlPoint, new_position: Vector2
) -> PathStatement | None:
    if not isinstance(statement, ArcStatement | ArcContinueStatement):
        return None
    old_angle = control_point.base_angle + control_point.angle
    target_angle = (new_position - control_point.center).angle()
    angle = control_point.angle + wrap_angle(target_angle - old_angle)
    if control_point.keep_positivity:
        if control_point.angle > 0 and angle <= 0:
            angle = MIN_SWEEP
        elif control_point.angle < 0 and angle >= 0:
            angle = -MIN_SWEEP
    return statement.model_copy(update={"angle": angle})


def _drag_radius(
    statement: PathStatement, control_point: RadiusControlPoint, new_position: Vector2
) -> PathStatement | None:
    if not isinstance(statement, ArcContinueStatement):
        return None
    normal = control_point.direction.rotate(math.pi / 2).normalized()
    signed_radius = (new_position - control_point.start).dot(normal)
    counter_clockwise = signed_radius >= 0
    angle = statement.angle
    # A zero sweep has no turn side; it is always laid out clockwise.
    if counter_clockwise != control_point.counter_clockwise:
        angle = -angle
    return statement.model_copy(update={"radius": abs(signed_radius), "angle": angle})


def _edited_statement(
    statement: PathStatement, control_point: ControlPoint, new_position: Vector2
) -> PathStatement | None:
    match control_point:
        case FreeControlPoint():
            return _drag_free(statement, control_point.control_path.argument_index, new_position)
        case RayControlPoint():
            return _drag_ray(statement, control_point, new_position)
        case OnArcControlPoint():
            return _drag_on_arc(statement, control_point, new_position)
        case RadiusControlPoint():
            return _drag_radius(statement, control_point, new_position)
    return None


def apply_change(program: Program, control_point: ControlPoint, new_position: Vector2) -> Program:
    """Return a new program with the literal behind ``control_point`` moved.

    Exactly one path statement is replaced. A control path that does not
    address a statement, or a handle kind the statement does not own, leaves
    the program unchanged. The input program is never modified.
    """
    mover_index, path_index, _ = control_point.control_path
    movers = [mover.model_copy(deep=True) for mover in program.movers]

    if not (0 <= mover_index < len(movers)):
        logger.debug(f"Ignoring edit: no mover at index {mover_index}")
        return type(program)(movers=tuple(movers))
    mover = movers[mover_index]
    if not (0 <= path_index < len(mover.path_statements)):
        logger.debug(f"Ignoring edit: mover {mover_index} has no statement {path_index}")
        return type(program)(movers=tuple(movers))

    statement = mover.path_statements[path_index]
    edited = _edited_statement(statement, control_point, new_position)
    if edited is None:
        logger.debug(
            f"Ignoring edit: {control_point.type} handle does not match {statement.kind} "
            f"at {tuple(control_point.control_path)}"
        )
        return type(program)(movers=tuple(movers))

    path_statements = list(mover.path_statements)
    path_statements[path_index] = edited
    movers[mover_index] = mover.model_copy(update={"path_statements": tuple(path_statements)})
    return type(program)(movers=tuple(movers))


__all__ = ["MIN_SWEEP", "apply_change", "control_point_position", "to_control_points"]
