"""Editable handles derived from program literals.

A control point is a snapshot: it carries the geometric context needed to
invert a drag back into one literal, plus a ``control_path`` that addresses
that literal inside the program it was derived from. Regenerate the list
after every edit.
"""

import math
from typing import Annotated, Literal, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from path_mover.types.geometry import Vector2

PathType = Literal["Start", "Line", "Arc", "Bezier"]
RenderType = Literal["Start", "KeyPoint", "Arc", "Bezier"]


class ControlPath(NamedTuple):
    """Structural index of a literal: (mover, path statement, argument)."""

    mover_index: int
    path_index: int
    argument_index: int


class _ControlPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    control_path: ControlPath
    path_type: PathType  # Kind of segment the handle belongs to
    render_type: RenderType  # How a renderer should draw the handle


class FreeControlPoint(_ControlPoint):
    """An absolute point literal."""

    type: Literal["Free"] = "Free"
    position: Vector2

    def handle_position(self) -> Vector2:
        return self.position


class RayControlPoint(_ControlPoint):
    """A scalar offset along a fixed tangent."""

    type: Literal["Ray"] = "Ray"
    anchor: Vector2
    direction: Vector2
    length: float

    def handle_position(self) -> Vector2:
        return self.anchor + self.direction * self.length


class OnArcControlPoint(_ControlPoint):
    """The end of an arc, editing its signed sweep angle."""

    type: Literal["OnArc"] = "OnArc"
    center: Vector2
    radius: float
    base_angle: float
    angle: float
    keep_positivity: bool

    def handle_position(self) -> Vector2:
        return self.center + Vector2.from_angle(self.base_angle + self.angle, self.radius)


class RadiusControlPoint(_ControlPoint):
    """The center of a tangent-continuous arc, editing its radius."""

    type: Literal["Radius"] = "Radius"
    start: Vector2
    direction: Vector2
    counter_clockwise: bool
    radius: float

    def handle_position(self) -> Vector2:
        normal = self.direction.normalized().perpendicular()
        if not self.counter_clockwise:
            normal = -normal
        return self.start + normal * self.radius


ControlPoint = Annotated[
    FreeControlPoint | RayControlPoint | OnArcControlPoint | RadiusControlPoint,
    Field(discriminator="type"),
]


def wrap_angle(angle: float) -> float:
    """Wrap an angle into (-pi, pi]."""
    wrapped = angle % (2 * math.pi)
    if wrapped > math.pi:
        wrapped -= 2 * math.pi
    return wrapped
