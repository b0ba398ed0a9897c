"""Core geometry types."""

import math

from pydantic import BaseModel, ConfigDict


class Vector2(BaseModel):
    """An immutable 2D vector."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(x=self.x - other.x, y=self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(x=self.x * scalar, y=self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.__mul__(scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(x=-self.x, y=-self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vector2":
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return ZERO
        return Vector2(x=self.x / length, y=self.y / length)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def angle(self) -> float:
        """Angle from the +x axis in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def rotate(self, angle_radian: float) -> "Vector2":
        """Rotate counter-clockwise by angle_radian."""
        cos_a = math.cos(angle_radian)
        sin_a = math.sin(angle_radian)
        return Vector2(
            x=self.x * cos_a - self.y * sin_a,
            y=self.x * sin_a + self.y * cos_a,
        )

    def perpendicular(self) -> "Vector2":
        """Left normal, i.e. the vector rotated by +pi/2."""
        return Vector2(x=-self.y, y=self.x)

    @classmethod
    def from_angle(cls, angle_radian: float, radius: float = 1.0) -> "Vector2":
        return cls(x=radius * math.cos(angle_radian), y=radius * math.sin(angle_radian))


ZERO = Vector2(x=0.0, y=0.0)
UNIT_X = Vector2(x=1.0, y=0.0)


class PathEval(BaseModel):
    """Position and unit tangent at one point of a path."""

    model_config = ConfigDict(frozen=True)

    position: Vector2
    direction: Vector2


class MoverEval(BaseModel):
    """Sampled state of a mover at one instant.

    ``speed`` is distance per unit time. It is ``math.inf`` where the easing
    curve has a vertical slope, as InverseSmoothStep does at both phase ends.
    """

    model_config = ConfigDict(frozen=True)

    position: Vector2
    direction: Vector2
    speed: float


def clamp_value(value: float, low: float, high: float) -> float:
    """Clamp a value to a range [low, high]."""
    return max(low, min(high, value))
