"""Program tree: path statements, mover statements.

Every node is a frozen pydantic model. Editing a program never mutates a
node; it builds a replacement with ``model_copy(update=...)``.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from path_mover.types.geometry import Vector2


class _Statement(BaseModel):
    model_config = ConfigDict(frozen=True)


class StartStatement(_Statement):
    """Jump the cursor to an absolute point without drawing."""

    kind: Literal["Start"] = "Start"
    start: Vector2


class LineStatement(_Statement):
    kind: Literal["Line"] = "Line"
    end: Vector2


class LineContinueStatement(_Statement):
    """Extend along the current tangent by ``length``."""

    kind: Literal["LineContinue"] = "LineContinue"
    length: float


class ArcStatement(_Statement):
    """Arc around an absolute center; radius comes from the cursor."""

    kind: Literal["Arc"] = "Arc"
    center: Vector2
    angle: float  # Signed sweep in radians, positive = counter-clockwise


class ArcContinueStatement(_Statement):
    """Tangent-continuous arc; the center is derived from the cursor."""

    kind: Literal["ArcContinue"] = "ArcContinue"
    radius: float
    angle: float


class BezierStatement(_Statement):
    """Cubic Bezier from the cursor through c1, c2 to end."""

    kind: Literal["Bezier"] = "Bezier"
    c1: Vector2
    c2: Vector2
    end: Vector2
    segments: int = Field(gt=0)


class BezierContinueStatement(_Statement):
    """Cubic Bezier whose first control point sits on the current tangent."""

    kind: Literal["BezierContinue"] = "BezierContinue"
    c1_offset: float
    c2: Vector2
    end: Vector2
    segments: int = Field(gt=0)


PathStatement = Annotated[
    StartStatement
    | LineStatement
    | LineContinueStatement
    | ArcStatement
    | ArcContinueStatement
    | BezierStatement
    | BezierContinueStatement,
    Field(discriminator="kind"),
]


class MoverMethod(str, Enum):
    """Easing method of one phase."""

    UNIFORM = "Uniform"
    SINE = "Sine"
    COSINE = "Cosine"
    SMOOTH_STEP = "SmoothStep"
    INVERSE_SMOOTH_STEP = "InverseSmoothStep"
    WAIT = "Wait"


class MoverStatement(_Statement):
    """One phase: an easing method, a duration and the path it traverses."""

    method: MoverMethod
    duration: float = Field(ge=0)
    path_statements: tuple[PathStatement, ...] = ()
