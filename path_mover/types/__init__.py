"""Type definitions for path_mover.

This package contains all type definitions organized into focused modules:
- geometry: Vector algebra and evaluation results
- statements: Program tree nodes (path and mover statements)
- control_points: Editable handles derived from program literals
"""

from path_mover.types.control_points import (
    ControlPath,
    ControlPoint,
    FreeControlPoint,
    OnArcControlPoint,
    RadiusControlPoint,
    RayControlPoint,
    wrap_angle,
)
from path_mover.types.geometry import (
    UNIT_X,
    ZERO,
    MoverEval,
    PathEval,
    Vector2,
    clamp_value,
)
from path_mover.types.statements import (
    ArcContinueStatement,
    ArcStatement,
    BezierContinueStatement,
    BezierStatement,
    LineContinueStatement,
    LineStatement,
    MoverMethod,
    MoverStatement,
    PathStatement,
    StartStatement,
)

__all__ = [
    "UNIT_X",
    "ZERO",
    "ArcContinueStatement",
    "ArcStatement",
    "BezierContinueStatement",
    "BezierStatement",
    "ControlPath",
    "ControlPoint",
    "FreeControlPoint",
    "LineContinueStatement",
    "LineStatement",
    "MoverEval",
    "MoverMethod",
    "MoverStatement",
    "OnArcControlPoint",
    "PathEval",
    "PathStatement",
    "RadiusControlPoint",
    "RayControlPoint",
    "StartStatement",
    "Vector2",
    "clamp_value",
    "wrap_angle",
]
