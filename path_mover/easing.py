"""Easing curves mapping normalized time to normalized path progress.

Every curve is pure and stateless, maps [0, 1] onto [0, 1] monotonically,
and is paired with its first derivative so movers can report speed.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass

from path_mover.types import MoverMethod, clamp_value

HALF_PI = math.pi / 2


@dataclass(frozen=True)
class EasingCurve:
    """A named easing function with its derivative."""

    name: str
    function: Callable[[float], float]
    slope: Callable[[float], float]

    def evaluate(self, t: float) -> float:
        return self.function(clamp_value(t, 0.0, 1.0))

    def derivative(self, t: float) -> float:
        return self.slope(clamp_value(t, 0.0, 1.0))


def smoothstep(t: float) -> float:
    """Cubic Hermite ease: 3t^2 - 2t^3."""
    return t * t * (3.0 - 2.0 * t)


def smoothstep_derivative(t: float) -> float:
    return 6.0 * t * (1.0 - t)


def inverse_smoothstep(t: float) -> float:
    """Exact inverse of smoothstep: fast at both ends, slow in the middle."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return 0.5 - math.sin(math.asin(1.0 - 2.0 * t) / 3.0)


def inverse_smoothstep_derivative(t: float) -> float:
    # Inverse function rule; the slope is vertical at both ends.
    slope = smoothstep_derivative(inverse_smoothstep(t))
    if slope <= 0.0:
        return math.inf
    return 1.0 / slope


UNIFORM = EasingCurve("Uniform", lambda t: t, lambda t: 1.0)
SINE = EasingCurve(
    "Sine",
    lambda t: math.sin(t * HALF_PI),
    lambda t: HALF_PI * math.cos(t * HALF_PI),
)
COSINE = EasingCurve(
    "Cosine",
    lambda t: 1.0 - math.cos(t * HALF_PI),
    lambda t: HALF_PI * math.sin(t * HALF_PI),
)
SMOOTH_STEP = EasingCurve("SmoothStep", smoothstep, smoothstep_derivative)
INVERSE_SMOOTH_STEP = EasingCurve(
    "InverseSmoothStep", inverse_smoothstep, inverse_smoothstep_derivative
)

EASING_CURVES: dict[MoverMethod, EasingCurve] = {
    MoverMethod.UNIFORM: UNIFORM,
    MoverMethod.SINE: SINE,
    MoverMethod.COSINE: COSINE,
    MoverMethod.SMOOTH_STEP: SMOOTH_STEP,
    MoverMethod.INVERSE_SMOOTH_STEP: INVERSE_SMOOTH_STEP,
    # A pause still walks its path; it just uses the plain clock.
    MoverMethod.WAIT: UNIFORM,
}


def get_easing(method: MoverMethod) -> EasingCurve:
    """Get the easing curve for a mover method."""
    return EASING_CURVES[method]


def list_easings() -> list[str]:
    """Get list of available easing names."""
    return sorted({curve.name for curve in EASING_CURVES.values()})


__all__ = [
    "COSINE",
    "EASING_CURVES",
    "INVERSE_SMOOTH_STEP",
    "SINE",
    "SMOOTH_STEP",
    "UNIFORM",
    "EasingCurve",
    "get_easing",
    "inverse_smoothstep",
    "list_easings",
    "smoothstep",
]
