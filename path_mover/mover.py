"""Time evaluation of built paths.

Elapsed time is always an explicit argument; movers hold no clock and
sampling the same time twice gives the same answer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from path_mover.types import UNIT_X, ZERO, MoverEval, clamp_value

if TYPE_CHECKING:
    from path_mover.easing import EasingCurve
    from path_mover.paths import Path


class Mover(ABC):
    """Something that can be sampled over [0, duration]."""

    def __init__(self, duration: float) -> None:
        self.duration = duration

    @abstractmethod
    def evaluate(self, time_elapsed: float) -> MoverEval: ...


class SimpleMover(Mover):
    """One phase: a path traversed under one easing curve."""

    def __init__(self, path: Path, duration: float, curve: EasingCurve) -> None:
        super().__init__(duration)
        self.path = path
        self.curve = curve

    def relative_time(self, time_elapsed: float) -> float:
        if self.duration == 0:
            return 1.0
        return clamp_value(time_elapsed / self.duration, 0.0, 1.0)

    def evaluate(self, time_elapsed: float) -> MoverEval:
        relative_time = self.relative_time(time_elapsed)
        path_length = self.path.length()
        progress = self.curve.evaluate(relative_time)
        path_eval = self.path.at(progress * path_length)

        # Chain rule: d(arclength)/d(time)
        if self.duration == 0 or path_length == 0:
            speed = 0.0
        else:
            speed = self.curve.derivative(relative_time) * path_length / self.duration

        return MoverEval(position=path_eval.position, direction=path_eval.direction, speed=speed)

    def __repr__(self) -> str:
        return f"SimpleMover({self.curve.name}, duration={self.duration}, path={self.path!r})"


class SequencedMover(Mover):
    """Phases played back to back."""

    def __init__(self, movers: Sequence[Mover]) -> None:
        self.movers = tuple(movers)
        self.cumulative_durations: list[float] = []
        total = 0.0
        for mover in self.movers:
            total += mover.duration
            self.cumulative_durations.append(total)
        super().__init__(total)

    @property
    def total_duration(self) -> float:
        return self.duration

    def locate(self, time_elapsed: float) -> tuple[int, float]:
        """Find the phase owning a time and the time local to it.

        A time exactly on a boundary belongs to the earlier phase.
        """
        clamped = clamp_value(time_elapsed, 0.0, self.duration)
        index = 0
        while index < len(self.movers) - 1 and clamped > self.cumulative_durations[index]:
            index += 1
        phase_start = self.cumulative_durations[index - 1] if index > 0 else 0.0
        return index, clamped - phase_start

    def evaluate(self, time_elapsed: float) -> MoverEval:
        if not self.movers:
            return MoverEval(position=ZERO, direction=UNIT_X, speed=0.0)
        index, local_time = self.locate(time_elapsed)
        return self.movers[index].evaluate(local_time)

    def __repr__(self) -> str:
        return f"SequencedMover({len(self.movers)} phases, duration={self.duration})"


__all__ = ["Mover", "SequencedMover", "SimpleMover"]
