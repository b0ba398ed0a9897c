"""Tests for time evaluation of movers."""

import math

import pytest

from path_mover.builder import PathBuilder
from path_mover.easing import INVERSE_SMOOTH_STEP, SINE, UNIFORM
from path_mover.mover import SequencedMover, SimpleMover
from path_mover.parser import parse
from path_mover.program import Program
from path_mover.types import Vector2


def v(x: float, y: float) -> Vector2:
    return Vector2(x=x, y=y)


def line_mover(end: Vector2, duration: float, curve=UNIFORM) -> SimpleMover:
    return SimpleMover(PathBuilder().line(end).build(), duration, curve)


class TestSimpleMover:
    def test_uniform_line_midpoint(self) -> None:
        """Uniform(100) over a unit line, sampled at t=50."""
        program = parse(
            "new MoverBuilder()"
            ".Uniform(100, e => e.Start(new Vector2(0,0)).Line(new Vector2(1,0)));"
        )
        assert isinstance(program, Program)
        mover = program.to_sequenced_mover()
        assert len(mover.movers) == 1
        assert mover.total_duration == 100
        assert mover.movers[0].path.length() == pytest.approx(1)

        result = mover.evaluate(50)
        assert result.position.x == pytest.approx(0.5)
        assert result.position.y == pytest.approx(0)
        assert result.direction == v(1, 0)
        assert result.speed == pytest.approx(0.01)

    def test_time_is_clamped(self) -> None:
        mover = line_mover(v(2, 0), 4)
        assert mover.evaluate(-1).position == v(0, 0)
        assert mover.evaluate(10).position == v(2, 0)

    def test_speed_follows_easing_slope(self) -> None:
        mover = line_mover(v(3, 0), 2, SINE)
        assert mover.evaluate(0).speed == pytest.approx(math.pi / 2 * 3 / 2)

    def test_vertical_easing_slope_gives_infinite_speed(self) -> None:
        mover = line_mover(v(3, 0), 2, INVERSE_SMOOTH_STEP)
        assert math.isinf(mover.evaluate(0).speed)
        assert math.isinf(mover.evaluate(2).speed)
        assert mover.evaluate(0).position.x == pytest.approx(0, abs=1e-12)
        assert mover.evaluate(1).speed == pytest.approx(1)

    def test_zero_duration_sits_at_end(self) -> None:
        mover = line_mover(v(2, 0), 0)
        result = mover.evaluate(0)
        assert result.position == v(2, 0)
        assert result.speed == 0

    def test_zero_length_path_has_no_speed(self) -> None:
        mover = SimpleMover(PathBuilder().build(), 5, SINE)
        assert mover.evaluate(1).speed == 0

    def test_repeated_sampling_is_idempotent(self) -> None:
        mover = line_mover(v(1, 1), 3, SINE)
        assert mover.evaluate(1.2) == mover.evaluate(1.2)


class TestSequencedMover:
    @pytest.fixture
    def mover(self) -> SequencedMover:
        return SequencedMover([line_mover(v(1, 0), 1), line_mover(v(0, 2), 2)])

    def test_cumulative_durations(self, mover: SequencedMover) -> None:
        assert mover.cumulative_durations == [1, 3]
        assert mover.total_duration == 3

    def test_boundary_belongs_to_earlier_phase(self, mover: SequencedMover) -> None:
        assert mover.locate(1) == (0, 1)

    def test_locate_inside_later_phase(self, mover: SequencedMover) -> None:
        assert mover.locate(1.5) == (1, 0.5)

    def test_locate_clamps(self, mover: SequencedMover) -> None:
        assert mover.locate(-2) == (0, 0)
        assert mover.locate(10) == (1, 2)

    def test_evaluate_delegates_with_local_time(self, mover: SequencedMover) -> None:
        result = mover.evaluate(2)
        assert result.position == v(0, 1)
        assert result.speed == pytest.approx(1)

    def test_empty_sequence(self) -> None:
        result = SequencedMover([]).evaluate(3)
        assert result.position == v(0, 0)
        assert result.direction == v(1, 0)
        assert result.speed == 0

    def test_phase_boundaries_are_continuous(self) -> None:
        program = parse(
            """
            new MoverBuilder()
              .SmoothStep(2, e => e.Line(new Vector2(2, 0)).ArcContinue(1, 1.5))
              .Sine(1, e => e.LineContinue(2))
              .Cosine(1, e => e.BezierContinue(1, new Vector2(0, 5), new Vector2(-2, 5), 40))
              .Wait(1, e => e);
            """
        )
        assert isinstance(program, Program)
        mover = program.to_sequenced_mover()
        for boundary in mover.cumulative_durations[:-1]:
            before = mover.evaluate(boundary).position
            after = mover.evaluate(boundary + 1e-9).position
            assert (after - before).length() < 1e-6
