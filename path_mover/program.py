"""The program tree root and its boundary operations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from path_mover import editing, serialize
from path_mover.builder import PathBuilder, SequencedMoverBuilder
from path_mover.easing import get_easing
from path_mover.mover import SequencedMover
from path_mover.types import ControlPoint, MoverStatement, Vector2


class Program(BaseModel):
    """An immutable sequence of mover statements.

    Every edit returns a new Program; the caller holds the current one.
    """

    model_config = ConfigDict(frozen=True)

    movers: tuple[MoverStatement, ...] = ()

    def to_sequenced_mover(self) -> SequencedMover:
        """Compile into an evaluable motion."""
        builder = SequencedMoverBuilder()
        for statement in self.movers:

            def build_path(pb: PathBuilder, statement: MoverStatement = statement) -> PathBuilder:
                return pb.apply_all(statement.path_statements)

            builder = builder.phase(statement.duration, get_easing(statement.method), build_path)
        return builder.build()

    def to_control_points(self) -> list[ControlPoint]:
        return editing.to_control_points(self)

    def apply_change(self, control_point: ControlPoint, new_position: Vector2) -> Program:
        return editing.apply_change(self, control_point, new_position)

    def to_program_string(self) -> str:
        return serialize.to_program_string(self)
