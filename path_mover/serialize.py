"""Canonical program text.

The output parses back to an equivalent program, and serializing that
program again gives the same text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from path_mover.types import (
    ArcContinueStatement,
    ArcStatement,
    BezierContinueStatement,
    BezierStatement,
    LineContinueStatement,
    LineStatement,
    MoverStatement,
    PathStatement,
    StartStatement,
    Vector2,
)

if TYPE_CHECKING:
    from path_mover.program import Program

INDENT = "  "


def format_number(value: float) -> str:
    """Fixed three decimals with an ``f`` suffix."""
    text = f"{value:.3f}"
    if text == "-0.000":
        text = "0.000"
    return f"{text}f"


def format_vector(vector: Vector2) -> str:
    return f"new Vector2({format_number(vector.x)}, {format_number(vector.y)})"


def format_duration(duration: float) -> str:
    if float(duration).is_integer():
        return str(int(duration))
    return repr(float(duration))


def format_path_statement(statement: PathStatement) -> str:
    match statement:
        case StartStatement(start=start):
            return f".Start({format_vector(start)})"
        case LineStatement(end=end):
            return f".Line({format_vector(end)})"
        case LineContinueStatement(length=length):
            return f".LineContinue({format_number(length)})"
        case ArcStatement(center=center, angle=angle):
            return f".Arc({format_vector(center)}, {format_number(angle)})"
        case ArcContinueStatement(radius=radius, angle=angle):
            return f".ArcContinue({format_number(radius)}, {format_number(angle)})"
        case BezierStatement(c1=c1, c2=c2, end=end, segments=segments):
            return (
                f".Bezier({format_vector(c1)}, {format_vector(c2)}, "
                f"{format_vector(end)}, {segments})"
            )
        case BezierContinueStatement(c1_offset=c1_offset, c2=c2, end=end, segments=segments):
            return (
                f".BezierContinue({format_number(c1_offset)}, {format_vector(c2)}, "
                f"{format_vector(end)}, {segments})"
            )
        case _:
            raise TypeError(f"Unknown path statement: {statement!r}")


def format_mover_statement(mover: MoverStatement, *, last: bool) -> list[str]:
    lines = [f"{INDENT}.{mover.method.value}({format_duration(mover.duration)}, e => e"]
    lines.extend(INDENT * 2 + format_path_statement(ps) for ps in mover.path_statements)
    lines.append(f"{INDENT});" if last else f"{INDENT})")
    return lines


def to_program_string(program: Program) -> str:
    if not program.movers:
        return "new MoverBuilder();\n"
    lines = ["new MoverBuilder()"]
    for index, mover in enumerate(program.movers):
        lines.extend(format_mover_statement(mover, last=index == len(program.movers) - 1))
    return "\n".join(lines) + "\n"


__all__ = [
    "format_duration",
    "format_number",
    "format_path_statement",
    "format_vector",
    "to_program_string",
]
