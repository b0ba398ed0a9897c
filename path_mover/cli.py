"""CLI for path_mover programs.

Usage:
    path-mover check FILE
    path-mover format FILE [--write]
    path-mover sample FILE [--steps N]
    path-mover handles FILE
    path-mover drag FILE INDEX X Y [--write]

FILE may be ``-`` to read the program from stdin. Put ``--`` before
negative coordinates so they are not read as options.
"""

import logging
import sys
from pathlib import Path as FilePath

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from path_mover.config import settings
from path_mover.logging_config import setup_logging
from path_mover.parser import parse
from path_mover.program import Program
from path_mover.types import ControlPoint, Vector2

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="path-mover",
    help="Parse, inspect, sample and edit mover programs",
    add_completion=False,
)
console = Console()


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    setup_logging(settings)


def _read_source(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    try:
        return FilePath(file).read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Cannot read {file}: {e}[/red]")
        raise typer.Exit(1) from e


def _load_program(file: str) -> Program:
    """Parse a program file, exiting with status 1 on a parse error."""
    result = parse(_read_source(file))
    if isinstance(result, str):
        logger.info(f"Rejected {file}: {result}")
        console.print(f"[red]Parse error: {result}[/red]")
        raise typer.Exit(1)
    return result


def _write_or_print(file: str, text: str, write: bool) -> None:
    if write and file != "-":
        FilePath(file).write_text(text, encoding="utf-8")
        console.print(f"[green]Wrote {file}[/green]")
    else:
        typer.echo(text, nl=False)


def _format_vector(vector: Vector2) -> str:
    return f"({vector.x:.3f}, {vector.y:.3f})"


@app.command()
def check(
    file: str = typer.Argument(..., help="Program file, or - for stdin"),
) -> None:
    """Parse a program and report whether it is valid."""
    program = _load_program(file)
    mover = program.to_sequenced_mover()
    console.print(
        f"[green]OK[/green]: {len(program.movers)} phase(s), "
        f"duration {mover.total_duration:g}"
    )


@app.command("format")
def format_program(
    file: str = typer.Argument(..., help="Program file, or - for stdin"),
    write: bool = typer.Option(False, "--write", "-w", help="Rewrite FILE in place"),
) -> None:
    """Print the canonical form of a program."""
    program = _load_program(file)
    _write_or_print(file, program.to_program_string(), write)


@app.command()
def sample(
    file: str = typer.Argument(..., help="Program file, or - for stdin"),
    steps: int = typer.Option(
        settings.sample_steps, "--steps", "-n", min=1, help="Number of intervals to sample"
    ),
) -> None:
    """Sample position, direction and speed over the whole motion.

    Examples:
        path-mover sample motion.txt
        path-mover sample motion.txt -n 50
    """
    program = _load_program(file)
    mover = program.to_sequenced_mover()
    total = mover.total_duration

    table = Table(title="Samples", box=box.ROUNDED)
    table.add_column("Time", style="cyan", justify="right")
    table.add_column("Position", style="green")
    table.add_column("Direction", style="yellow")
    table.add_column("Speed", style="magenta", justify="right")

    for step in range(steps + 1):
        time = total * step / steps
        result = mover.evaluate(time)
        table.add_row(
            f"{time:.3f}",
            _format_vector(result.position),
            _format_vector(result.direction),
            f"{result.speed:.4f}",
        )

    console.print(table)


def _handle_label(control_point: ControlPoint) -> str:
    mover_index, path_index, argument_index = control_point.control_path
    return f"{mover_index}.{path_index}.{argument_index}"


@app.command()
def handles(
    file: str = typer.Argument(..., help="Program file, or - for stdin"),
) -> None:
    """List the draggable control points of a program."""
    program = _load_program(file)
    control_points = program.to_control_points()

    if not control_points:
        console.print("[yellow]No control points[/yellow]")
        return

    table = Table(title="Control Points", box=box.ROUNDED)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Type", style="white")
    table.add_column("Segment", style="yellow")
    table.add_column("Path", style="dim")
    table.add_column("Position", style="green")

    for index, control_point in enumerate(control_points):
        table.add_row(
            str(index),
            control_point.type,
            control_point.path_type,
            _handle_label(control_point),
            _format_vector(control_point.handle_position()),
        )

    console.print(table)


@app.command()
def drag(
    file: str = typer.Argument(..., help="Program file, or - for stdin"),
    index: int = typer.Argument(..., help="Control point number from `handles`"),
    x: float = typer.Argument(..., help="New x position"),
    y: float = typer.Argument(..., help="New y position"),
    write: bool = typer.Option(False, "--write", "-w", help="Rewrite FILE in place"),
) -> None:
    """Drag one control point and print the edited program."""
    program = _load_program(file)
    control_points = program.to_control_points()
    if not (0 <= index < len(control_points)):
        console.print(
            f"[red]No control point {index} (program has {len(control_points)})[/red]"
        )
        raise typer.Exit(1)

    control_point = control_points[index]
    edited = program.apply_change(control_point, Vector2(x=x, y=y))
    logger.info(f"Dragged {control_point.type} handle {_handle_label(control_point)}")
    _write_or_print(file, edited.to_program_string(), write)


# Entry point
if __name__ == "__main__":
    app()
