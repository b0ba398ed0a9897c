"""Tests for the path-mover command line."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from path_mover import cli
from path_mover.cli import app

runner = CliRunner()

PROGRAM = (
    "new MoverBuilder().Uniform(100, e => e"
    ".Start(new Vector2(1, 1)).LineContinue(2));"
)


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    """Leave the test runner's log handlers alone."""
    monkeypatch.setattr(cli, "setup_logging", lambda settings: None)


@pytest.fixture
def program_file(tmp_path: Path) -> Path:
    path = tmp_path / "motion.txt"
    path.write_text(PROGRAM)
    return path


class TestCheck:
    def test_valid_program(self, program_file: Path) -> None:
        result = runner.invoke(app, ["check", str(program_file)])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "1 phase(s)" in result.output

    def test_reads_stdin(self) -> None:
        result = runner.invoke(app, ["check", "-"], input=PROGRAM)
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_parse_error_exits_nonzero(self) -> None:
        result = runner.invoke(app, ["check", "-"], input="new MoverBuilder().Foo(1, e=>e);")
        assert result.exit_code == 1
        assert "Unknown method name: Foo" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["check", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1
        assert "Cannot read" in result.output


class TestFormat:
    def test_prints_canonical_text(self, program_file: Path) -> None:
        result = runner.invoke(app, ["format", str(program_file)])
        assert result.exit_code == 0
        assert result.output == (
            "new MoverBuilder()\n"
            "  .Uniform(100, e => e\n"
            "    .Start(new Vector2(1.000f, 1.000f))\n"
            "    .LineContinue(2.000f)\n"
            "  );\n"
        )

    def test_write_in_place(self, program_file: Path) -> None:
        result = runner.invoke(app, ["format", str(program_file), "--write"])
        assert result.exit_code == 0
        assert program_file.read_text().startswith("new MoverBuilder()\n  .Uniform(100")


class TestSample:
    def test_samples_whole_duration(self, program_file: Path) -> None:
        result = runner.invoke(app, ["sample", str(program_file), "--steps", "2"])
        assert result.exit_code == 0
        assert "0.000" in result.output
        assert "50.000" in result.output
        assert "100.000" in result.output
        assert "(2.000, 1.000)" in result.output

    def test_rejects_zero_steps(self, program_file: Path) -> None:
        result = runner.invoke(app, ["sample", str(program_file), "--steps", "0"])
        assert result.exit_code != 0


class TestHandles:
    def test_lists_control_points(self, program_file: Path) -> None:
        result = runner.invoke(app, ["handles", str(program_file)])
        assert result.exit_code == 0
        assert "Free" in result.output
        assert "Ray" in result.output
        assert "(3.000, 1.000)" in result.output

    def test_empty_program(self) -> None:
        result = runner.invoke(app, ["handles", "-"], input="new MoverBuilder();")
        assert result.exit_code == 0
        assert "No control points" in result.output


class TestDrag:
    def test_drag_ray_handle(self, program_file: Path) -> None:
        result = runner.invoke(app, ["drag", str(program_file), "1", "4", "7"])
        assert result.exit_code == 0
        assert ".LineContinue(3.000f)" in result.output

    def test_negative_coordinates_after_separator(self, program_file: Path) -> None:
        result = runner.invoke(app, ["drag", str(program_file), "0", "--", "-1", "-2"])
        assert result.exit_code == 0
        assert ".Start(new Vector2(-1.000f, -2.000f))" in result.output

    def test_write_in_place(self, program_file: Path) -> None:
        result = runner.invoke(app, ["drag", str(program_file), "1", "4", "7", "--write"])
        assert result.exit_code == 0
        assert ".LineContinue(3.000f)" in program_file.read_text()

    def test_unknown_handle(self, program_file: Path) -> None:
        result = runner.invoke(app, ["drag", str(program_file), "9", "0", "0"])
        assert result.exit_code == 1
        assert "No control point 9" in result.output
