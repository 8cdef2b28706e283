"""Tests for the CLI entry point and error boundary (cli/app.py).

Command files live under ``tmp_path``.  ``main`` is called with an
explicit argv; ``cli`` is exercised through ``sys.argv`` and
``SystemExit``.
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from robot_sim.cli import exit_codes
from robot_sim.cli.app import cli, main


def _write(tmp_path: Path, *lines: str) -> Path:
    path = tmp_path / "commands.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:
    def test_reports_go_to_stdout(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = _write(tmp_path, "PLACE 0,0,NORTH", "MOVE", "REPORT")
        code = main([str(path)])
        captured = capsys.readouterr()
        assert code == exit_codes.SUCCESS
        assert captured.out == "0,1,NORTH\n"

    def test_multiple_reports_in_order(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = _write(
            tmp_path, "PLACE 0,0,NORTH", "REPORT", "MOVE", "REPORT", "RIGHT", "REPORT",
        )
        main([str(path)])
        assert capsys.readouterr().out.splitlines() == [
            "0,0,NORTH",
            "0,1,NORTH",
            "0,1,EAST",
        ]

    def test_invalid_commands_still_succeed(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = _write(tmp_path, "JUMP", "MOVE", "PLACE 9,9,NORTH", "REPORT")
        code = main([str(path)])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == ""

    def test_form_feed_does_not_split_a_line(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "commands.txt"
        path.write_text("PLACE 1,1,EAST\x0cJUNK\nREPORT\n", encoding="utf-8")
        assert main([str(path)]) == exit_codes.SUCCESS
        assert capsys.readouterr().out == ""

    def test_oversized_coordinate_is_ignored(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = _write(tmp_path, "PLACE " + "9" * 5000 + ",0,NORTH", "PLACE 0,0,NORTH", "REPORT")
        assert main([str(path)]) == exit_codes.SUCCESS
        assert capsys.readouterr().out == "0,0,NORTH\n"

    def test_custom_board_size(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = _write(tmp_path, "PLACE 7,0,EAST", "MOVE", "REPORT")
        main([str(path), "--width", "10", "--height", "2"])
        assert capsys.readouterr().out == "8,0,EAST\n"

    def test_default_board_rejects_large_place(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = _write(tmp_path, "PLACE 7,0,EAST", "REPORT")
        main([str(path)])
        assert capsys.readouterr().out == ""

    def test_stdin_source(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("PLACE 2,2,WEST\nLEFT\nREPORT\n"))
        code = main(["-"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "2,2,SOUTH\n"

    def test_default_command_file(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _write(tmp_path, "PLACE 3,3,NORTH", "REPORT")
        monkeypatch.chdir(tmp_path)
        main([])
        assert capsys.readouterr().out == "3,3,NORTH\n"

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_trace_goes_to_stderr(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = _write(tmp_path, "PLACE 0,0,NORTH", "FLY", "REPORT")
        main([str(path), "--trace"])
        captured = capsys.readouterr()
        assert captured.out == "0,0,NORTH\n"
        assert "robot-sim trace" in captured.err
        assert "ignored" in captured.err

    def test_verbose_logs_to_stderr(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = _write(tmp_path, "PLACE 0,0,NORTH", "FLY", "REPORT")
        main([str(path), "--verbose"])
        captured = capsys.readouterr()
        assert captured.out == "0,0,NORTH\n"
        assert "command.ignored" in captured.err
        assert "run.complete" in captured.err

    def test_quiet_by_default(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = _write(tmp_path, "FLY")
        main([str(path)])
        assert capsys.readouterr().err == ""


# ---------------------------------------------------------------------------
# cli() error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run_cli(self, monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
        monkeypatch.setattr("sys.argv", ["robot-sim", *argv])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        return exc_info.value.code  # type: ignore[return-value]

    def test_success_exit_code(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        path = _write(tmp_path, "REPORT")
        assert self._run_cli(monkeypatch, str(path)) == exit_codes.SUCCESS

    def test_missing_file_is_general_error(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run_cli(monkeypatch, str(tmp_path / "absent.txt"))
        captured = capsys.readouterr()
        assert code == exit_codes.GENERAL_ERROR
        assert "not found" in captured.err
        assert captured.out == ""

    def test_invalid_board_is_general_error(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = _write(tmp_path, "REPORT")
        code = self._run_cli(monkeypatch, str(path), "--width", "0")
        assert code == exit_codes.GENERAL_ERROR
        assert "positive" in capsys.readouterr().err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from robot_sim.cli import app as app_module

        def _interrupt(argv: object = None) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", _interrupt)
        assert self._run_cli(monkeypatch) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from robot_sim.cli import app as app_module

        def _boom(argv: object = None) -> int:
            raise RuntimeError("kaboom")

        monkeypatch.setattr(app_module, "main", _boom)
        assert self._run_cli(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        assert "kaboom" in capsys.readouterr().err
