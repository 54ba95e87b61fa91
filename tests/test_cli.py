from __future__ import annotations

import io
import logging

import pytest

from ioprompt import cli
from ioprompt.io import BufferedIO


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for name in ("IOPROMPT_MODE", "IOPROMPT_STDERR", "IOPROMPT_NEWLINE"):
        monkeypatch.delenv(name, raising=False)


def test_prints_prompt_and_answer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Ada\n"))

    code = cli.main(["Name? "])

    assert code == cli.EXIT_OK
    assert capsys.readouterr().out == "Name? Ada\n"


def test_stderr_flag_keeps_stdout_clean(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("42\r\n"))

    code = cli.main(["Number? ", "--stderr"])

    captured = capsys.readouterr()
    assert code == cli.EXIT_OK
    assert captured.out == "42\n"
    assert captured.err == "Number? "


def test_newline_flag_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("IOPROMPT_NEWLINE", "yes")
    monkeypatch.setattr("sys.stdin", io.StringIO("ok\n"))

    cli.main(["Continue?"])

    assert capsys.readouterr().out == "Continue?\nok\n"


def test_end_of_input_exit_code(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    code = cli.main(["> "])

    assert code == cli.EXIT_END_OF_INPUT
    assert capsys.readouterr().out == "> "


def test_io_error_is_reported(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", None)

    code = cli.main(["> "])

    assert code == cli.EXIT_IO_ERROR
    assert "stdin is not available" in capsys.readouterr().err


def test_interrupt_exit_code(monkeypatch, capsys):
    class InterruptingIO(BufferedIO):
        def read(self, message: str = "", error: bool = False):
            raise KeyboardInterrupt

    monkeypatch.setattr(cli, "_build_io", lambda mode: InterruptingIO([]))

    assert cli.main(["> "]) == cli.EXIT_INTERRUPTED
    assert "Interrupted" in capsys.readouterr().err


def test_mode_selects_io(monkeypatch):
    seen: list[str] = []

    def fake_build(mode: str):
        seen.append(mode)
        return BufferedIO(["value"])

    monkeypatch.setattr(cli, "_build_io", fake_build)
    monkeypatch.setenv("IOPROMPT_MODE", "interactive")

    assert cli.main([]) == cli.EXIT_OK
    assert seen == ["interactive"]


def test_env_flag_parsing(monkeypatch):
    monkeypatch.setenv("IOPROMPT_STDERR", "On")
    assert cli._env_flag("IOPROMPT_STDERR") is True
    monkeypatch.setenv("IOPROMPT_STDERR", "0")
    assert cli._env_flag("IOPROMPT_STDERR") is False
    assert cli._env_flag("IOPROMPT_UNSET_FLAG") is False


class BrokenPipeStdout(io.StringIO):
    def write(self, text: str) -> int:  # type: ignore[override]
        raise BrokenPipeError(32, "Broken pipe")


def test_broken_stdout_when_printing_answer_is_io_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Ada\n"))
    monkeypatch.setattr("sys.stdout", BrokenPipeStdout())

    code = cli.main(["Name? ", "--stderr"])

    err = capsys.readouterr().err
    assert code == cli.EXIT_IO_ERROR
    assert "ioprompt: failed writing to stdout" in err


def test_verbose_flag_selects_debug_logging(monkeypatch):
    calls: list[dict] = []
    monkeypatch.setattr(cli.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(cli, "_build_io", lambda mode: BufferedIO(["x"]))

    cli.main(["-v", "> "])
    cli.main(["> "])

    assert [call["level"] for call in calls] == [logging.DEBUG, logging.WARNING]
