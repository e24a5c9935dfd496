import io

import pytest

from lispy.interpreter import Interpreter
from lispy.repl import run_repl
from lispy import config


def feed(*lines):
    """A read_line replacement returning `lines` in order, then EOF."""
    pending = list(lines)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        if not pending:
            raise EOFError
        return pending.pop(0)

    read_line.prompts = prompts
    return read_line


def session(*lines, interp=None, prompt=">> "):
    out, err = io.StringIO(), io.StringIO()
    run_repl(interp or Interpreter(), feed(*lines), out, err, prompt)
    return out.getvalue(), err.getvalue()


def test_prints_rendering_of_each_result():
    out, err = session("(+ 1 2)", "(quote (1 a))", "nil")
    assert out.splitlines() == ["3", '(1 "a")', "nil", ""]
    assert err == ""


def test_errors_are_reported_and_session_continues():
    out, err = session("(define x 4)", "(car x)", "(/ x 0)", "(* x 2)")
    assert out.splitlines() == ["4", "8", ""]
    assert err.splitlines() == [
        "Error: Unexpected type LST, mine INT",
        "Error: Division by zero",
    ]


def test_exit_command_stops_the_loop():
    interp = Interpreter()
    out, _ = session("(define x 1)", "exit", "(define x 2)", interp=interp)
    assert out.splitlines() == ["1", ""]
    assert interp.eval("x") == 1


def test_end_of_input_stops_the_loop():
    out, _ = session()
    assert out == "\n"


def test_prompt_comes_from_config(monkeypatch):
    monkeypatch.setenv("LISPY_PROMPT", "lispy> ")
    reader = feed("1")
    run_repl(Interpreter(), reader, io.StringIO(), io.StringIO())
    assert reader.prompts == ["lispy> ", "lispy> "]


@pytest.mark.parametrize(
    "var,value,getter,expected",
    [
        ("LISPY_PROMPT", None, config.get_prompt, ">> "),
        ("LISPY_LOG_LEVEL", None, config.get_log_level, "WARNING"),
        ("LISPY_LOG_LEVEL", "debug", config.get_log_level, "DEBUG"),
        ("LISPY_LOG_FILE", None, config.get_log_file, None),
        ("LISPY_LOG_FILE", " /tmp/lispy.log ", config.get_log_file, "/tmp/lispy.log"),
    ]
)
def test_config_from_environment(monkeypatch, var, value, getter, expected):
    if value is None:
        monkeypatch.delenv(var, raising=False)
    else:
        monkeypatch.setenv(var, value)
    assert getter() == expected
