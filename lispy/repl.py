"""
Line-oriented REPL for lispy.

Each line is evaluated in one long-lived Interpreter. The rendering of the
result goes to stdout, `Error: <message>` to stderr; either way the session
continues with its bindings intact. `exit` or end of input stops the loop.
"""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from lispy.config import get_prompt, get_log_level, get_log_file
from lispy.errors import LispyError
from lispy.interpreter import Interpreter
from lispy.logging_config import setup_logging, get_logger
from lispy.printer import to_repr

logger = get_logger(__name__)

EXIT_COMMAND = "exit"


def _enable_history() -> None:
    # readline is absent on some platforms; input() works without it
    try:
        import readline  # noqa: F401
    except ImportError:
        logger.debug("readline unavailable, history disabled")


def run_repl(
    interp: Interpreter | None = None,
    read_line: Callable[[str], str] = input,
    out: TextIO | None = None,
    err: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    interp = interp or Interpreter()
    out = out or sys.stdout
    err = err or sys.stderr
    prompt = get_prompt() if prompt is None else prompt

    while True:
        try:
            line = read_line(prompt)
        except EOFError:
            break
        if line.strip() == EXIT_COMMAND:
            break
        try:
            result = interp.eval(line)
        except LispyError as ex:
            logger.debug("form failed: %s", line, exc_info=True)
            print(f"Error: {ex}", file=err)
            continue
        print(to_repr(result), file=out)

    print(file=out)


def main() -> int:
    setup_logging(get_log_level(), get_log_file())
    _enable_history()
    logger.info("starting lispy REPL")
    run_repl()
    return 0


if __name__ == "__main__":
    sys.exit(main())
