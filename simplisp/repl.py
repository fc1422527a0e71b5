"""Interactive read-eval-print loop."""

from __future__ import annotations

import sys
from typing import TextIO

from simplisp.config import get_prompt, get_test_script
from simplisp.errors import LispError
from simplisp.harness import run_script
from simplisp.interpreter import Interpreter
from simplisp.logging_utils import configure_logging

BANNER = "Enter an expression (or '!exit' to quit and '!test' to run tests):"
EXIT_COMMAND = "!exit"
TEST_COMMAND = "!test"


class Repl:
    """Reads one line at a time and prints every result it produces.

    Errors are reported and the loop carries on with the next line; global
    definitions made before an error are kept.
    """

    def __init__(
        self,
        interpreter: Interpreter | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        self.interpreter = interpreter or Interpreter()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.prompt = get_prompt()

    def read(self) -> str | None:
        self.stderr.write(self.prompt)
        self.stderr.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def run_tests(self) -> None:
        path = get_test_script()
        try:
            # scripts run in a fresh interpreter, never the user's session
            run_script(path, Interpreter(), self.stdout, self.stderr)
        except OSError as e:
            self.stderr.write(f"Error: cannot read {path}: {e.strerror}\n")

    def evaluate_line(self, line: str) -> None:
        try:
            for text in self.interpreter.process(line):
                self.stdout.write(text + "\n")
                self.stdout.flush()
        except LispError as e:
            self.stderr.write(f"Error: {e.message}\n")

    def run(self) -> None:
        self.stderr.write(BANNER + "\n")
        while (line := self.read()) is not None:
            if line == EXIT_COMMAND:
                break
            if line == TEST_COMMAND:
                self.run_tests()
                continue
            self.evaluate_line(line)


def main() -> None:
    configure_logging()
    Repl().run()


if __name__ == "__main__":
    main()
