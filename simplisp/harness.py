"""Line-oriented script runner.

A script is plain text where

    <(+ 1 2)      feeds "(+ 1 2)" to the interpreter
    >3            is the expected output, echoed for the reader only
    anything else is commentary and echoed unchanged

Nothing is asserted; the transcript is for eyeballing.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, TextIO

from loguru import logger

from simplisp.errors import LispError
from simplisp.interpreter import Interpreter


def _lines(script: Path | str | Iterable[str]) -> Iterable[str]:
    if isinstance(script, (str, Path)):
        return Path(script).read_text().splitlines()
    return script


def run_script(
    script: Path | str | Iterable[str],
    interpreter: Interpreter | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Run a script and return the number of inputs that raised an error.

    Results go to `out` (stdout by default), the transcript to `err`.
    """
    interp = interpreter or Interpreter()
    out = out or sys.stdout
    err = err or sys.stderr
    failures = 0

    for line in _lines(script):
        line = line.rstrip("\r\n")
        if line.startswith("<"):
            code = line[1:]
            err.write(f"Evaluating: {code}\n")
            err.write("--> ")
            err.flush()
            try:
                for text in interp.process(code):
                    out.write(text + "\n")
                    out.flush()
            except LispError as e:
                failures += 1
                err.write(f"Error: {e.message}\n")
        elif line.startswith(">"):
            err.write(f"Expected output: {line[1:]}\n")
        else:
            err.write(line + "\n")

    logger.debug("script finished with {} error(s)", failures)
    return failures
