from __future__ import annotations
import os
from pathlib import Path

# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_TEST_SCRIPT = "lisp.test"
_DEFAULT_PROMPT = "> "


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_log_level() -> str:
    return value_from_env("SIMPLISP_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> int:
    raw = value_from_env("SIMPLISP_RECURSION_LIMIT", str(_DEFAULT_RECURSION_LIMIT))
    try:
        limit = int(raw)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
    # a tiny limit would break the interpreter itself
    return limit if limit >= 100 else _DEFAULT_RECURSION_LIMIT


def get_test_script() -> Path:
    return Path(value_from_env("SIMPLISP_TEST_SCRIPT", _DEFAULT_TEST_SCRIPT))


def get_prompt() -> str:
    # the prompt keeps its trailing space, so do not strip it
    raw = os.environ.get("SIMPLISP_PROMPT")
    return raw if raw else _DEFAULT_PROMPT
