"""
  Tokenizer

Turns source text into a fully materialized list of Tokens:

    - (            -> BEGIN_PAREN
    - )            -> END_PAREN
    - ()           -> NIL (an empty list literal, collapsed into one token)
    - 'x           -> QUOTE followed by the tokens of x
    - "text"       -> STRING (no escape sequences)
    - -12.5        -> NUMBER
    - t / T        -> TRUE
    - anything else up to a separator -> SYMBOL (raw text, not yet interned)
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple

from simplisp.errors import LispSyntaxError


class TokenKind(Enum):
    BEGIN_PAREN = "begin-paren"
    END_PAREN = "end-paren"
    NIL = "nil"
    NUMBER = "number"
    STRING = "string"
    SYMBOL = "symbol"
    QUOTE = "quote"
    TRUE = "true"


class Token(NamedTuple):
    kind: TokenKind
    value: str = ""


# Optional minus, a digit, then digits with at most one dot anywhere after it.
NUMBER_RE = re.compile(r"-?[0-9][0-9]*(?:\.[0-9]*)?")
ATOM_RE = re.compile(r"[^\s()\"']+")


def is_number(text: str) -> bool:
    return NUMBER_RE.fullmatch(text) is not None


def tokenize(source: str) -> list[Token]:
    """Split `source` into tokens. Raises LispSyntaxError on an open string."""
    tokens: list[Token] = []
    pos = 0
    n = len(source)

    while pos < n:
        ch = source[pos]

        if ch.isspace():
            pos += 1
            continue

        if ch == '"':
            end = source.find('"', pos + 1)
            if end == -1:
                raise LispSyntaxError("Unmatched string quote.")
            tokens.append(Token(TokenKind.STRING, source[pos + 1:end]))
            pos = end + 1
            continue

        if ch == "(":
            # "()" is read as a single empty list token
            if pos + 1 < n and source[pos + 1] == ")":
                tokens.append(Token(TokenKind.NIL, "()"))
                pos += 2
            else:
                tokens.append(Token(TokenKind.BEGIN_PAREN, "("))
                pos += 1
            continue

        if ch == ")":
            tokens.append(Token(TokenKind.END_PAREN, ")"))
            pos += 1
            continue

        if ch == "'":
            tokens.append(Token(TokenKind.QUOTE, "'"))
            pos += 1
            continue

        m = ATOM_RE.match(source, pos)
        # ch is not a separator, so the match is never empty
        text = m.group(0)
        pos = m.end()
        if is_number(text):
            tokens.append(Token(TokenKind.NUMBER, text))
        elif text in ("t", "T"):
            tokens.append(Token(TokenKind.TRUE, text))
        else:
            tokens.append(Token(TokenKind.SYMBOL, text))

    return tokens
