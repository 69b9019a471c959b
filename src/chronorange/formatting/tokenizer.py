"""Format tokenizer.

Splits a moment-style format into tokens. Runs of the same letter form one
candidate token ("YYYY", "MM", "dddd"); a run that is a supported field is
rendered, anything else is copied through. Text inside [brackets] is always
literal, so "[Today is] dddd" keeps "Today is" intact.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

FIELD_TOKENS = frozenset({
    "YYYY", "MM", "MMM", "MMMM", "DD", "ddd", "dddd",
    "HH", "hh", "mm", "ss", "SSS", "a", "A",
})

_TOKEN_RE = re.compile(
    r"\[(?P<escaped>[^\]]*)(?:\]|$)"
    r"|(?P<run>([A-Za-z])\3*)"
    r"|(?P<text>[^\[A-Za-z]+)"
)


@dataclass(frozen=True, slots=True)
class Token:
    text: str
    is_field: bool


def tokenize(fmt: str) -> tuple[Token, ...]:
    """Break ``fmt`` into field and literal tokens, merging adjacent literals."""
    tokens: list[Token] = []
    for m in _TOKEN_RE.finditer(fmt):
        run = m.group("run")
        if run is not None and run in FIELD_TOKENS:
            tokens.append(Token(run, True))
            continue
        literal = m.group("escaped") if m.group("escaped") is not None else m.group(0)
        if not literal:
            continue
        if tokens and not tokens[-1].is_field:
            tokens[-1] = Token(tokens[-1].text + literal, False)
        else:
            tokens.append(Token(literal, False))
    return tuple(tokens)
