"""
Permissive CSV tokenizer.

Two-state automaton (UNQUOTED / QUOTED) driven one character at a time:

    UNQUOTED  ,      -> end field
              \\n     -> end field, end row
              \\r     -> ignored
              "      -> QUOTED
              other  -> append
    QUOTED    ""     -> append one "
              "      -> UNQUOTED
              other  -> append (commas and newlines included)

Malformed input never raises: an unterminated quote swallows the rest of the text.
"""

from __future__ import annotations

import enum
from typing import Dict, List

RawRow = Dict[str, str]

BOM = "\ufeff"


class State(enum.Enum):
    UNQUOTED = "unquoted"
    QUOTED = "quoted"


def _is_blank(row: List[str]) -> bool:
    return all(not field.strip() for field in row)


def tokenize(text: str) -> List[List[str]]:
    """Split text into rows of trimmed fields, dropping blank rows."""
    if text.startswith(BOM):
        text = text[1:]

    rows: List[List[str]] = []
    row: List[str] = []
    field: List[str] = []
    state = State.UNQUOTED

    i = 0
    n = len(text)
    while i < n:
        ch = text[i]

        if state is State.QUOTED:
            if ch == '"':
                if i + 1 < n and text[i + 1] == '"':
                    field.append('"')
                    i += 1
                else:
                    state = State.UNQUOTED
            else:
                field.append(ch)

        elif ch == '"':
            state = State.QUOTED
        elif ch == ",":
            row.append("".join(field))
            field = []
        elif ch == "\n":
            row.append("".join(field))
            rows.append(row)
            row, field = [], []
        elif ch != "\r":
            field.append(ch)

        i += 1

    # flush whatever is left, newline-terminated or not
    row.append("".join(field))
    rows.append(row)

    return [[f.strip() for f in r] for r in rows if not _is_blank(r)]


def read_rows(text: str) -> List[RawRow]:
    """
    Tokenize text and key every data row by the header row.

    Short rows are padded with "" to the header width; fields past the
    header width are ignored.
    """
    rows = tokenize(text)
    if not rows:
        return []

    header = rows[0]
    width = len(header)

    out: List[RawRow] = []
    for row in rows[1:]:
        if len(row) < width:
            row = row + [""] * (width - len(row))
        out.append(dict(zip(header, row)))
    return out
