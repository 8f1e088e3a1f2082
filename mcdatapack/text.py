"""String helpers: identifiers, number formatting, constant insertion, paths."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path


def is_alnum_us(c: str) -> bool:
    """Return True if ``c`` is an ASCII letter, digit or underscore."""
    return len(c) == 1 and (c == "_" or c.isascii() and c.isalnum())


def thousands_sep(num: int, sep: str = ",") -> str:
    """Format a non-negative integer with a separator every three digits."""
    if num < 0:
        raise ValueError("number must not be negative")
    return f"{num:,}".replace(",", sep)


def replace_inserted_values(text: str, const_values: Mapping[str, str]) -> str:
    """Replace ``{{name}}`` with the constant's value when one is known.

    Anything that is not a well-formed reference to a known constant is kept
    as it was.
    """
    out: list[str] = []
    pos = 0
    end = len(text)
    while pos < end:
        if text[pos] != "{":
            out.append(text[pos])
            pos += 1
            continue
        pos += 1
        if pos >= end or text[pos] != "{":
            out.append("{")
            continue
        pos += 1
        start = pos
        while pos < end and is_alnum_us(text[pos]):
            pos += 1
        name = text[start:pos]
        if pos >= end or text[pos] != "}":
            out.append("{{" + name)
            continue
        pos += 1
        if pos >= end or text[pos] != "}":
            out.append("{{" + name + "}")
            continue
        pos += 1
        out.append(const_values.get(name, "{{" + name + "}}"))
    return "".join(out)


def reference_path(base: str, ref: str) -> str:
    """Resolve ``ref`` relative to the folder that holds the file ``base``."""
    return str(Path(base).parent / Path(ref))