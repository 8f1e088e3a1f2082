"""Source locations."""

from __future__ import annotations

from dataclasses import dataclass

NOFILE = "??"


@dataclass(frozen=True)
class Loc:
    """A location in a source file; line and column 0 mean unknown."""

    filename: str = NOFILE
    line: int = 0
    col: int = 0

    def describe(self) -> str:
        """Return ``file:line:col``, with ``??`` for an unknown line."""
        text = self.filename
        text += ":??" if self.line == 0 else f":{self.line}"
        if self.col != 0 and self.line != 0:
            text += f":{self.col}"
        return text


UNKNOWN = Loc()