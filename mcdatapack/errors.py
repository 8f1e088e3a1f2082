"""Diagnostics: coloured error, warning and note reporting."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO

from mcdatapack.loc import UNKNOWN, Loc

_COLOR_CODES = {
    "black": "30",
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
    "cyan": "36",
    "white": "37",
    "bold": "1",
}

_RESET = "\033[0m"


class ErrorLevel(Enum):
    """How serious a diagnostic is."""

    ERROR = "error"
    WARNING = "warning"
    MINOR_WARNING = "minor warning"
    NOTE = "note"


class WarnSetting(Enum):
    """Which diagnostics the user wants to see."""

    ALL = "all"
    MAJOR = "major"
    NONE = "none"


class CompileError(Exception):
    """A fatal error raised while compiling."""

    def __init__(self, text: str, loc: Loc = UNKNOWN) -> None:
        super().__init__(text)
        self.text = text
        self.loc = loc

    def __str__(self) -> str:
        return f"{self.loc.describe()}: {self.text}"


_LABELS = {
    ErrorLevel.NOTE: ("note: ", "cyan bold"),
    ErrorLevel.WARNING: ("warning: ", "magenta bold"),
    ErrorLevel.MINOR_WARNING: ("warning: ", "magenta bold"),
    ErrorLevel.ERROR: ("error: ", "red bold"),
}


def color_text(text: str, color: str) -> str:
    """Wrap ``text`` in ANSI codes for space-separated names like ``"red bold"``."""
    codes = "".join(
        f"\033[{_COLOR_CODES[name]}m" for name in color.split() if name in _COLOR_CODES
    )
    return codes + text + _RESET


def should_display(level: ErrorLevel, warn_setting: WarnSetting | None = None) -> bool:
    """Decide whether a diagnostic of ``level`` is shown; None shows everything."""
    if warn_setting is None or level is ErrorLevel.ERROR:
        return True
    if warn_setting is WarnSetting.ALL:
        return True
    if warn_setting is WarnSetting.MAJOR:
        return level is ErrorLevel.WARNING
    return False


def _render(level: ErrorLevel, text: str, loc: Loc, colored: bool) -> str:
    label, label_color = _LABELS[level]
    head = loc.describe() + ": "
    if colored:
        head = color_text(head, "white bold")
        label = color_text(label, label_color)
    return f"{head}{label}\n    {text}\n"


def format_message(level: ErrorLevel, text: str, loc: Loc = UNKNOWN) -> str:
    """Return the plain text of a diagnostic."""
    return _render(level, text, loc, colored=False)


def report(
    level: ErrorLevel,
    text: str,
    loc: Loc = UNKNOWN,
    warn_setting: WarnSetting | None = None,
    stream: TextIO | None = None,
) -> bool:
    """Write a diagnostic if it should be shown; raise CompileError on errors.

    Returns whether anything was written.
    """
    if stream is None:
        stream = sys.stderr
    shown = should_display(level, warn_setting)
    if shown:
        isatty = getattr(stream, "isatty", None)
        colored = bool(isatty and isatty())
        stream.write(_render(level, text, loc, colored))
        stream.flush()
    if level is ErrorLevel.ERROR:
        raise CompileError(text, loc)
    return shown