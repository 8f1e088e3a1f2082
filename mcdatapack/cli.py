"""Command line argument reading."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from mcdatapack.errors import CompileError, WarnSetting
from mcdatapack.options import Options

HELP_PAD_LEFT = 25
HELP_PAD_RIGHT = 100

INVALID_ARGS = "Invalid command line arguments."
NO_FILENAME = "No filename given."

# (letter or None, word, description)
ARG_HELP: tuple[tuple[str | None, str, str], ...] = (
    ("c", "custom-description", "Set the output datapack description"),
    ("d", "debug", "Use debugging tools. Debug info will be dumped in files in "
     "the current working directory."),
    ("D", "disable-output", "Disable result output to the file system. Will "
     "even disable output when \"-o\" is given."),
    ("n", "namespace", "Change the namespace of the output datapack, default "
     "is 'dp'"),
    ("h", "help", "Show the help page."),
    ("o", "output", "Set the output folder, default is 'out_datapack'. "
     "Warning: this folder will be overwritten by this program! Be very careful "
     "when selecting an output folder!"),
    (None, "scoreboard", "Set the scoreboard objective used for variables. "
     "Default is \"mclang\"."),
    ("S", "stats", "Show statistics about the generated datapack."),
    ("v", "version", "Set the Minecraft version to output as a datapack. Only "
     "supports normal versions after 1.17. Default is \"latest\""),
    ("W", "warning", "Set the level of warnings that should be displayed, "
     "default is \"major\". Other options are \"none\" and \"all\"."),
)

_LETTER_WORDS = {letter: word for letter, word, _ in ARG_HELP if letter}


def _help_entry(letter: str | None, word: str, description: str) -> str:
    names = []
    if letter:
        names.append("-" + letter)
    if word:
        names.append("--" + word)
    head = ", ".join(names).ljust(HELP_PAD_LEFT)
    chunks = [
        description[i:i + HELP_PAD_RIGHT]
        for i in range(0, len(description), HELP_PAD_RIGHT)
    ] or [""]
    rest = "".join("\n" + " " * HELP_PAD_LEFT + chunk for chunk in chunks[1:])
    return head + chunks[0] + rest


def help_text(exec_name: str) -> str:
    """Return the help page for the program started as ``exec_name``."""
    lines = "".join(_help_entry(*entry) + "\n" for entry in ARG_HELP)
    return (
        f"\nCommand usage: {exec_name} <input filename> [<arguments>]\n\n"
        f"{lines}\n"
    )


def _exec_name() -> str:
    return Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "mcdatapack"


def _apply(word: str, options: Options, value: Callable[[], str]) -> None:
    if word == "custom-description":
        options.description = value()
    elif word == "debug":
        options.debug_mode = True
    elif word == "disable-output":
        options.file_output = False
    elif word == "namespace":
        options.ns = value()
    elif word == "help":
        print(help_text(_exec_name()), end="")
        raise SystemExit(0)
    elif word == "output":
        options.output_folder = value()
    elif word == "scoreboard":
        options.scoreboard_name = value()
    elif word == "stats":
        options.show_statistics = True
    elif word == "version":
        options.mc_version = value()
    elif word == "warning":
        try:
            options.warn_setting = WarnSetting(value())
        except ValueError:
            raise CompileError(INVALID_ARGS) from None


def parse_args(argv: Sequence[str] | None = None) -> Options:
    """Read command line arguments (without the program name) into Options.

    Unknown switches are ignored; malformed ones raise CompileError, as does
    a missing input filename. ``-h``/``--help`` prints the help page and
    exits.
    """
    args = iter(sys.argv[1:] if argv is None else argv)
    options = Options()
    has_filename = False

    def value() -> str:
        try:
            return next(args)
        except StopIteration:
            raise CompileError(INVALID_ARGS) from None

    for arg in args:
        if arg.startswith("--"):
            if len(arg) <= 2:
                raise CompileError(INVALID_ARGS)
            word = arg[2:]
        elif arg.startswith("-"):
            if len(arg) != 2:
                raise CompileError(INVALID_ARGS)
            word = _LETTER_WORDS.get(arg[1], "")
        else:
            options.filename = arg
            has_filename = True
            continue
        _apply(word, options, value)
    if not has_filename:
        raise CompileError(NO_FILENAME)
    return options