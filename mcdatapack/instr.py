"""Bytecode instructions, the functions that hold them, and their listing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum

_LISTING_WIDTH = 10
_LINE_INDENT = "\n    "


class InstrType(IntEnum):
    """Bytecode instruction types; the order groups related instructions."""

    ERR = 0
    # arg1 = raw command
    CMD = 1
    # arg1 = execute subcommands, arg2 = function to call
    EXEC_CALL = 2
    # arg1 = function name
    CALL = 3
    # arg1 = variable, arg2 = value
    SET = 4
    # arg1 = variable whose value is pushed
    PUSH = 5
    POP = 6
    # arg1 = variable receiving the top of the stack
    TOP = 7
    # copy arg2 into arg1
    COPY = 8
    ADD = 9
    SUB = 10
    MUL = 11
    DIV = 12
    MOD = 13
    ADDI = 14
    SUBI = 15
    MULI = 16
    DIVI = 17
    MODI = 18
    LT = 19
    LTE = 20
    GT = 21
    GTE = 22
    EQ = 23
    NEQ = 24
    NOT = 25
    AND = 26
    OR = 27
    # call arg1 only if 0ret is 0
    CFC = 28

    @property
    def label(self) -> str:
        """The short name used in instruction listings."""
        return "EXEC" if self is InstrType.EXEC_CALL else self.name


_STACK_OPS = frozenset({InstrType.PUSH, InstrType.POP, InstrType.TOP})


@dataclass(frozen=True)
class Instr:
    """A single bytecode instruction with up to two string arguments."""

    type: InstrType = InstrType.ERR
    arg1: str = ""
    arg2: str = ""

    def is_stack_op(self) -> bool:
        """Return True for PUSH, POP and TOP."""
        return self.type in _STACK_OPS


@dataclass
class BCFunc:
    """A named function holding bytecode instructions."""

    name: str
    instr_list: list[Instr] = field(default_factory=list)


def _format_instr(instr: Instr) -> str:
    line = (_LINE_INDENT + instr.type.label).ljust(_LISTING_WIDTH)
    if instr.arg1:
        line += instr.arg1
    if instr.arg2:
        line += ", " + instr.arg2
    return line


def format_instructions(funcs: Iterable[BCFunc]) -> str:
    """Return a readable listing of the instructions in ``funcs``."""
    blocks = (
        func.name + ":" + "".join(_format_instr(i) for i in func.instr_list)
        for func in funcs
    )
    return "\n\n".join(blocks)