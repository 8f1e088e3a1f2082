"""Conversion of bytecode functions into raw Minecraft commands."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from mcdatapack.errors import CompileError
from mcdatapack.instr import BCFunc, Instr, InstrType
from mcdatapack.options import Options

STACK_CREATE = (
    "execute unless data storage mclang:stack stack run data "
    "modify storage mclang:stack stack set value []"
)
_TMP = "0itmp"

_ARITH_OPS = {
    InstrType.ADD: "+=",
    InstrType.SUB: "-=",
    InstrType.MUL: "*=",
    InstrType.DIV: "/=",
    InstrType.MOD: "%=",
}

_ARITH_I_OPS = {
    InstrType.MULI: "*=",
    InstrType.DIVI: "/=",
    InstrType.MODI: "%=",
}

_COMPARE_OPS = {
    InstrType.LT: "<",
    InstrType.LTE: "<=",
    InstrType.GT: ">",
    InstrType.GTE: ">=",
    InstrType.EQ: "=",
}


@dataclass
class CmdFunc:
    """A named function holding raw commands."""

    name: str
    cmd_list: list[str] = field(default_factory=list)


class BCConverter:
    """Turns bytecode into commands for a given namespace and scoreboard."""

    def __init__(self, options: Options | None = None) -> None:
        opts = options if options is not None else Options()
        self.ns = opts.ns
        self.scoreboard = opts.scoreboard_name

    def convert(self, funcs: Iterable[BCFunc]) -> list[CmdFunc]:
        """Convert every bytecode function, keeping their order."""
        return [CmdFunc(func.name, self.convert_func(func)) for func in funcs]

    def convert_func(self, func: BCFunc) -> list[str]:
        """Convert one function, preceded by the setup it needs."""
        body = [cmd for instr in func.instr_list for cmd in self.convert_instr(instr)]
        header = [f"scoreboard objectives add {self.scoreboard} dummy"]
        if any(instr.is_stack_op() for instr in func.instr_list):
            header.append(STACK_CREATE)
        return header + body

    def convert_instr(self, instr: Instr) -> list[str]:
        """Convert one instruction into the commands that carry it out."""
        kind = instr.type
        sb = self.scoreboard
        if kind is InstrType.CMD:
            return [instr.arg1]
        if kind is InstrType.EXEC_CALL:
            return [f"execute {instr.arg1} run function {self.ns}:{instr.arg2}"]
        if kind is InstrType.CALL:
            return [f"function {self.ns}:{instr.arg1}"]
        if kind is InstrType.SET:
            return [f"scoreboard players set {instr.arg1} {sb} {instr.arg2}"]
        if instr.is_stack_op():
            return self._stack_op(instr)
        if kind is InstrType.COPY:
            return [
                f"scoreboard players operation {instr.arg1} {sb} = {instr.arg2} {sb}"
            ]
        if kind in _ARITH_OPS:
            return [
                f"scoreboard players operation {instr.arg1} {sb} "
                f"{_ARITH_OPS[kind]} {instr.arg2} {sb}"
            ]
        if InstrType.ADDI <= kind <= InstrType.MODI:
            return self._arith_immediate(instr)
        if InstrType.LT <= kind <= InstrType.NEQ:
            return self._comparison(instr)
        if InstrType.NOT <= kind <= InstrType.OR:
            return self._logical(instr)
        if kind is InstrType.CFC:
            return [
                f"execute if score 0ret {sb} matches 0 "
                f"run function {self.ns}:{instr.arg1}"
            ]
        raise CompileError("Unexpected error, reading undefined instruction")

    def _stack_op(self, instr: Instr) -> list[str]:
        sb = self.scoreboard
        if instr.type is InstrType.TOP:
            return [
                f"execute store result score {instr.arg1} {sb} "
                "run data get storage mclang:stack stack[0]"
            ]
        if instr.type is InstrType.PUSH:
            return [
                "data modify storage mclang:stack stack prepend value 0",
                "execute store result storage mclang:stack stack[0] int 1 run "
                f"scoreboard players get {instr.arg1} {sb}",
            ]
        return ["data remove storage mclang:stack stack[0]"]

    def _arith_immediate(self, instr: Instr) -> list[str]:
        sb = self.scoreboard
        if instr.type is InstrType.ADDI:
            return [f"scoreboard players add {instr.arg1} {sb} {instr.arg2}"]
        if instr.type is InstrType.SUBI:
            return [f"scoreboard players remove {instr.arg1} {sb} {instr.arg2}"]
        op = _ARITH_I_OPS[instr.type]
        return [
            f"scoreboard players set {_TMP} {sb} {instr.arg2}",
            f"scoreboard players operation {instr.arg1} {sb} {op} {_TMP} {sb}",
        ]

    def _comparison(self, instr: Instr) -> list[str]:
        sb = self.scoreboard
        if instr.type is InstrType.NEQ:
            test = f"unless score {instr.arg1} {sb} = {instr.arg2} {sb}"
        else:
            op = _COMPARE_OPS[instr.type]
            test = f"if score {instr.arg1} {sb} {op} {instr.arg2} {sb}"
        return [
            f"scoreboard players set {_TMP} {sb} 0",
            f"execute {test} run scoreboard players set {_TMP} {sb} 1",
            f"scoreboard players operation {instr.arg1} {sb} = {_TMP} {sb}",
        ]

    def _logical(self, instr: Instr) -> list[str]:
        sb = self.scoreboard
        a, b = instr.arg1, instr.arg2
        if instr.type is InstrType.NOT:
            return [
                f"scoreboard players set {_TMP} {sb} 0",
                f"execute if score {a} {sb} matches 0 run "
                f"scoreboard players set {_TMP} {sb} 1",
                f"scoreboard players operation {a} {sb} = {_TMP} {sb}",
            ]
        normalise = (
            f"execute unless score {a} {sb} matches 0 "
            f"run scoreboard players set {a} {sb} 1"
        )
        if instr.type is InstrType.AND:
            return [
                normalise,
                f"execute if score {b} {sb} matches 0 run "
                f"scoreboard players set {a} {sb} 0",
            ]
        return [
            normalise,
            f"execute unless score {b} {sb} matches 0 run "
            f"scoreboard players set {a} {sb} 1",
        ]


def format_commands(funcs: Iterable[CmdFunc]) -> str:
    """Return a readable listing of the commands in ``funcs``."""
    return "\n\n".join(
        func.name + ":" + "".join("\n    " + cmd for cmd in func.cmd_list)
        for func in funcs
    )