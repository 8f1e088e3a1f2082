"""Statistics gathered while compiling a datapack."""

from __future__ import annotations

from dataclasses import dataclass, fields

from mcdatapack.text import thousands_sep

STAT_LEFT_PAD = 40


@dataclass
class Statistics:
    """Counters describing the generated datapack."""

    bc_instr_count: int = 0
    cmd_count: int = 0
    cmd_function_count: int = 0
    func_call_count: int = 0
    stack_op_count: int = 0

    def reset(self) -> None:
        """Set every counter back to zero."""
        for f in fields(self):
            setattr(self, f.name, 0)


def format_statistics(stats: Statistics) -> str:
    """Return one aligned line per statistic, each ending in a newline."""
    entries = [
        ("Bytecode instructions", stats.bc_instr_count),
        ("Minecraft commands", stats.cmd_count),
        ("Generated Minecraft functions", stats.cmd_function_count),
        ("Minecraft function calls", stats.func_call_count),
        ("Stack operations", stats.stack_op_count),
    ]
    return "".join(
        f"{(label + ': ').ljust(STAT_LEFT_PAD)}{thousands_sep(num)}\n"
        for label, num in entries
    )