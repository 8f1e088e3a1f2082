"""Nested scopes holding variables and constant values."""

from __future__ import annotations

from dataclasses import dataclass, field

from mcdatapack.types import Var


@dataclass
class Context:
    """One scope: its variables and constant values."""

    vars: list[Var] = field(default_factory=list)
    const_values: dict[str, str] = field(default_factory=dict)


class ContextStack:
    """A stack of scopes; the bottom one holds the globals."""

    def __init__(self) -> None:
        self._stack: list[Context] = [Context()]

    def push(self) -> None:
        """Open a new, empty scope."""
        self._stack.append(Context())

    def pop(self) -> None:
        """Close the top scope; does nothing when there is none."""
        if self._stack:
            self._stack.pop()

    def is_empty(self) -> bool:
        """Return True when no scope is open."""
        return not self._stack

    def vars(self) -> list[Var]:
        """All variables, from the bottom scope up."""
        return [var for ctx in self._stack for var in ctx.vars]

    def local_vars(self) -> list[Var]:
        """Variables of the top scope."""
        return list(self._stack[-1].vars) if self._stack else []

    def non_global_vars(self) -> list[Var]:
        """All variables except those of the bottom scope."""
        return [var for ctx in self._stack[1:] for var in ctx.vars]

    def find_var(self, name: str) -> Var | None:
        """Return the first variable called ``name``, searching from the bottom."""
        for ctx in self._stack:
            for var in ctx.vars:
                if var.name == name:
                    return var
        return None

    def const_value(self, name: str) -> str:
        """Return a constant's value, or ``""`` if it is not set."""
        for ctx in self._stack:
            if name in ctx.const_values:
                return ctx.const_values[name]
        return ""

    def const_values(self) -> dict[str, str]:
        """All constants; a name set in a lower scope keeps that value."""
        out: dict[str, str] = {}
        for ctx in reversed(self._stack):
            out.update(ctx.const_values)
        return out

    def local_const_values(self) -> dict[str, str]:
        """Constants of the top scope."""
        return dict(self._stack[-1].const_values) if self._stack else {}

    def push_var(self, var: Var) -> None:
        """Add a variable to the top scope."""
        if not self._stack:
            raise IndexError("no open scope")
        self._stack[-1].vars.append(var)

    def set_const(self, name: str, value: str) -> None:
        """Set a constant in the top scope."""
        if not self._stack:
            raise IndexError("no open scope")
        self._stack[-1].const_values[name] = value