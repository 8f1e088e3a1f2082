"""Bookkeeping for bytecode generation: functions, scopes and write control."""

from __future__ import annotations

from mcdatapack.context import ContextStack
from mcdatapack.instr import BCFunc, Instr, InstrType
from mcdatapack.stats import Statistics
from mcdatapack.tmpvar import TmpVarManager
from mcdatapack.types import BaseType, Return, Type

LOAD_FUNCTION = "load"
RETURN_FLAG = "0ret"
RETURN_VALUE = "0retv"

_ZERO_INITIALISED = (Type(BaseType.INT), Type(BaseType.BOOL))


class BCManager:
    """Collects generated bytecode functions and tracks generation state."""

    def __init__(self, stats: Statistics | None = None) -> None:
        self.ctx = ContextStack()
        self.tmp = TmpVarManager()
        self.ret = Return()
        self.stats = stats if stats is not None else Statistics()
        self.cur_func_node: object | None = None
        self._funcs: list[BCFunc] = []
        self._func_stack: list[BCFunc] = []
        self._next_id = 1
        self._write_stack: list[bool] = []

    def functions(self) -> list[BCFunc]:
        """All generated functions, in the order they were created."""
        return list(self._funcs)

    def cur_func(self) -> BCFunc | None:
        """The function being written to, or None if there is none."""
        return self._func_stack[-1] if self._func_stack else None

    def write(self, instr: Instr) -> None:
        """Append ``instr`` to the current function when writing is enabled."""
        if not self.can_write():
            return
        self.stats.bc_instr_count += 1
        if instr.is_stack_op():
            self.stats.stack_op_count += 1
        if instr.type is InstrType.CALL:
            self.stats.func_call_count += 1
        if self._func_stack:
            self._func_stack[-1].instr_list.append(instr)

    def add_func(self, name: str = "") -> BCFunc:
        """Create a function, make it current and return it.

        Without a name the function gets the next unique number.
        """
        if not name:
            name = str(self._next_id)
            self._next_id += 1
        func = BCFunc(name)
        self._funcs.append(func)
        self._func_stack.append(func)
        return func

    def pop_func(self, index: int = 0) -> None:
        """Remove the function ``index`` places below the top of the stack.

        Does nothing when the stack is not deep enough; the function stays
        among the generated functions.
        """
        if len(self._func_stack) <= index:
            return
        del self._func_stack[-1 - index]

    def top_func(self) -> BCFunc:
        """The top function of the function stack."""
        if not self._func_stack:
            raise IndexError("function stack is empty")
        return self._func_stack[-1]

    def set_func_stack(self, stack: list[BCFunc]) -> None:
        """Replace the function stack."""
        self._func_stack = list(stack)

    def push_write_stack(self, val: bool) -> None:
        """Push an entry; any False entry disables writing."""
        self._write_stack.append(val)

    def set_top_write_stack(self, val: bool) -> None:
        """Change the top entry; does nothing on an empty stack."""
        if self._write_stack:
            self._write_stack[-1] = val

    def pop_write_stack(self) -> None:
        """Remove the top entry; does nothing on an empty stack."""
        if self._write_stack:
            self._write_stack.pop()

    def can_write(self) -> bool:
        """True when the write stack holds no False entry."""
        return False not in self._write_stack

    def control_flow_check(self, cond: str = "") -> None:
        """Continue in a new function that runs only if ``cond`` holds.

        Without a condition the check is that ``0ret`` is 0. The call is
        written to the current function, which is then replaced on the stack
        by the new one.
        """
        new_func = self.add_func()
        self.pop_func()
        if cond:
            self.write(Instr(InstrType.EXEC_CALL, "if " + cond, new_func.name))
        else:
            self.write(Instr(InstrType.CFC, new_func.name))
        self.pop_func()
        self._func_stack.append(new_func)

    def finalize(self) -> None:
        """Prepend initialisation of globals and return slots to ``load``.

        The ``load`` function is created if it does not exist yet.
        """
        load = next(
            (f for f in reversed(self._funcs) if f.name == LOAD_FUNCTION), None
        )
        if load is None:
            load = self.add_func(LOAD_FUNCTION)
            self.pop_func()
        inits = [
            Instr(InstrType.ADDI, RETURN_FLAG, "0"),
            Instr(InstrType.ADDI, RETURN_VALUE, "0"),
        ]
        inits.extend(
            Instr(InstrType.ADDI, var.name, "0")
            for var in self.ctx.vars()
            if var.type in _ZERO_INITIALISED
        )
        load.instr_list[:0] = inits