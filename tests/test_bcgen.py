import pytest

from mcdatapack.bcgen import BCManager
from mcdatapack.instr import BCFunc, Instr, InstrType
from mcdatapack.stats import Statistics
from mcdatapack.types import BaseType, Type, Var


def test_write_appends_to_current_function():
    man = BCManager()
    func = man.add_func("main")
    instr = Instr(InstrType.CMD, "say hi")
    man.write(instr)
    assert func.instr_list == [instr]
    assert man.cur_func() is func


def test_unnamed_functions_get_increasing_numbers():
    man = BCManager()
    first = man.add_func()
    second = man.add_func()
    assert [first.name, second.name] == ["1", "2"]
    assert man.functions() == [first, second]


def test_cur_func_none_when_stack_empty():
    man = BCManager()
    assert man.cur_func() is None
    with pytest.raises(IndexError):
        man.top_func()


def test_write_updates_statistics():
    stats = Statistics()
    man = BCManager(stats)
    man.add_func("main")
    man.write(Instr(InstrType.PUSH, "x"))
    man.write(Instr(InstrType.POP))
    man.write(Instr(InstrType.CALL, "f"))
    man.write(Instr(InstrType.SET, "x", "1"))
    assert stats.bc_instr_count == 4
    assert stats.stack_op_count == 2
    assert stats.func_call_count == 1


def test_write_without_function_counts_but_stores_nothing():
    man = BCManager()
    man.write(Instr(InstrType.CMD, "say hi"))
    assert man.stats.bc_instr_count == 1
    assert man.functions() == []


def test_write_stack_disables_writing():
    man = BCManager()
    func = man.add_func("main")
    man.push_write_stack(True)
    man.push_write_stack(False)
    assert not man.can_write()
    man.write(Instr(InstrType.CMD, "say hidden"))
    assert func.instr_list == []
    assert man.stats.bc_instr_count == 0
    man.pop_write_stack()
    assert man.can_write()


def test_set_top_write_stack_toggles():
    man = BCManager()
    man.push_write_stack(True)
    man.set_top_write_stack(False)
    assert not man.can_write()
    man.set_top_write_stack(True)
    assert man.can_write()


def test_write_stack_operations_on_empty_stack_are_harmless():
    man = BCManager()
    man.pop_write_stack()
    man.set_top_write_stack(False)
    assert man.can_write()


def test_pop_func_with_index_removes_from_below_top():
    man = BCManager()
    a = man.add_func("a")
    man.add_func("b")
    c = man.add_func("c")
    man.pop_func(1)
    assert man.top_func() is c
    man.pop_func()
    assert man.top_func() is a
    assert [f.name for f in man.functions()] == ["a", "b", "c"]


def test_pop_func_too_deep_does_nothing():
    man = BCManager()
    a = man.add_func("a")
    man.pop_func(1)
    assert man.top_func() is a


def test_set_func_stack_replaces_stack():
    man = BCManager()
    other = BCFunc("other")
    man.add_func("a")
    man.set_func_stack([other])
    assert man.top_func() is other


def test_control_flow_check_default_condition():
    man = BCManager()
    main = man.add_func("main")
    man.control_flow_check()
    cont = man.top_func()
    assert cont is not main
    assert main.instr_list == [Instr(InstrType.CFC, cont.name)]
    man.pop_func()
    assert man.cur_func() is None


def test_control_flow_check_with_condition():
    man = BCManager()
    main = man.add_func("main")
    cond = "score x mclang matches 1"
    man.control_flow_check(cond)
    cont = man.top_func()
    assert main.instr_list == [Instr(InstrType.EXEC_CALL, "if " + cond, cont.name)]


def test_finalize_creates_load_with_inits():
    man = BCManager()
    man.ctx.push_var(Var(Type(BaseType.INT), "n"))
    man.ctx.push_var(Var(Type(BaseType.BOOL), "flag"))
    man.ctx.push_var(Var(Type(BaseType.STR), "s"))
    man.ctx.push_var(Var(Type(BaseType.INT, True), "c"))
    man.finalize()
    (load,) = man.functions()
    assert load.name == "load"
    assert load.instr_list == [
        Instr(InstrType.ADDI, "0ret", "0"),
        Instr(InstrType.ADDI, "0retv", "0"),
        Instr(InstrType.ADDI, "n", "0"),
        Instr(InstrType.ADDI, "flag", "0"),
    ]
    assert man.cur_func() is None


def test_finalize_prepends_to_existing_load():
    man = BCManager()
    load = man.add_func("load")
    existing = Instr(InstrType.CMD, "say loaded")
    man.write(existing)
    man.pop_func()
    man.finalize()
    assert len(man.functions()) == 1
    assert load.instr_list[0] == Instr(InstrType.ADDI, "0ret", "0")
    assert load.instr_list[-1] == existing