import pytest

from mcdatapack.context import Context, ContextStack
from mcdatapack.types import BaseType, Type, Var

INT = Type(BaseType.INT)
BOOL = Type(BaseType.BOOL)


def test_starts_with_one_empty_scope():
    ctx = ContextStack()
    assert not ctx.is_empty()
    assert ctx.vars() == []
    ctx.pop()
    assert ctx.is_empty()


def test_pop_on_empty_is_harmless():
    ctx = ContextStack()
    ctx.pop()
    ctx.pop()
    assert ctx.is_empty()
    assert ctx.local_vars() == []
    assert ctx.local_const_values() == {}


def test_vars_local_and_non_global():
    ctx = ContextStack()
    g = Var(INT, "g")
    a = Var(BOOL, "a")
    b = Var(INT, "b")
    ctx.push_var(g)
    ctx.push()
    ctx.push_var(a)
    ctx.push()
    ctx.push_var(b)
    assert ctx.vars() == [g, a, b]
    assert ctx.local_vars() == [b]
    assert ctx.non_global_vars() == [a, b]
    ctx.pop()
    assert ctx.vars() == [g, a]


def test_find_var_searches_from_bottom():
    ctx = ContextStack()
    outer = Var(INT, "x")
    inner = Var(BOOL, "x")
    ctx.push_var(outer)
    ctx.push()
    ctx.push_var(inner)
    assert ctx.find_var("x") == outer
    assert ctx.find_var("missing") is None


def test_const_values():
    ctx = ContextStack()
    ctx.set_const("a", "1")
    ctx.push()
    ctx.set_const("a", "2")
    ctx.set_const("b", "3")
    assert ctx.const_value("a") == "1"
    assert ctx.const_value("b") == "3"
    assert ctx.const_value("c") == ""
    assert ctx.const_values() == {"a": "1", "b": "3"}
    assert ctx.local_const_values() == {"a": "2", "b": "3"}


def test_local_vars_is_a_copy():
    ctx = ContextStack()
    ctx.local_vars().append(Var(INT, "z"))
    assert ctx.vars() == []


def test_push_on_empty_raises():
    ctx = ContextStack()
    ctx.pop()
    with pytest.raises(IndexError):
        ctx.push_var(Var(INT, "x"))
    with pytest.raises(IndexError):
        ctx.set_const("a", "1")


def test_context_defaults():
    c = Context()
    assert c.vars == []
    assert c.const_values == {}