import pytest

from mcdatapack.types import BaseType, Param, Return, Type, Var, parse_type


@pytest.mark.parametrize("base", list(BaseType))
@pytest.mark.parametrize("is_const", [False, True])
def test_str_round_trip(base, is_const):
    t = Type(base, is_const)
    assert parse_type(str(t)) == t


def test_parse_plain_int():
    assert parse_type("int") == Type(BaseType.INT, False)


def test_parse_const_str():
    t = parse_type("const str")
    assert t.base is BaseType.STR
    assert t.is_const is True
    assert str(t) == "const str"


@pytest.mark.parametrize("text", ["float", "", "const ", "const", "Int"])
def test_parse_unknown_raises(text):
    with pytest.raises(ValueError):
        parse_type(text)


def test_equality_considers_const():
    assert Type(BaseType.INT) != Type(BaseType.INT, True)
    assert Type(BaseType.INT).same_base(Type(BaseType.INT, True))
    assert not Type(BaseType.INT).same_base(Type(BaseType.BOOL))


def test_less_equal_and_greater_equal():
    plain = Type(BaseType.INT)
    const = Type(BaseType.INT, True)
    assert plain <= const
    assert not const <= plain
    assert const >= plain
    assert not plain >= const
    assert plain <= plain and plain >= plain


def test_ordering_requires_same_base():
    assert not Type(BaseType.INT) <= Type(BaseType.BOOL, True)
    assert not Type(BaseType.BOOL, True) >= Type(BaseType.INT)


def test_var_and_param_hold_fields():
    var = Var(parse_type("bool"), "flag")
    param = Param(parse_type("const int"), "x")
    assert var.type == Type(BaseType.BOOL)
    assert var.name == "flag"
    assert param.type.is_const
    assert param.name == "x"


def test_return_defaults():
    ret = Return()
    assert ret.type == Type(BaseType.VOID)
    assert ret.value == ""