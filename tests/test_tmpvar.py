import pytest

from mcdatapack.tmpvar import PREFIX, TmpVarManager


def test_first_free_name():
    assert TmpVarManager().get_free() == "0tmp0"


def test_reserve_returns_free_name_and_advances():
    tmp = TmpVarManager()
    first = tmp.get_free()
    assert tmp.reserve() == first
    second = tmp.reserve()
    assert second != first
    assert second.startswith(PREFIX)
    assert tmp.reserved() == {first, second}


def test_get_free_does_not_reserve():
    tmp = TmpVarManager()
    assert tmp.get_free() == tmp.get_free()
    assert tmp.reserved() == set()


def test_free_allows_reuse_of_lowest():
    tmp = TmpVarManager()
    a = tmp.reserve()
    tmp.reserve()
    tmp.free(a)
    assert tmp.get_free() == a


def test_reserve_by_name_is_idempotent():
    tmp = TmpVarManager()
    assert tmp.reserve("0tmp5") == "0tmp5"
    tmp.reserve("0tmp5")
    assert tmp.reserved() == {"0tmp5"}


def test_reserved_name_skipped_by_get_free():
    tmp = TmpVarManager()
    free = tmp.get_free()
    tmp.reserve(free)
    assert tmp.get_free() != free


def test_free_unreserved_is_harmless():
    tmp = TmpVarManager()
    tmp.free("0tmp3")
    assert tmp.reserved() == set()


def test_clear():
    tmp = TmpVarManager()
    first = tmp.reserve()
    tmp.reserve()
    tmp.clear()
    assert tmp.reserved() == set()
    assert tmp.get_free() == first


@pytest.mark.parametrize("name", ["x1", "0tmp", "0tmpabc"])
def test_invalid_name_raises(name):
    with pytest.raises(ValueError):
        TmpVarManager().reserve(name)