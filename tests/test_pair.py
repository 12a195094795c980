import pytest

from prique.pair import Pair


def test_value_is_truncated_to_five_characters():
    assert Pair(1, "abcdefgh").val == "abcde"


def test_short_value_is_kept():
    assert Pair(4, "kot").val == "kot"


def test_value_stops_at_nul():
    assert Pair(1, "ab\0cd").val == "ab"


def test_setting_value_truncates():
    p = Pair(2, "x")
    p.val = "krowa123"
    assert p.val == "krowa"


def test_default_pair():
    p = Pair()
    assert p.key == 0
    assert p.val == ""


def test_equality_ignores_value():
    assert Pair(1, "a") == Pair(1, "b")
    assert not (Pair(1, "a") != Pair(1, "b"))
    assert Pair(1, "a") != Pair(2, "a")


def test_equality_with_int_compares_key():
    assert Pair(7, "tan") == 7
    assert Pair(7, "tan") != 8


def test_ordering_by_key():
    assert Pair(1, "z") < Pair(2, "a")
    assert Pair(3, "a") > Pair(2, "z")
    assert not (Pair(2, "a") < Pair(2, "b"))


def test_le_and_ge_with_equal_keys():
    assert Pair(5, "a") <= Pair(5, "b")
    assert Pair(5, "a") >= Pair(5, "b")
    assert not (Pair(6, "a") <= Pair(5, "b"))
    assert not (Pair(4, "a") >= Pair(5, "b"))


def test_sorted_uses_keys():
    pairs = [Pair(3, "c"), Pair(1, "a"), Pair(2, "b")]
    assert [p.key for p in sorted(pairs)] == [1, 2, 3]


def test_str_format():
    assert str(Pair(12, "kot")) == "(12|kot)"


def test_key_is_mutable():
    p = Pair(1, "cos")
    p.key = 10
    assert p == 10


def test_pair_is_unhashable():
    with pytest.raises(TypeError):
        hash(Pair(1, "a"))


def test_ordering_with_other_type_raises():
    with pytest.raises(TypeError):
        Pair(1, "a") < "x"