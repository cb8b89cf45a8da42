from hypothesis import given, strategies as st

from bigkit.pair import Pair, is_same_pair


@given(st.integers(), st.integers(), st.integers(), st.integers())
def test_ordering_is_lexicographic(a, b, c, d):
    p, q = Pair(a, b), Pair(c, d)
    assert (p < q) == ((a, b) < (c, d))
    assert (p >= q) == (not p < q)
    assert (p == q) == ((a, b) == (c, d))


def test_first_member_decides_before_second():
    assert Pair(1, 9) < Pair(2, 0)
    assert Pair(1, 2) < Pair(1, 3)
    assert Pair(1, 2) <= Pair(1, 2)
    assert not Pair(1, 2) > Pair(1, 2)


def test_sorting():
    pairs = [Pair(2, 1), Pair(1, 5), Pair(1, 2)]
    assert sorted(pairs) == [Pair(1, 2), Pair(1, 5), Pair(2, 1)]


def test_swap_exchanges_members():
    p, q = Pair(1, "a"), Pair(2, "b")
    p.swap(q)
    assert p == Pair(2, "b")
    assert q == Pair(1, "a")


def test_str():
    assert str(Pair(1, 2)) == "(1, 2)"
    assert str(Pair(True, "x")) == "(1, x)"


def test_is_same_pair():
    assert is_same_pair(Pair(1, 2)) is True
    assert is_same_pair(Pair(1, "2")) is False
    assert is_same_pair((1, 1)) is False