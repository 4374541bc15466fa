"""Tests for the curried prelude."""

from __future__ import annotations

import pytest

from pointfree import prelude as P
from pointfree.kernel import compose


def test_prop() -> None:
    assert P.prop("a")({"a": 1}) == 1
    assert P.prop(0, ["x"]) == "x"


def test_map_returns_list() -> None:
    assert P.map(str)(range(3)) == ["0", "1", "2"]


def test_split_and_size() -> None:
    assert P.split(" ")("a bc") == ["a", "bc"]
    assert P.size("abc") == 3


def test_contains_uses_equality() -> None:
    assert P.contains({"a": 1})([{"a": 1}]) is True
    assert P.contains("x", []) is False


def test_divide() -> None:
    assert P.divide(15)(5) == 3
    with pytest.raises(ZeroDivisionError):
        P.divide(1, 0)


def test_sum() -> None:
    assert P.sum([1, 2, 3]) == 6
    assert P.sum([]) == 0


def test_word_lengths_pipeline() -> None:
    word_lengths = compose(P.map(P.size), P.split(" "))
    assert word_lengths("once uppon the time") == [4, 5, 3, 4]
