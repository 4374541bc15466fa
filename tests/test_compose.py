"""Tests for compose."""

from __future__ import annotations

import pytest

from pointfree.kernel import compose, identity

from fakes import Spy, boom


def inc(x: int) -> int:
    return x + 1


def double(x: int) -> int:
    return x * 2


def square(x: int) -> int:
    return x * x


@pytest.mark.parametrize("x", [-3, 0, 1, 7])
def test_right_to_left_application(x: int) -> None:
    """Test compose(f, g, h)(x) == f(g(h(x)))."""
    assert compose(inc, double, square)(x) == inc(double(square(x)))


def test_single_function() -> None:
    assert compose(inc)(1) == 2


def test_identity_law() -> None:
    assert compose(inc, identity)(4) == compose(identity, inc)(4) == inc(4)


def test_associativity_law() -> None:
    left = compose(inc, compose(double, square))
    right = compose(compose(inc, double), square)
    assert left(5) == right(5) == 51


def test_order_of_evaluation() -> None:
    order: list[str] = []
    first = Spy(lambda x: order.append("first") or x)
    last = Spy(lambda x: order.append("last") or x)

    compose(last, first)("value")
    assert order == ["first", "last"]


def test_empty_compose_rejected() -> None:
    with pytest.raises(ValueError):
        compose()


def test_error_propagates_and_stops_pipeline() -> None:
    """Test an error in a stage propagates and later stages never run."""
    after = Spy(inc)
    with pytest.raises(RuntimeError, match="boom"):
        compose(after, boom, inc)(1)
    assert after.calls == []


def test_composed_function_is_reusable() -> None:
    f = compose(str, inc)
    assert [f(n) for n in range(3)] == ["1", "2", "3"]
