"""Fork combinator: send one value down two functions and merge."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from pointfree.kernel.curry import curry

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
R = TypeVar("R")


def _fork(
    lastly: Callable[[B, C], R],
    f: Callable[[A], B],
    g: Callable[[A], C],
    x: A,
) -> R:
    return lastly(f(x), g(x))


# fork(lastly, f, g) is a reusable unary function; fork(lastly, f, g, x)
# applies it immediately.
fork = curry(_fork)
