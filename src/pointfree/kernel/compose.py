"""Right-to-left function composition."""

# Composition satisfies the following laws:
#
# 1. Identity: compose(f, identity) == compose(identity, f) == f
#
# 2. Associativity: compose(f, compose(g, h)) == compose(compose(f, g), h)
#
# 3. Application: compose(f, g, h)(x) == f(g(h(x)))

from __future__ import annotations

from collections.abc import Callable
from functools import reduce
from typing import Any


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose unary functions from right to left.

    compose(f, g, h)(x) == f(g(h(x)))

    Raises:
        ValueError: If no functions are given
    """
    if not fns:
        raise ValueError("compose requires at least one function")

    ordered = tuple(reversed(fns))

    def composed(x: Any) -> Any:
        return reduce(lambda acc, f: f(acc), ordered, x)

    return composed


def identity(x: Any) -> Any:
    return x
