"""Curried data primitives for point-free pipelines.

Every function here takes its data argument last so that partial
application yields a ready-to-compose unary function:

    compose(map(size), split(" "))("once uppon the time")  # [4, 5, 3, 4]

Several names shadow builtins on purpose; import the module and use
qualified names (``from pointfree import prelude as P``).
"""

from __future__ import annotations

import builtins
from collections.abc import Callable, Container, Iterable, Mapping, Sized
from typing import Any

from pointfree.kernel.curry import curry


@curry
def prop(key: Any, obj: Mapping[Any, Any]) -> Any:
    return obj[key]


@curry
def map(fn: Callable[[Any], Any], xs: Iterable[Any]) -> list[Any]:
    return [fn(x) for x in xs]


@curry
def split(sep: str, s: str) -> list[str]:
    return s.split(sep)


@curry
def size(xs: Sized) -> int:
    return len(xs)


@curry
def contains(x: Any, xs: Container[Any]) -> bool:
    """True if any element of xs equals x."""
    return x in xs


@curry
def divide(a: float, b: float) -> float:
    return a / b


@curry
def sum(xs: Iterable[float]) -> float:
    return builtins.sum(xs)


__all__ = ["prop", "map", "split", "size", "contains", "divide", "sum"]
