from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Spy:
    """Callable that records every argument tuple it receives."""

    fn: Callable[..., Any]
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.fn(*args)


def boom(_: Any) -> Any:
    raise RuntimeError("boom")


def add3(a: int, b: int, c: int) -> tuple[int, int, int, int]:
    return (a, b, c, a + b + c)


ARTICLES = [
    {
        "title": "Everything sucks",
        "url": "everythingsucks.com",
        "author": {"name": "Foo Bar", "email": "foo@bar.com"},
    },
    {
        "title": "Hello world",
        "url": "helloworld.com",
        "author": {"name": "Baz Baz", "email": "baz@baz.com"},
    },
]
