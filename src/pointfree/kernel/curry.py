"""Curried application with an explicit, stored arity."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

from pointfree.kernel.errors import ArityError

R = TypeVar("R")

logger = logging.getLogger(__name__)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True)
class Curried(Generic[R]):
    """A function awaiting the rest of its positional arguments.

    Each call returns either a new Curried holding the accumulated
    arguments, or the result of ``fn`` once ``arity`` arguments are in.
    """

    fn: Callable[..., R]
    arity: int
    args: tuple[Any, ...] = field(default_factory=tuple)

    @property
    def remaining(self) -> int:
        return self.arity - len(self.args)

    @property
    def name(self) -> str:
        return getattr(self.fn, "__name__", type(self.fn).__name__)

    def __call__(self, *args: Any) -> Curried[R] | R:
        if not args and self.arity > 0:
            return self

        combined = self.args + args
        if len(combined) > self.arity:
            raise ArityError(
                f"{self.name}() takes {self.arity} argument(s) but {len(combined)} were given",
                arity=self.arity,
                received=len(combined),
            )
        if len(combined) < self.arity:
            return replace(self, args=combined)

        logger.debug("invoking %s with %d argument(s)", self.name, len(combined))
        return self.fn(*combined)

    def __repr__(self) -> str:
        return f"<curried {self.name} {len(self.args)}/{self.arity}>"


def arity_of(fn: Callable[..., Any]) -> int:
    """Count the positional parameters of fn that have no default.

    Wrappers made with functools.wraps are followed to the function they
    wrap; a Curried counts only the arguments it is still waiting for.

    Raises:
        ArityError: If the signature cannot be inspected
    """
    target = inspect.unwrap(fn)
    if isinstance(target, Curried):
        return target.remaining

    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as exc:
        raise ArityError(f"cannot determine arity of {fn!r}: {exc}", arity=None, received=0) from exc

    return sum(
        1
        for p in signature.parameters.values()
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


def curry(fn: Callable[..., R], arity: int | None = None) -> Curried[R]:
    """Curry a function over a fixed number of positional arguments.

    Args:
        fn: The function to curry
        arity: Number of arguments to collect before calling fn.
            Read from fn's signature when omitted.

    Returns:
        Curried wrapper accepting arguments across one or more calls

    Raises:
        ArityError: If arity is negative or cannot be determined
    """
    if arity is None:
        arity = arity_of(fn)
    if arity < 0:
        raise ArityError(f"arity must be non-negative, got {arity}", arity=arity, received=0)
    return Curried(fn=fn, arity=arity)
