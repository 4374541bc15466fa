"""Kernel layer - pure combinators for point-free pipelines."""

from pointfree.kernel.compose import compose, identity
from pointfree.kernel.curry import Curried, arity_of, curry
from pointfree.kernel.errors import ArityError
from pointfree.kernel.fork import fork
from pointfree.kernel.trace import Evidence, Trace, traced

__all__ = [
    "compose",
    "identity",
    "curry",
    "Curried",
    "arity_of",
    "fork",
    "ArityError",
    # Tracing
    "Evidence",
    "Trace",
    "traced",
]
