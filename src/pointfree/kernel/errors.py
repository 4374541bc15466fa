"""Error types for curried application."""

from __future__ import annotations


class ArityError(TypeError):
    """Error raised when a curried function receives the wrong argument count.

    Preserves the declared arity and the number of arguments supplied
    so far for debugging purposes.
    """

    def __init__(self, message: str, arity: int | None, received: int) -> None:
        self.arity = arity
        self.received = received
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ArityError({super().__repr__()}, arity={self.arity!r}, received={self.received!r})"
