"""Call trace infrastructure for composed pipelines.

Trace is opt-in and sits outside the functions it observes: a traced
function returns exactly what the wrapped function returns.
Tree relationships are reconstructed only on demand via as_tree().
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from functools import wraps
from typing import Any, TypeVar

R = TypeVar("R")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evidence:
    """A single call event captured at runtime."""

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Flat log of call spans.

    Spans opened while another span is open become its children; the
    parent of every event is the innermost span open when it is recorded.
    """

    def __init__(self) -> None:
        self._events: list[Evidence] = []
        self._open: list[int] = []

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        duration_ms: float | None = None,
    ) -> int:
        """Record an event under the innermost open span and return its id."""
        event_id = len(self._events)
        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=self._open[-1] if self._open else None,
                info=info or {},
                duration_ms=duration_ms,
            )
        )
        return event_id

    @contextmanager
    def span(self, name: str, **info: Any) -> Iterator[int]:
        """Record one call: call_begin, then call_end or call_error.

        Events recorded inside the block are children of call_begin.
        Exceptions are recorded and re-raised unchanged.

        Args:
            name: Function name stored under info["fn"]
            **info: Extra context stored on call_begin

        Yields:
            The id of the call_begin event
        """
        begin_id = self.record("call_begin", info={"fn": name, **info})
        self._open.append(begin_id)
        start_time = time.perf_counter()
        try:
            yield begin_id
        except Exception as exc:
            logger.debug("traced call %s failed: %s", name, exc)
            self.record("call_error", info={"fn": name, "error": str(exc)})
            raise
        else:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self.record("call_end", info={"fn": name}, duration_ms=duration_ms)
        finally:
            self._open.pop()

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def find(self, **criteria: Any) -> list[Evidence]:
        """Find events whose attributes or info entries match all criteria."""
        return [
            e
            for e in self._events
            if all(getattr(e, k, e.info.get(k)) == v for k, v in criteria.items())
        ]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Map each parent_id to the ids of its children."""
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree


def traced(fn: Callable[..., R], trace: Trace | None, label: str | None = None) -> Callable[..., R]:
    """Wrap fn so every call is recorded on trace as a span.

    Args:
        fn: Function to observe
        trace: Trace to record into. When None, fn is returned unchanged.
        label: Name recorded with each event, defaults to fn's name
    """
    if trace is None:
        return fn

    name = label or getattr(fn, "name", None) or getattr(fn, "__name__", repr(fn))

    @wraps(fn)
    def wrapper(*args: Any) -> R:
        with trace.span(name, args=len(args)):
            return fn(*args)

    return wrapper
