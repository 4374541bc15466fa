"""Point-free exercises over the sample article collection.

Each exercise is built only from curry, compose, fork and the prelude.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from pointfree import prelude as P
from pointfree.config import ExerciseConfig
from pointfree.kernel import Trace, compose, curry, fork, traced
from pointfree.records import SAMPLE_ARTICLES

logger = logging.getLogger(__name__)

get = curry(lambda key, obj: obj[key], arity=2)

word_lengths = compose(P.map(P.size), P.split(" "))

names = compose(P.map(compose(get("name"), get("author"))))


@curry
def is_author(name: str, articles: Sequence[dict[str, Any]]) -> bool:
    """Whether name wrote any of the articles."""
    return compose(P.contains(name), names)(articles)


average = compose(fork(P.divide, P.sum, P.size))


def run_exercises(config: ExerciseConfig, trace: Trace | None = None) -> dict[str, Any]:
    """Evaluate every exercise on the configured inputs.

    Args:
        config: Exercise inputs
        trace: Optional trace that records each top-level exercise call

    Returns:
        Mapping of exercise label to its result, in evaluation order
    """
    def run(label: str, fn: Callable[..., Any], *args: Any) -> Any:
        logger.debug("running %s", label)
        return traced(fn, trace, label=label)(*args)

    results: dict[str, Any] = {
        "word_lengths": run("word_lengths", word_lengths, config.sentence),
        "names": run("names", names, SAMPLE_ARTICLES),
    }
    for author in config.authors:
        results[f"is_author({author!r})"] = run("is_author", is_author, author, SAMPLE_ARTICLES)
    results["average"] = run("average", average, list(config.numbers))
    return results
