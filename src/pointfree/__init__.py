from .config import ExerciseConfig
from .exercises import average, get, is_author, names, run_exercises, word_lengths
from .kernel import (
    ArityError,
    Curried,
    Evidence,
    Trace,
    compose,
    curry,
    fork,
    identity,
    traced,
)
from .records import SAMPLE_ARTICLES, Article, Author

__all__ = [
    # Combinators
    "curry",
    "Curried",
    "compose",
    "identity",
    "fork",
    "ArityError",
    # Tracing
    "Trace",
    "Evidence",
    "traced",
    # Exercises
    "get",
    "word_lengths",
    "names",
    "is_author",
    "average",
    "run_exercises",
    "ExerciseConfig",
    # Records
    "Article",
    "Author",
    "SAMPLE_ARTICLES",
]
