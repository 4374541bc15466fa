"""Exercise run configuration."""

from __future__ import annotations

import argparse
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ExerciseConfig(BaseModel):
    """Inputs for a run of the exercises.

    Attributes:
        sentence: Text whose word lengths are computed.
        authors: Names checked against the sample articles.
        numbers: Values to average. Must not be empty.
        trace: Record a call trace while running.
        log_level: Root logging level for the CLI.
    """

    model_config = ConfigDict(frozen=True)

    sentence: str = "once uppon the time"
    authors: tuple[str, ...] = ("random guy", "Baz Baz")
    numbers: tuple[int | float, ...] = Field(default=(1, 2, 3, 4, 5), min_length=1)
    trace: bool = False
    log_level: LogLevel = "WARNING"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> ExerciseConfig:
        """Build a config from parsed CLI arguments, skipping unset ones."""
        values = {
            key: value
            for key, value in vars(args).items()
            if key in cls.model_fields and value is not None
        }
        if "log_level" in values:
            values["log_level"] = values["log_level"].upper()
        return cls.model_validate(values)
