"""Record models for the sample article collection."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict


class Author(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    email: str


class Article(BaseModel):
    """A published article and its author."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    author: Author


def load_records(raw: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Validate raw mappings as articles and return them as plain dicts.

    Raises:
        pydantic.ValidationError: If any mapping is not a valid article
    """
    return [Article.model_validate(item).model_dump() for item in raw]


SAMPLE_ARTICLES: list[dict[str, Any]] = load_records(
    [
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
)
