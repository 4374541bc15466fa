"""Tests for the article record models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pointfree.records import Article, SAMPLE_ARTICLES, load_records

from fakes import ARTICLES


def test_load_records_returns_plain_dicts() -> None:
    records = load_records(ARTICLES)
    assert records == ARTICLES
    assert all(type(r) is dict for r in records)
    assert type(records[0]["author"]) is dict


def test_load_records_rejects_missing_author_email() -> None:
    bad = [{"title": "t", "url": "u", "author": {"name": "n"}}]
    with pytest.raises(ValidationError):
        load_records(bad)


def test_article_is_frozen() -> None:
    article = Article.model_validate(ARTICLES[0])
    with pytest.raises(ValidationError):
        article.title = "changed"


def test_sample_collection() -> None:
    assert [a["title"] for a in SAMPLE_ARTICLES] == ["Everything sucks", "Hello world"]
