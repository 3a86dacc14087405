from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from reading_list.db import models, schemas


def test_article_create_normalizes_url():
    a = schemas.ArticleCreate(title="Example Article", url="example.com/post")
    assert a.title == "Example Article"
    assert a.url == "https://example.com/post"


def test_article_create_rejects_empty_url():
    with pytest.raises(ValidationError) as exc:
        schemas.ArticleCreate(title="T", url="")
    assert exc.value.errors()[0]["loc"] == ("url",)


def test_article_create_rejects_whitespace_url():
    with pytest.raises(ValidationError):
        schemas.ArticleCreate(title="T", url="   ")


def test_article_create_title_bounds():
    with pytest.raises(ValidationError):
        schemas.ArticleCreate(title="", url="example.com")
    with pytest.raises(ValidationError):
        schemas.ArticleCreate(title="x" * 513, url="example.com")
    ok = schemas.ArticleCreate(title="x" * 512, url="example.com")
    assert len(ok.title) == 512


def test_article_create_requires_fields():
    with pytest.raises(ValidationError):
        schemas.ArticleCreate(title="only title")


def test_article_reads_orm_and_dumps_camel_case():
    created = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    row = models.Article(id=7, title="T", url="https://t.example", is_read=True, created_at=created)
    a = schemas.Article.model_validate(row)
    assert a.is_read is True
    dumped = a.model_dump(by_alias=True)
    assert dumped["isRead"] is True
    assert dumped["createdAt"] == created
    assert set(dumped) == {"id", "title", "url", "isRead", "createdAt"}


def test_article_accepts_wire_payload():
    a = schemas.Article.model_validate({
        "id": 1,
        "title": "T",
        "url": "https://t.example",
        "isRead": False,
        "createdAt": "2025-01-02T03:04:05+00:00",
    })
    assert a.id == 1
    assert a.is_read is False
    assert a.created_at.tzinfo is not None


def test_toggle_request_current_state():
    assert schemas.ToggleReadRequest(currentState=True).current_state is True
    assert schemas.ToggleReadRequest(current_state=False).current_state is False
    assert schemas.ToggleReadRequest().current_state is None


def test_toggle_request_requires_real_boolean():
    with pytest.raises(ValidationError):
        schemas.ToggleReadRequest(currentState="yes")


def test_article_create_keeps_title_as_submitted():
    assert schemas.ArticleCreate(title="  Padded  ", url="example.com").title == "  Padded  "
    assert schemas.ArticleCreate(title="   ", url="example.com").title == "   "


def test_article_create_title_length_counts_whitespace():
    with pytest.raises(ValidationError):
        schemas.ArticleCreate(title="x" * 512 + " ", url="example.com")


def test_article_response_has_no_input_rules():
    row = models.Article(
        id=3,
        title="   ",
        url="legacy",
        is_read=False,
        created_at=datetime(2025, 1, 2, tzinfo=timezone.utc),
    )
    a = schemas.Article.model_validate(row)
    assert a.title == "   "
    assert a.url == "legacy"
