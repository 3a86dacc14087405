from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from reading_list.db.models import TITLE_MAX_LENGTH
from reading_list.utils.urls import normalize_article_url


class ArticleCreate(BaseModel):
    """Create payload. The title is kept as submitted; only the url is trimmed and normalized."""
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    url: str = Field(min_length=1)

    @field_validator("url")
    @classmethod
    def _normalize_url(cls, value: str) -> str:
        return normalize_article_url(value)


class Article(BaseModel):
    id: int
    title: str
    url: str
    is_read: bool = Field(alias="isRead")
    created_at: datetime = Field(alias="createdAt")
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ToggleReadRequest(BaseModel):
    """Body of a toggle call.

    ``currentState`` is the read flag the caller last saw; the new value is its
    negation. Leaving it out flips the stored flag in a single statement.
    """
    current_state: Optional[StrictBool] = Field(default=None, alias="currentState")
    model_config = ConfigDict(populate_by_name=True)


class MutationResult(BaseModel):
    success: bool = True
    affected: int = 0
