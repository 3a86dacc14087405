"""
SQLAlchemy models for the reading list store.

Exposes `Base`, `now_utc`, and the ORM classes.
"""

from .base import Base, now_utc  # re-export
from .articles import Article, TITLE_MAX_LENGTH

__all__ = [
    "Base",
    "now_utc",
    "Article",
    "TITLE_MAX_LENGTH",
]
