"""
CRUD operations for ORM models.

Thin facade over the repository modules so API code has a single import.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from . import models, schemas
from .repositories import articles as repo_articles


def create_article(db: Session, article: schemas.ArticleCreate) -> models.Article:
    return repo_articles.create_article(db, article)


def get_articles(db: Session) -> List[models.Article]:
    return repo_articles.get_articles(db)


def get_article(db: Session, article_id: int) -> Optional[models.Article]:
    return repo_articles.get_article(db, article_id)


def toggle_article_read(db: Session, article_id: int, current_state: Optional[bool] = None) -> int:
    return repo_articles.toggle_article_read(db, article_id, current_state)


def delete_article(db: Session, article_id: int) -> int:
    return repo_articles.delete_article(db, article_id)
