"""
Article repository functions.

Every function issues exactly one statement against the `app_article` table.
Store failures roll the session back and propagate unchanged.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import delete, not_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from reading_list.db import models, schemas

logger = logging.getLogger(__name__)


def create_article(db: Session, article: schemas.ArticleCreate) -> models.Article:
    db_article = models.Article(
        title=article.title,
        url=article.url,
        is_read=False,
    )
    try:
        db.add(db_article)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("article_create_failed: url=%s", article.url)
        raise
    db.refresh(db_article)
    return db_article


def get_articles(db: Session) -> List[models.Article]:
    """All articles, newest first. Unbounded."""
    stmt = select(models.Article).order_by(
        models.Article.created_at.desc(),
        models.Article.id.desc(),
    )
    return list(db.scalars(stmt).all())


def get_article(db: Session, article_id: int) -> Optional[models.Article]:
    return db.get(models.Article, article_id)


def toggle_article_read(db: Session, article_id: int, current_state: Optional[bool] = None) -> int:
    """Set the read flag of one article and return the number of rows touched.

    With ``current_state`` the flag becomes its negation, whatever is stored.
    Without it the store flips the stored value in place. Zero rows is not an error.
    """
    if current_state is None:
        new_value = not_(models.Article.is_read)
    else:
        new_value = not current_state
    stmt = (
        update(models.Article)
        .where(models.Article.id == article_id)
        .values(is_read=new_value)
        .execution_options(synchronize_session=False)
    )
    try:
        result = db.execute(stmt)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("article_toggle_failed: id=%s", article_id)
        raise
    return result.rowcount


def delete_article(db: Session, article_id: int) -> int:
    """Hard delete one article. Deleting a missing id returns 0."""
    stmt = (
        delete(models.Article)
        .where(models.Article.id == article_id)
        .execution_options(synchronize_session=False)
    )
    try:
        result = db.execute(stmt)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("article_delete_failed: id=%s", article_id)
        raise
    return result.rowcount
