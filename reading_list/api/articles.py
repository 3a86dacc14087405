"""
Articles API endpoints.

Create, list, toggle-read and delete for reading list articles. Request bodies
are validated and normalized by the schemas before any statement runs.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session

from reading_list.db import crud, schemas
from reading_list.db.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["articles"])


@router.post("/", response_model=schemas.Article, status_code=status.HTTP_201_CREATED)
def create_article_endpoint(
    article: schemas.ArticleCreate,
    db: Session = Depends(get_db),
):
    created = crud.create_article(db=db, article=article)
    logger.info("article_created: id=%s url=%s", created.id, created.url)
    return created


@router.get("/", response_model=List[schemas.Article])
def get_all_articles_endpoint(db: Session = Depends(get_db)):
    return crud.get_articles(db)


@router.get("/{article_id}", response_model=schemas.Article)
def get_article_endpoint(article_id: int, db: Session = Depends(get_db)):
    db_article = crud.get_article(db, article_id=article_id)
    if not db_article:
        raise HTTPException(status_code=404, detail="Article not found")
    return db_article


@router.post("/{article_id}/toggle-read", response_model=schemas.MutationResult)
def toggle_article_read_endpoint(
    article_id: int,
    payload: Optional[schemas.ToggleReadRequest] = Body(default=None),
    db: Session = Depends(get_db),
):
    current_state = payload.current_state if payload else None
    affected = crud.toggle_article_read(db, article_id=article_id, current_state=current_state)
    logger.info("article_toggled: id=%s current_state=%s affected=%s", article_id, current_state, affected)
    return schemas.MutationResult(affected=affected)


@router.delete("/{article_id}", response_model=schemas.MutationResult)
def delete_article_endpoint(article_id: int, db: Session = Depends(get_db)):
    affected = crud.delete_article(db, article_id=article_id)
    logger.info("article_deleted: id=%s affected=%s", article_id, affected)
    return schemas.MutationResult(affected=affected)
