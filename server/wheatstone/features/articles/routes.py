from fastapi import APIRouter, Depends, HTTPException, status, Response, Query
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import List
import logging

from ...core.config import settings
from ...core.database import get_db
from .schemas import ArticleResponse, ArticleListItem
from .crud import ArticleCRUD, get_latest_article

# Настройка логирования для routes
logger = logging.getLogger(__name__)

# Создаем роутер для статей
article_router = APIRouter(prefix="/api/articles", tags=["articles"])

# Публичные ответы всегда вычисляются на запрос
NO_STORE = {"Cache-Control": "no-store"}


# === СТАТЬИ ===

@article_router.get("", response_model=List[ArticleListItem])
async def list_articles(
    response: Response,
    skip: int = Query(0, ge=0),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    db: Session = Depends(get_db)
):
    """
    Список опубликованных статей, новые первыми.
    """
    response.headers.update(NO_STORE)
    limit = settings.clamp_page_size(limit)
    try:
        articles = ArticleCRUD(db).list_published(skip=skip, limit=limit)
        logger.info(f"API: Получено статей: {len(articles)}")
        return articles
    except SQLAlchemyError as e:
        logger.error(f"API: Ошибка базы данных при получении статей: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка базы данных",
            headers=NO_STORE
        )


@article_router.get("/latest", response_model=ArticleResponse)
async def latest_article(
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Последняя опубликованная статья.
    """
    response.headers.update(NO_STORE)
    try:
        article = get_latest_article(db)
    except SQLAlchemyError as e:
        logger.error(
            f"API: Ошибка базы данных при получении последней статьи: {str(e)}"
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка базы данных",
            headers=NO_STORE
        )

    if article is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Опубликованных статей нет",
            headers=NO_STORE
        )
    return article


@article_router.get("/{slug}", response_model=ArticleResponse)
async def get_article(
    slug: str,
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Опубликованная статья по slug.
    """
    response.headers.update(NO_STORE)
    try:
        article = ArticleCRUD(db).get_published_by_slug(slug)
        if not article:
            logger.warning(f"API: Статья не найдена: slug={slug}")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Статья {slug} не найдена",
                headers=NO_STORE
            )
        return article

    except HTTPException:
        raise
    except SQLAlchemyError as e:
        logger.error(
            f"API: Ошибка базы данных при получении статьи: {str(e)}"
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Ошибка базы данных",
            headers=NO_STORE
        )
