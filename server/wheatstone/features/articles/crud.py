from typing import Optional
from sqlalchemy.orm import Session
from .models import Article
from .schemas import ArticleStatus
import logging

logger = logging.getLogger(__name__)


class ArticleCRUD:
    """Чтение опубликованных статей"""

    def __init__(self, db: Session):
        self.db = db

    def _published(self):
        return self.db.query(Article).filter(
            Article.status == ArticleStatus.PUBLISHED.value
        )

    @staticmethod
    def _newest_first():
        # Сначала по дате публикации, при равенстве - по дате создания
        return (
            Article.published_at.desc().nulls_last(),
            Article.created_at.desc().nulls_last(),
            Article.id.desc(),
        )

    def get_latest_published(self) -> Optional[Article]:
        """Получить последнюю опубликованную статью"""
        return self._published().order_by(*self._newest_first()).first()

    def list_published(self, skip: int = 0, limit: int = 20) -> list[Article]:
        """Получить опубликованные статьи, новые первыми"""
        return (
            self._published()
            .order_by(*self._newest_first())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_published_by_slug(self, slug: str) -> Optional[Article]:
        """Получить опубликованную статью по slug"""
        return self._published().filter(Article.slug == slug).first()

    def count_published(self) -> int:
        """Количество опубликованных статей"""
        return self._published().count()


def get_article_crud(db: Session) -> ArticleCRUD:
    return ArticleCRUD(db)


def get_latest_article(db: Session) -> Optional[Article]:
    """
    Последняя опубликованная статья или None, если опубликованных нет.
    Ошибки БД не перехватываются.
    """
    article = ArticleCRUD(db).get_latest_published()
    if article is None:
        logger.debug("Опубликованных статей нет")
    return article
