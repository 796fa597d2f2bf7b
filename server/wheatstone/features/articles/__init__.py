"""
Статьи сайта (только чтение).

Этот модуль содержит:
- models: модель статьи (SQLAlchemy)
- schemas: статусы и схемы API (Pydantic)
- crud: выборки опубликованных статей, get_latest_article
- routes: маршруты /api/articles, /api/articles/latest, /api/articles/{slug}
"""

from .models import Article
from .schemas import ArticleStatus, normalize_article_status
from .crud import ArticleCRUD, get_article_crud, get_latest_article
from .routes import article_router

__all__ = [
    "Article",
    "ArticleStatus",
    "normalize_article_status",
    "ArticleCRUD",
    "get_article_crud",
    "get_latest_article",
    "article_router"
]
