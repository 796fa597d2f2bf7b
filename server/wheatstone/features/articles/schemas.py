"""
Pydantic схемы для статей
"""

from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Optional
from enum import Enum


class ArticleStatus(str, Enum):
    """Статусы жизненного цикла статьи"""
    DRAFT = "DRAFT"
    REVIEW = "REVIEW"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


def normalize_article_status(value: Optional[str]) -> Optional[ArticleStatus]:
    """Привести строку к статусу статьи; None если статус неизвестен"""
    if not value:
        return None
    try:
        return ArticleStatus(value.strip().upper())
    except ValueError:
        return None


class ArticleListItem(BaseModel):
    id: int
    slug: str
    title: str
    excerpt: Optional[str] = None
    cover_url: Optional[str] = None
    status: ArticleStatus
    published_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, v):
        if isinstance(v, ArticleStatus):
            return v
        status = normalize_article_status(v)
        if status is None:
            raise ValueError(f"Неизвестный статус статьи: {v}")
        return status


class ArticleResponse(ArticleListItem):
    content: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
