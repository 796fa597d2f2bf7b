import pytest
from datetime import datetime
from pydantic import ValidationError

from wheatstone.features.articles.schemas import (
    ArticleStatus,
    ArticleListItem,
    ArticleResponse,
    normalize_article_status,
)


class TestNormalizeArticleStatus:
    """Тесты нормализации статуса статьи"""

    @pytest.mark.parametrize("raw,expected", [
        ("PUBLISHED", ArticleStatus.PUBLISHED),
        ("published", ArticleStatus.PUBLISHED),
        ("  review ", ArticleStatus.REVIEW),
        ("Draft", ArticleStatus.DRAFT),
        ("archived", ArticleStatus.ARCHIVED),
    ])
    def test_known_statuses(self, raw, expected):
        assert normalize_article_status(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "deleted", "PUBLISH"])
    def test_unknown_statuses(self, raw):
        assert normalize_article_status(raw) is None


class TestArticleSchemas:
    """Тесты схем ответа API"""

    def test_list_item_normalizes_status(self):
        """Тест: статус в нижнем регистре приводится к enum"""
        item = ArticleListItem(
            id=1, slug="a", title="A", status="published",
            published_at=datetime(2025, 1, 1),
        )

        assert item.status == ArticleStatus.PUBLISHED

    def test_unknown_status_rejected(self):
        """Тест валидационной ошибки на неизвестный статус"""
        with pytest.raises(ValidationError):
            ArticleListItem(id=1, slug="a", title="A", status="deleted")

    def test_response_optional_fields(self):
        """Тест ответа с минимальными данными"""
        response = ArticleResponse(id=1, slug="a", title="A", status=ArticleStatus.DRAFT)

        assert response.content is None
        assert response.excerpt is None
        assert response.published_at is None
