import pytest
import os
from datetime import datetime, timedelta

# Тестовая БД задается до импорта приложения
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient
from PIL import Image

# Импорты из приложения
from wheatstone.core.database import Base, get_db
from wheatstone.features.articles.models import Article
from wheatstone.features.articles.schemas import ArticleStatus
from main import app

# Настройка тестовой базы данных
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Переопределяем зависимость get_db для тестов"""
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


# Подменяем зависимость
app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def db_session():
    """Фикстура для создания тестовой сессии БД"""
    # Очищаем и создаем таблицы заново
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()

    yield session

    # Очищаем после теста
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Фикстура для тестового клиента FastAPI"""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def base_time():
    """Точка отсчета для дат публикации"""
    return datetime(2025, 6, 1, 12, 0, 0)


def make_article(db_session, slug, status, **kwargs):
    """Создать статью напрямую в БД"""
    kwargs.setdefault("title", slug.replace("-", " ").title())
    article = Article(
        slug=slug,
        status=status.value if isinstance(status, ArticleStatus) else status,
        **kwargs
    )
    db_session.add(article)
    db_session.commit()
    db_session.refresh(article)
    return article


@pytest.fixture
def article_factory(db_session):
    """Фабрика статей для отдельных тестов"""
    def _make(slug, status, **kwargs):
        return make_article(db_session, slug, status, **kwargs)
    return _make


@pytest.fixture
def mixed_articles(db_session, base_time):
    """
    Статьи во всех статусах. Самая свежая дата публикации
    у черновика, среди опубликованных последняя - "fresh-harvest".
    """
    return {
        "old": make_article(
            db_session, "old-mill", ArticleStatus.PUBLISHED,
            published_at=base_time - timedelta(days=10),
            created_at=base_time - timedelta(days=11),
        ),
        "fresh": make_article(
            db_session, "fresh-harvest", ArticleStatus.PUBLISHED,
            published_at=base_time,
            created_at=base_time - timedelta(days=1),
            excerpt="Урожай этого года",
            content="<p>Текст статьи</p>",
        ),
        "draft": make_article(
            db_session, "draft-with-date", ArticleStatus.DRAFT,
            published_at=base_time + timedelta(days=5),
            created_at=base_time + timedelta(days=5),
        ),
        "review": make_article(
            db_session, "in-review", ArticleStatus.REVIEW,
            published_at=base_time + timedelta(days=3),
        ),
        "archived": make_article(
            db_session, "archived-story", ArticleStatus.ARCHIVED,
            published_at=base_time + timedelta(days=7),
        ),
    }


@pytest.fixture
def logo_png(tmp_path):
    """PNG 100x60 с прозрачными полями и непрозрачным блоком 40x20 в (10, 30)"""
    image = Image.new("RGBA", (100, 60), (0, 0, 0, 0))
    block = Image.new("RGBA", (40, 20), (200, 120, 30, 255))
    image.paste(block, (10, 30))
    # Полупрозрачный ореол ниже порога обрезки
    image.putpixel((80, 5), (255, 255, 255, 5))
    path = tmp_path / "logo.png"
    image.save(path)
    return path
