from sqlalchemy import Column, Integer, String, Text, DateTime, Index
from sqlalchemy.sql import func
from ...core.database import Base
from .schemas import ArticleStatus


class Article(Base):
    """Статья сайта. Жизненным циклом управляет редакция, здесь только чтение."""
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String(200), unique=True, index=True, nullable=False)
    title = Column(String(500), nullable=False)
    excerpt = Column(Text, nullable=True)
    content = Column(Text, nullable=True)
    cover_url = Column(String(500), nullable=True)
    status = Column(
        String(20), nullable=False, default=ArticleStatus.DRAFT.value
    )
    published_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        Index("idx_articles_status_published_at", "status", "published_at"),
    )

    def __repr__(self):
        return f"<Article {self.slug} - {self.status}>"
