"""
Функциональные возможности приложения.

Этот модуль содержит функциональные модули:
- system: проверка здоровья сервиса
- articles: чтение опубликованных статей
- assets: офлайн-подготовка картинок
"""

from .system.routes import system_router
from .articles.routes import article_router

__all__ = [
    "system_router",
    "article_router"
]
