"""
Системные функции - здоровье приложения.

Этот модуль содержит:
- routes: маршруты проверки здоровья (/api/health, /api/health/ready)
- clock: строго возрастающая метка времени в миллисекундах
"""

from .routes import system_router

__all__ = ["system_router"]
