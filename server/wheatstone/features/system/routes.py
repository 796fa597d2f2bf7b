"""
Системные маршруты для проверки здоровья приложения.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import text

from ...core.database import get_db
from .clock import clock

logger = logging.getLogger(__name__)

system_router = APIRouter(prefix="/api/health", tags=["system"])

# Ответы health-check не должны кэшироваться посредниками
NO_STORE = {"Cache-Control": "no-store"}


@system_router.get("")
async def health_check():
    """
    Liveness probe: сервис отвечает, время вычисляется на каждый запрос.
    """
    return JSONResponse(
        status_code=200,
        content={"ok": True, "ts": clock.now()},
        headers=NO_STORE
    )


@system_router.get("/ready")
async def readiness_check(db: Session = Depends(get_db)):
    """
    Проверка готовности: приложение запущено и БД доступна.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health: БД недоступна: {str(e)}")
        return JSONResponse(
            status_code=503,
            content={
                "ok": False,
                "ts": clock.now(),
                "database": "unavailable"
            },
            headers=NO_STORE
        )

    return JSONResponse(
        status_code=200,
        content={
            "ok": True,
            "ts": clock.now(),
            "database": "connected"
        },
        headers=NO_STORE
    )
