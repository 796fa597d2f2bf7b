from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
import logging
import time

# Настройка логирования
logger = logging.getLogger(__name__)


def setup_middleware(app: FastAPI):
    """
    Настройка middleware для приложения
    """
    from .config import settings

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        # 1. Логируем входящий запрос
        start_time = time.time()
        client_host = request.client.host if request.client else "unknown"
        logger.info(f"Входящий запрос: {request.method} {request.url.path} от {client_host}")

        # 2. Передаем запрос дальше и получаем ответ
        response = await call_next(request)

        # 3. Логируем время выполнения и статус ответа
        process_time = time.time() - start_time

        if response.status_code >= 500:
            logger.error(
                f"❌ Запрос {request.method} {request.url.path} завершился с ошибкой | "
                f"Статус: {response.status_code} | Время: {process_time:.4f}s"
            )
        elif response.status_code >= 400:
            logger.warning(
                f"⚠️ Запрос {request.method} {request.url.path} завершился с ошибкой клиента | "
                f"Статус: {response.status_code} | Время: {process_time:.4f}s"
            )
        else:
            logger.info(
                f"✅ Запрос {request.method} {request.url.path} выполнен успешно | "
                f"Статус: {response.status_code} | Время: {process_time:.4f}s"
            )

        return response

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )

    # Trusted hosts middleware
    app.add_middleware(
        TrustedHostMiddleware,
        **settings.get_trusted_hosts_config()
    )


def setup_exception_handlers(app: FastAPI):
    """
    Настройка глобальных обработчиков исключений
    """

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Необработанная ошибка: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Внутренняя ошибка сервера"},
            headers={"Cache-Control": "no-store"}
        )
