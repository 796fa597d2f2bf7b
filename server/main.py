from fastapi import FastAPI
from dotenv import load_dotenv
import os

# Загружаем переменные окружения из корневого .env файла
# В Docker переменные окружения уже установлены через docker-compose.yml
env_file = os.path.join(os.path.dirname(__file__), '..', '.env')
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    load_dotenv(override=False)

from wheatstone.core.config import settings
from wheatstone.core.middleware import setup_middleware, setup_exception_handlers
from wheatstone.core.database import init_db
from wheatstone.features.system.routes import system_router
from wheatstone.features.articles.routes import article_router

# Импортируем модели для создания таблиц
from wheatstone.features.articles.models import Article

# Создаем FastAPI приложение с настройками из config
app = FastAPI(**settings.get_app_config())

# Инициализируем базу данных ПОСЛЕ импорта всех моделей
init_db()

# Настраиваем middleware
setup_middleware(app)

# Настраиваем обработчики исключений
setup_exception_handlers(app)

# Подключаем роутеры
app.include_router(system_router)
app.include_router(article_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
