import os

from wheatstone.core.config import Settings


class TestSettings:
    """Тесты настроек приложения"""

    def test_clamp_page_size(self):
        """Тест ограничения размера страницы списка статей"""
        settings = Settings()
        settings.MAX_PAGE_SIZE = 50

        assert settings.clamp_page_size(10) == 10
        assert settings.clamp_page_size(500) == 50
        assert settings.clamp_page_size(0) == 1

    def test_public_path(self):
        """Тест пути внутри каталога статических файлов"""
        settings = Settings()
        settings.PUBLIC_DIR = "static"

        assert settings.public_path("bbs.png") == os.path.join("static", "bbs.png")

    def test_app_config(self):
        """Тест конфигурации FastAPI приложения"""
        config = Settings().get_app_config()

        assert config["title"] == Settings.APP_NAME
        assert config["version"] == Settings.APP_VERSION
        assert set(config) == {"title", "description", "version", "debug"}
