"""
Конфигурация приложения.

Содержит настройки подключения к БД, проверки паролей, CORS и логирования.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Настройки приложения, загружаемые из переменных окружения.

    Attributes:
        DATABASE_URL: URL подключения к базе данных (любой диалект SQLAlchemy)
        DEBUG: Режим отладки (включает логирование SQL)
        PASSWORD_SCHEMES: Схемы passlib для хранения паролей (через запятую)
        CORS_ORIGINS: Разрешенные источники CORS (через запятую)
        LOG_LEVEL: Уровень логирования
    """

    DATABASE_URL: str = Field(
        default="sqlite:///./catalog.db",
        description="URL подключения к базе данных",
    )
    DEBUG: bool = Field(default=False, description="Режим отладки")

    # Первая схема используется для новых паролей, остальные только для проверки.
    # plaintext: пароль хранится и сравнивается как есть
    PASSWORD_SCHEMES: str = Field(
        default="plaintext",
        description="Схемы passlib для паролей (через запятую)",
    )

    CORS_ORIGINS: str = Field(default="*", description="Разрешенные источники CORS")
    LOG_LEVEL: str = Field(default="INFO", description="Уровень логирования")

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def password_schemes(self) -> List[str]:
        return [s.strip() for s in self.PASSWORD_SCHEMES.split(",") if s.strip()]

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


# Глобальный экземпляр настроек
settings = Settings()
