"""
Работа с паролями пользователей.

Формат хранения задается настройкой PASSWORD_SCHEMES. По умолчанию
используется схема plaintext: пароль хранится как есть и сравнивается
точным совпадением.
"""

from passlib.context import CryptContext

from catalog.core.config import settings

# Настройка хеширования паролей
pwd_context = CryptContext(schemes=settings.password_schemes, deprecated="auto")


class PasswordService:
    """Сервис для хранения и проверки паролей."""

    @staticmethod
    def verify_password(plain_password: str, stored_password: str) -> bool:
        """Проверка пароля."""
        if not plain_password or not stored_password:
            return False
        return pwd_context.verify(plain_password, stored_password)

    @staticmethod
    def get_password_hash(password: str) -> str:
        """Подготовка пароля к сохранению."""
        return pwd_context.hash(password)


# Экспорт сервиса
password_service = PasswordService()
