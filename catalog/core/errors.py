"""
Доменные исключения каталога.

Сервисный слой поднимает их в момент обнаружения ошибки, HTTP слой
преобразует их в ответ вида {"reason": ..., "statusCode": ...}.
"""

from fastapi import status


class CatalogError(Exception):
    """Базовое исключение с человекочитаемой причиной и HTTP статусом."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def to_dict(self) -> dict:
        return {"reason": self.reason, "statusCode": self.status_code}


class NotFound(CatalogError):
    """Запись (или категория, на которую ссылается товар) не существует."""

    status_code = status.HTTP_404_NOT_FOUND


class Conflict(CatalogError):
    """Дубликат, правка удаленной категории, повторная реактивация и т.п."""

    status_code = status.HTTP_409_CONFLICT


class Unauthorized(CatalogError):
    """Неверные учетные данные."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ValidationFailed(CatalogError):
    """Отсутствуют или пусты обязательные поля, неверный формат email."""

    status_code = status.HTTP_400_BAD_REQUEST
