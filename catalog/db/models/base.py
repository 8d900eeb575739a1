"""
Базовый класс для всех моделей SQLAlchemy.

Использует новый Declarative API SQLAlchemy 2.0.
"""

from sqlalchemy import Boolean, Integer, false
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Базовый класс для всех моделей.

    Наследуется от DeclarativeBase для использования нового API SQLAlchemy 2.0.
    """
    pass


class SoftDeleteMixin:
    """
    Общие колонки записей с мягким удалением.

    Attributes:
        id: Уникальный идентификатор, назначается при создании
        deleted: Флаг мягкого удаления (запись никогда не удаляется физически)
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    deleted: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default=false(), nullable=False, index=True
    )
