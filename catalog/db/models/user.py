"""
Модель пользователя.
"""

import enum

from sqlalchemy import Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, SoftDeleteMixin


class Role(str, enum.Enum):
    """Роль пользователя. При регистрации всегда назначается CLIENT."""

    ADMIN = "ADMIN"
    CLIENT = "CLIENT"


class User(SoftDeleteMixin, Base):
    """Модель пользователя."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), unique=True, index=True, nullable=False
    )
    password: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[Role] = mapped_column(
        Enum(Role, native_enum=False, length=16), default=Role.CLIENT, nullable=False
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name='{self.name}', email='{self.email}')>"
