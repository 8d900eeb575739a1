"""
Pydantic схемы пользователей.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from catalog.db.models.user import Role

from catalog.schemas.common import EmailText, NonBlankStr, OptionalEmailText


class UserCreate(BaseModel):
    """Схема для регистрации пользователя. Роль не задается клиентом."""

    name: NonBlankStr = Field(..., max_length=255)
    email: EmailText = Field(..., max_length=255)
    password: NonBlankStr


class UserLogin(BaseModel):
    """Схема для входа в систему."""

    email: EmailText = Field(..., description="Email")
    password: NonBlankStr = Field(..., description="Пароль")


class UserUpdate(BaseModel):
    """Схема для частичного обновления пользователя."""

    name: Optional[str] = Field(None, max_length=255)
    email: OptionalEmailText = Field(None, max_length=255)
    password: Optional[str] = None


class UserOut(BaseModel):
    """Схема для вывода пользователя (без пароля)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: Role
    deleted: bool
