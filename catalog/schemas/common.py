"""
Общие схемы ответов и типы полей.
"""

from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel

from catalog.core.errors import ValidationFailed
from catalog.services.policies import validate_email_format


class ErrorOut(BaseModel):
    """Схема ответа с ошибкой."""

    reason: str
    statusCode: int


class MessageOut(BaseModel):
    """Схема ответа с сообщением (например, после удаления)."""

    message: str


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def _email(value: Optional[str]) -> Optional[str]:
    # Пустые строки пропускаются: в частичном обновлении они игнорируются
    if value is None or not value.strip():
        return value
    try:
        validate_email_format(value)
    except ValidationFailed as exc:
        raise ValueError(exc.reason) from exc
    return value


# Обязательная строка, не состоящая из пробелов
NonBlankStr = Annotated[str, AfterValidator(_not_blank)]

# Email хранится как введен, без нормализации регистра
EmailText = Annotated[str, AfterValidator(_not_blank), AfterValidator(_email)]
OptionalEmailText = Annotated[Optional[str], AfterValidator(_email)]
