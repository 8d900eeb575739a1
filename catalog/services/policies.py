"""
Правила конкретных видов ресурсов поверх универсального движка.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.orm import Session

from catalog.core.errors import Conflict, NotFound, Unauthorized, ValidationFailed
from catalog.core.security import password_service
from catalog.db.models import Category, User

logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND = "Category does not exist"
CATEGORY_DELETED = "Category is deleted"
CATEGORY_DELETED_FOR_PRODUCT = "Cannot attach a product to a deleted category"
INVALID_CREDENTIALS = "Invalid credentials"


# ==================== ВХОДНЫЕ ДАННЫЕ ====================


def require_text(data: Mapping[str, Any], fields: Sequence[str]) -> None:
    """
    Проверка обязательных строковых полей.

    Raises:
        ValidationFailed: Поле отсутствует или состоит из пробелов
    """
    for name in fields:
        value = data.get(name)
        if value is None or not str(value).strip():
            raise ValidationFailed(f"Field '{name}' must not be blank")


def require_non_negative(data: Mapping[str, Any], name: str, required: bool = False) -> None:
    value = data.get(name)
    if value is None:
        if required:
            raise ValidationFailed(f"Field '{name}' is required")
        return
    if value < 0:
        raise ValidationFailed(f"Field '{name}' must not be negative")


def validate_email_format(email: str) -> None:
    """
    Проверка формата email (без проверки доставляемости).

    Raises:
        ValidationFailed: Неверный формат
    """
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValidationFailed(f"Invalid email format: {exc}") from exc


# ==================== КАТЕГОРИИ ====================


def require_existing_category(db: Session, category_id: Optional[int]) -> Category:
    """
    Категория, на которую ссылается товар, должна существовать.

    Строка категории блокируется до конца транзакции и перечитывается из БД,
    так что удаление категории с каскадом и запись товара не пересекаются.

    Raises:
        NotFound: Категории нет
    """
    category = None
    if category_id is not None:
        category = db.get(
            Category, category_id, with_for_update=True, populate_existing=True
        )
    if category is None:
        raise NotFound(CATEGORY_NOT_FOUND)
    return category


def require_active_category(
    category: Category, reason: str = CATEGORY_DELETED_FOR_PRODUCT
) -> Category:
    """Нельзя привязать товар к удаленной категории."""
    if category.deleted:
        logger.warning(f"Category {category.id} is deleted, product rejected")
        raise Conflict(reason)
    return category


def ensure_category_editable(category: Category) -> None:
    """Удаленную категорию редактировать нельзя."""
    if category.deleted:
        raise Conflict(CATEGORY_DELETED)


# ==================== ПОЛЬЗОВАТЕЛИ ====================


def check_credentials(user: Optional[User], password: str) -> User:
    """
    Проверка email и пароля.

    Отсутствие пользователя и неверный пароль неразличимы для клиента.

    Raises:
        Unauthorized: Неверные учетные данные
    """
    if user is None or not password_service.verify_password(password, user.password):
        raise Unauthorized(INVALID_CREDENTIALS)
    return user
