"""
Проверка уникальности в пределах области.

Категория: имя уникально глобально. Товар: пара (имя, категория).
Пользователь: email уникален глобально. При обновлении собственная
запись исключается из поиска дубликатов. Сравнение точное, с учетом
регистра; удаленные записи тоже учитываются.
"""

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from catalog.core.errors import Conflict
from catalog.db.models import Category, Product, User

CATEGORY_NAME_REGISTERED = "Category name is already registered"
CATEGORY_NAME_IN_USE = "Category name is already in use"
PRODUCT_NAME_IN_CATEGORY = "A product with this name already exists in this category"
EMAIL_REGISTERED = "Email is already registered"
EMAIL_IN_USE = "Email is already in use by another user"


def exists_matching(
    db: Session, model: Any, exclude_id: Optional[int] = None, **criteria: Any
) -> bool:
    """
    Есть ли запись модели, у которой все поля совпадают с criteria.

    Args:
        db: Сессия базы данных
        model: Класс модели
        exclude_id: ID записи, которая не считается дубликатом
        **criteria: Поле -> значение

    Returns:
        bool: True, если найден дубликат
    """
    stmt = select(model.id)
    for name, value in criteria.items():
        stmt = stmt.where(getattr(model, name) == value)
    if exclude_id is not None:
        stmt = stmt.where(model.id != exclude_id)
    return db.scalar(stmt.limit(1)) is not None


def category_name_taken(db: Session, name: str, exclude_id: Optional[int] = None) -> bool:
    return exists_matching(db, Category, exclude_id, name=name)


def product_name_taken(
    db: Session, name: str, category_id: int, exclude_id: Optional[int] = None
) -> bool:
    return exists_matching(db, Product, exclude_id, name=name, category_id=category_id)


def user_email_taken(db: Session, email: str, exclude_id: Optional[int] = None) -> bool:
    return exists_matching(db, User, exclude_id, email=email)


def ensure_unique(taken: bool, message: str) -> None:
    """Поднимает Conflict, если найден дубликат."""
    if taken:
        raise Conflict(message)


# Проверки после применения частичного обновления (собственный id исключен)

def check_category_unique(db: Session, category: Category) -> None:
    ensure_unique(category_name_taken(db, category.name, category.id), CATEGORY_NAME_IN_USE)


def check_product_unique(db: Session, product: Product) -> None:
    ensure_unique(
        product_name_taken(db, product.name, product.category_id, product.id),
        PRODUCT_NAME_IN_CATEGORY,
    )


def check_user_unique(db: Session, user: User) -> None:
    ensure_unique(user_email_taken(db, user.email, user.id), EMAIL_IN_USE)
