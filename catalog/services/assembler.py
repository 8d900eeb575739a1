"""
Сборка ответа категории с вложенным списком товаров.

Какие товары попадают в ответ (все, активные, удаленные) определяется
одним параметром ProductSelection.
"""

import enum
from typing import List, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from catalog.db.models import Category, Product
from catalog.schemas.category import CategoryDetailOut, CategoryOut
from catalog.schemas.product import ProductOut


class ProductSelection(str, enum.Enum):
    """Какие товары категории включать в ответ."""

    ALL = "all"
    ACTIVE = "active"
    DELETED = "deleted"


def select_products(
    db: Session, category_id: int, selection: ProductSelection
) -> List[Product]:
    """
    Товары категории по возрастанию id с учетом выбора.

    Args:
        db: Сессия базы данных
        category_id: ID категории
        selection: Все / только активные / только удаленные

    Returns:
        List[Product]: Товары категории
    """
    stmt = select(Product).where(Product.category_id == category_id)
    if selection is ProductSelection.ACTIVE:
        stmt = stmt.where(Product.deleted.is_(False))
    elif selection is ProductSelection.DELETED:
        stmt = stmt.where(Product.deleted.is_(True))
    return list(db.scalars(stmt.order_by(Product.id)).all())


def assemble_category(
    db: Session, category: Category, selection: ProductSelection
) -> CategoryDetailOut:
    base = CategoryOut.model_validate(category)
    return CategoryDetailOut(
        **base.model_dump(),
        products=[
            ProductOut.from_product(p)
            for p in select_products(db, category.id, selection)
        ],
    )


def assemble_categories(
    db: Session, categories: Sequence[Category], selection: ProductSelection
) -> List[CategoryDetailOut]:
    """Каждая категория собирается независимо с одним и тем же выбором товаров."""
    return [assemble_category(db, c, selection) for c in categories]
