"""
Каскад мягкого удаления категория -> товары.

Регистрируется только для категорий как хук после удаления. Каскад
односторонний и одноуровневый: реактивация категории товары не
восстанавливает.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from catalog.db.models import Category, Product

logger = logging.getLogger(__name__)


def cascade_delete_products(db: Session, category: Category) -> int:
    """
    Пометить удаленными все товары категории.

    Args:
        db: Сессия базы данных (транзакция удаления категории)
        category: Удаляемая категория

    Returns:
        int: Количество затронутых товаров
    """
    products = db.scalars(
        select(Product).where(Product.category_id == category.id).order_by(Product.id)
    ).all()
    for product in products:
        product.deleted = True
    logger.info(f"Category {category.id}: cascaded delete to {len(products)} products")
    return len(products)
