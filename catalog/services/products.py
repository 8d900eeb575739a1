"""
Сервис товаров.

Товар всегда привязан к существующей активной категории, пара
(имя, категория) уникальна.
"""

from typing import Any, Dict, List

from sqlalchemy.orm import Session

from catalog.core.errors import ValidationFailed
from catalog.db.models import Product
from catalog.schemas.product import ProductOut
from catalog.services import policies, uniqueness
from catalog.services.lifecycle import LifecycleEngine, ResourceKind, as_changes


def _validate(data: Dict[str, Any]) -> None:
    policies.require_text(data, ("name", "description"))
    policies.require_non_negative(data, "price", required=True)
    policies.require_non_negative(data, "stock")
    if data.get("category_id") is None:
        raise ValidationFailed("Field 'category_id' is required")


def _build(db: Session, data: Dict[str, Any]) -> Product:
    category = policies.require_existing_category(db, data["category_id"])
    policies.require_active_category(category)
    return Product(
        name=data["name"],
        description=data.get("description"),
        price=data["price"],
        stock=data.get("stock"),
        image_url=data.get("image_url"),
        category=category,
    )


def _guard_update(db: Session, product: Product, changes: Dict[str, Any]) -> None:
    """
    Правила обновления товара.

    Текущая категория товара должна быть активной. Если передана новая
    категория, она должна существовать и быть активной.
    """
    current = policies.require_existing_category(db, product.category_id)
    policies.require_active_category(current, policies.CATEGORY_DELETED)
    target_id = changes.get("category_id")
    if target_id is not None and target_id != product.category_id:
        target = policies.require_existing_category(db, target_id)
        policies.require_active_category(target)
    policies.require_non_negative(changes, "price")
    policies.require_non_negative(changes, "stock")


def _confirm_category(db: Session, product: Product) -> None:
    # Категория перечитывается после записи товара: удаление, успевшее
    # зафиксироваться после первой проверки, отклоняет всю операцию
    category = policies.require_existing_category(db, product.category_id)
    policies.require_active_category(category)


product_kind = ResourceKind(
    label="Product",
    model=Product,
    build=_build,
    to_view=ProductOut.from_product,
    updatable_fields=("name", "description", "price", "stock", "image_url", "category_id"),
    conflict_message=uniqueness.PRODUCT_NAME_IN_CATEGORY,
    validate=_validate,
    update_guard=_guard_update,
    check_unique=uniqueness.check_product_unique,
    after_write=_confirm_category,
)


class ProductService:
    """Операции над товарами."""

    def __init__(self):
        self.engine = LifecycleEngine(product_kind)

    def list_all(self, db: Session) -> List[ProductOut]:
        return self.engine.views(self.engine.list_all(db))

    def list_active(self, db: Session) -> List[ProductOut]:
        return self.engine.views(self.engine.list_active(db))

    def list_deleted(self, db: Session) -> List[ProductOut]:
        return self.engine.views(self.engine.list_deleted(db))

    def get(self, db: Session, product_id: int) -> ProductOut:
        return product_kind.to_view(self.engine.get_by_id(db, product_id))

    def create(self, db: Session, data: Any) -> ProductOut:
        """
        Создать товар в категории.

        Raises:
            Conflict: Дубликат имени в категории или категория удалена
            NotFound: Категория не существует
        """
        changes = as_changes(data)
        return self.engine.create(
            db,
            changes,
            exists=lambda s: uniqueness.product_name_taken(
                s, changes.get("name"), changes.get("category_id")
            ),
            conflict_message=uniqueness.PRODUCT_NAME_IN_CATEGORY,
        )

    def update(self, db: Session, product_id: int, data: Any) -> ProductOut:
        return self.engine.update(db, product_id, data)

    def delete(self, db: Session, product_id: int) -> Product:
        return self.engine.delete(db, product_id)

    def reactivate(self, db: Session, product_id: int) -> ProductOut:
        return self.engine.reactivate(db, product_id)


# Экспорт сервиса
product_service = ProductService()
