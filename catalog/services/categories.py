"""
Сервис категорий.

Связывает универсальный движок с правилами категорий: уникальное имя,
запрет правки удаленной категории и каскад удаления на товары.
"""

from typing import Any, Dict, List

from sqlalchemy.orm import Session

from catalog.db.models import Category
from catalog.schemas.category import CategoryDetailOut, CategoryOut
from catalog.services import policies, uniqueness
from catalog.services.assembler import (
    ProductSelection,
    assemble_categories,
    assemble_category,
)
from catalog.services.cascade import cascade_delete_products
from catalog.services.lifecycle import LifecycleEngine, ResourceKind, as_changes


def _validate(data: Dict[str, Any]) -> None:
    policies.require_text(data, ("name", "description"))


def _build(db: Session, data: Dict[str, Any]) -> Category:
    return Category(
        name=data["name"],
        description=data.get("description"),
        image_url=data.get("image_url"),
    )


def _guard_update(db: Session, category: Category, changes: Dict[str, Any]) -> None:
    policies.ensure_category_editable(category)


category_kind = ResourceKind(
    label="Category",
    model=Category,
    build=_build,
    to_view=CategoryOut.model_validate,
    updatable_fields=("name", "description", "image_url"),
    conflict_message=uniqueness.CATEGORY_NAME_IN_USE,
    validate=_validate,
    update_guard=_guard_update,
    check_unique=uniqueness.check_category_unique,
)

# Только категории каскадируют удаление на товары
category_kind.on_delete(cascade_delete_products)


class CategoryService:
    """Операции над категориями."""

    def __init__(self):
        self.engine = LifecycleEngine(category_kind)

    # Списки категорий всегда содержат все товары категории
    def list_all(self, db: Session) -> List[CategoryDetailOut]:
        return assemble_categories(db, self.engine.list_all(db), ProductSelection.ALL)

    def list_active(self, db: Session) -> List[CategoryDetailOut]:
        return assemble_categories(db, self.engine.list_active(db), ProductSelection.ALL)

    def list_deleted(self, db: Session) -> List[CategoryDetailOut]:
        return assemble_categories(db, self.engine.list_deleted(db), ProductSelection.ALL)

    def get_with_products(
        self, db: Session, category_id: int, selection: ProductSelection
    ) -> CategoryDetailOut:
        """
        Получить категорию с товарами.

        Args:
            db: Сессия базы данных
            category_id: ID категории
            selection: Какие товары включить (все / активные / удаленные)

        Raises:
            NotFound: Если категория не найдена
        """
        category = self.engine.get_by_id(db, category_id)
        return assemble_category(db, category, selection)

    def create(self, db: Session, data: Any) -> CategoryOut:
        name = as_changes(data).get("name")
        return self.engine.create(
            db,
            data,
            exists=lambda s: uniqueness.category_name_taken(s, name),
            conflict_message=uniqueness.CATEGORY_NAME_REGISTERED,
        )

    def update(self, db: Session, category_id: int, data: Any) -> CategoryOut:
        return self.engine.update(db, category_id, data)

    def delete(self, db: Session, category_id: int) -> Category:
        return self.engine.delete(db, category_id)

    def reactivate(self, db: Session, category_id: int) -> CategoryOut:
        return self.engine.reactivate(db, category_id)


# Экспорт сервиса
category_service = CategoryService()
