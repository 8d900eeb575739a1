"""
Тесты сервиса товаров: привязка к категории, уникальность (имя, категория)
и частичное обновление.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from catalog.core.errors import Conflict, NotFound, ValidationFailed
from catalog.db.models import Base
from catalog.services import policies
from catalog.services.categories import category_service
from catalog.services.products import product_service


@pytest.fixture()
def drinks(db):
    return category_service.create(db, {"name": "Drinks", "description": "Cold drinks"})


@pytest.fixture()
def food(db):
    return category_service.create(db, {"name": "Food", "description": "Snacks"})


def _payload(category_id, name="Cola", **extra):
    data = {"name": name, "description": "Soda", "price": 1.5, "category_id": category_id}
    data.update(extra)
    return data


def test_create_product(db, drinks):
    view = product_service.create(db, _payload(drinks.id, stock=10, image_url="cola.png"))

    assert view.name == "Cola"
    assert view.price == 1.5
    assert view.stock == 10
    assert view.category_id == drinks.id
    assert view.category_name == "Drinks"
    assert view.deleted is False


def test_stock_is_optional(db, drinks):
    assert product_service.create(db, _payload(drinks.id)).stock is None


def test_missing_category_is_not_found(db):
    with pytest.raises(NotFound) as exc:
        product_service.create(db, _payload(999))
    assert exc.value.reason == "Category does not exist"


def test_deleted_category_rejects_new_products(db, drinks):
    category_service.delete(db, drinks.id)
    with pytest.raises(Conflict) as exc:
        product_service.create(db, _payload(drinks.id, name="Juice"))
    assert exc.value.reason == "Cannot attach a product to a deleted category"


def test_same_name_in_same_category_conflicts(db, drinks):
    product_service.create(db, _payload(drinks.id))
    with pytest.raises(Conflict) as exc:
        product_service.create(db, _payload(drinks.id))
    assert exc.value.reason == "A product with this name already exists in this category"


def test_same_name_in_different_categories_is_allowed(db, drinks, food):
    first = product_service.create(db, _payload(drinks.id))
    second = product_service.create(db, _payload(food.id))
    assert first.id != second.id


def test_duplicate_check_includes_deleted_products(db, drinks):
    cola = product_service.create(db, _payload(drinks.id))
    product_service.delete(db, cola.id)
    with pytest.raises(Conflict):
        product_service.create(db, _payload(drinks.id))


@pytest.mark.parametrize(
    "override",
    [{"price": None}, {"price": -1}, {"stock": -5}, {"name": " "}, {"category_id": None}],
)
def test_invalid_input_fails_validation(db, drinks, override):
    data = _payload(drinks.id)
    data.update(override)
    with pytest.raises(ValidationFailed):
        product_service.create(db, data)


def test_update_changes_only_given_field(db, drinks):
    cola = product_service.create(db, _payload(drinks.id, stock=3))
    view = product_service.update(db, cola.id, {"price": 2.0, "name": "", "stock": None})
    assert (view.name, view.price, view.stock) == ("Cola", 2.0, 3)


def test_update_with_blank_fields_is_a_no_op(db, drinks):
    cola = product_service.create(db, _payload(drinks.id, stock=3, image_url="c.png"))
    view = product_service.update(db, cola.id, {"name": "  ", "description": "", "image_url": ""})
    assert view == cola


def test_update_to_existing_name_in_category_conflicts(db, drinks):
    product_service.create(db, _payload(drinks.id, name="Cola"))
    water = product_service.create(db, _payload(drinks.id, name="Water"))
    with pytest.raises(Conflict):
        product_service.update(db, water.id, {"name": "Cola"})
    assert product_service.get(db, water.id).name == "Water"


def test_update_moves_product_to_another_category(db, drinks, food):
    cola = product_service.create(db, _payload(drinks.id))
    view = product_service.update(db, cola.id, {"category_id": food.id})
    assert view.category_id == food.id
    assert view.category_name == "Food"


def test_move_into_category_with_same_name_conflicts(db, drinks, food):
    product_service.create(db, _payload(food.id))
    cola = product_service.create(db, _payload(drinks.id))
    with pytest.raises(Conflict):
        product_service.update(db, cola.id, {"category_id": food.id})


def test_move_into_missing_category_is_not_found(db, drinks):
    cola = product_service.create(db, _payload(drinks.id))
    with pytest.raises(NotFound):
        product_service.update(db, cola.id, {"category_id": 999})


def test_move_into_deleted_category_conflicts(db, drinks, food):
    cola = product_service.create(db, _payload(drinks.id))
    category_service.delete(db, food.id)
    with pytest.raises(Conflict):
        product_service.update(db, cola.id, {"category_id": food.id})


def test_update_in_deleted_category_conflicts(db, drinks):
    cola = product_service.create(db, _payload(drinks.id))
    category_service.delete(db, drinks.id)
    with pytest.raises(Conflict) as exc:
        product_service.update(db, cola.id, {"price": 3.0})
    assert exc.value.reason == "Category is deleted"


def test_reactivate_product_after_cascade(db, drinks):
    cola = product_service.create(db, _payload(drinks.id))
    category_service.delete(db, drinks.id)
    category_service.reactivate(db, drinks.id)

    view = product_service.reactivate(db, cola.id)

    assert view.deleted is False
    assert [p.name for p in product_service.list_active(db)] == ["Cola"]


def test_global_listings(db, drinks, food):
    cola = product_service.create(db, _payload(drinks.id, name="Cola"))
    product_service.create(db, _payload(food.id, name="Bread"))
    product_service.delete(db, cola.id)

    assert [p.name for p in product_service.list_all(db)] == ["Cola", "Bread"]
    assert [p.name for p in product_service.list_active(db)] == ["Bread"]
    assert [p.name for p in product_service.list_deleted(db)] == ["Cola"]


# ==================== ПАРАЛЛЕЛЬНОЕ УДАЛЕНИЕ КАТЕГОРИИ ====================


@pytest.fixture()
def file_sessions(tmp_path):
    """Файловая SQLite: две сессии работают через разные соединения."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'catalog.db'}",
        connect_args={"check_same_thread": False},
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, expire_on_commit=False, future=True)
    engine.dispose()


def _delete_category_after_check(monkeypatch, file_sessions, category_id):
    """Удаляет категорию из другой сессии сразу после ее первой проверки."""
    check = policies.require_active_category
    fired = []

    def check_then_delete(category, *args, **kwargs):
        result = check(category, *args, **kwargs)
        if category.id == category_id and not fired:
            fired.append(category_id)
            other = file_sessions()
            try:
                category_service.delete(other, category_id)
            finally:
                other.close()
        return result

    monkeypatch.setattr(policies, "require_active_category", check_then_delete)
    return fired


def test_category_deleted_during_create_rejects_product(file_sessions, monkeypatch):
    setup = file_sessions()
    drinks = category_service.create(setup, {"name": "Drinks", "description": "Cold"})
    setup.close()
    fired = _delete_category_after_check(monkeypatch, file_sessions, drinks.id)

    session = file_sessions()
    try:
        with pytest.raises(Conflict):
            product_service.create(session, _payload(drinks.id))
    finally:
        session.close()

    assert fired == [drinks.id]
    check = file_sessions()
    try:
        assert category_service.engine.get_by_id(check, drinks.id).deleted is True
        assert product_service.list_active(check) == []
    finally:
        check.close()


def test_category_deleted_during_move_rejects_update(file_sessions, monkeypatch):
    setup = file_sessions()
    drinks = category_service.create(setup, {"name": "Drinks", "description": "Cold"})
    food = category_service.create(setup, {"name": "Food", "description": "Snacks"})
    bread = product_service.create(setup, _payload(food.id, name="Bread"))
    setup.close()
    fired = _delete_category_after_check(monkeypatch, file_sessions, drinks.id)

    session = file_sessions()
    try:
        with pytest.raises(Conflict):
            product_service.update(session, bread.id, {"category_id": drinks.id})
    finally:
        session.close()

    assert fired == [drinks.id]
    check = file_sessions()
    try:
        view = product_service.get(check, bread.id)
        assert (view.category_id, view.deleted) == (food.id, False)
    finally:
        check.close()
