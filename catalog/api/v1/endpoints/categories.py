"""
API endpoints для работы с категориями товаров.

Списки категорий, категория с вложенными товарами (все / активные /
удаленные), создание, частичное обновление, мягкое удаление и реактивация.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from catalog.db.database import get_db
from catalog.schemas.category import (
    CategoryCreate,
    CategoryDetailOut,
    CategoryOut,
    CategoryUpdate,
)
from catalog.schemas.common import ErrorOut, MessageOut
from catalog.services.assembler import ProductSelection
from catalog.services.categories import category_service

router = APIRouter(
    responses={
        404: {"model": ErrorOut},
        409: {"model": ErrorOut},
    }
)


@router.get("", response_model=List[CategoryDetailOut])
def list_categories(db: Session = Depends(get_db)):
    """
    Получить список всех категорий.

    Каждая категория содержит все свои товары независимо от их состояния.
    Список отсортирован по id.
    """
    return category_service.list_all(db)


@router.get("/active", response_model=List[CategoryDetailOut])
def list_active_categories(db: Session = Depends(get_db)):
    """Получить список активных категорий (с товарами)."""
    return category_service.list_active(db)


@router.get("/deleted", response_model=List[CategoryDetailOut])
def list_deleted_categories(db: Session = Depends(get_db)):
    """Получить список удаленных категорий (с товарами)."""
    return category_service.list_deleted(db)


@router.get("/{category_id}", response_model=CategoryDetailOut)
def get_category(category_id: int, db: Session = Depends(get_db)):
    """
    Получить категорию по ID со всеми товарами.

    Args:
        category_id: ID категории
        db: Сессия базы данных

    Returns:
        CategoryDetailOut: Категория и все ее товары

    Raises:
        NotFound: Если категория не найдена
    """
    return category_service.get_with_products(db, category_id, ProductSelection.ALL)


@router.get("/active/{category_id}", response_model=CategoryDetailOut)
def get_category_active_products(category_id: int, db: Session = Depends(get_db)):
    """Получить категорию по ID только с активными товарами."""
    return category_service.get_with_products(db, category_id, ProductSelection.ACTIVE)


@router.get("/deleted/{category_id}", response_model=CategoryDetailOut)
def get_category_deleted_products(category_id: int, db: Session = Depends(get_db)):
    """Получить категорию по ID только с удаленными товарами."""
    return category_service.get_with_products(db, category_id, ProductSelection.DELETED)


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)):
    """
    Создать категорию.

    Raises:
        Conflict: Категория с таким именем уже существует
    """
    return category_service.create(db, payload)


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(
    category_id: int, payload: CategoryUpdate, db: Session = Depends(get_db)
):
    """
    Частично обновить категорию.

    Пустые и неизмененные поля не трогаются.

    Raises:
        NotFound: Если категория не найдена
        Conflict: Категория удалена или имя уже занято
    """
    return category_service.update(db, category_id, payload)


@router.delete("/{category_id}", response_model=MessageOut)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    """Мягко удалить категорию вместе со всеми ее товарами."""
    category_service.delete(db, category_id)
    return {"message": "Category deleted successfully"}


@router.patch("/{category_id}/reactivate", response_model=CategoryOut)
def reactivate_category(category_id: int, db: Session = Depends(get_db)):
    """Реактивировать категорию. Товары категории остаются удаленными."""
    return category_service.reactivate(db, category_id)
