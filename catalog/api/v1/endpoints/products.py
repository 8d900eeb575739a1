"""
API endpoints для работы с товарами.

Содержит списки товаров (все / активные / удаленные), создание,
частичное обновление, мягкое удаление и реактивацию.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from catalog.db.database import get_db
from catalog.schemas.common import ErrorOut, MessageOut
from catalog.schemas.product import ProductCreate, ProductOut, ProductUpdate
from catalog.services.products import product_service

router = APIRouter(
    responses={
        404: {"model": ErrorOut},
        409: {"model": ErrorOut},
    }
)


@router.get("", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    """Получить все товары, отсортированные по id."""
    return product_service.list_all(db)


@router.get("/active", response_model=List[ProductOut])
def list_active_products(db: Session = Depends(get_db)):
    return product_service.list_active(db)


@router.get("/deleted", response_model=List[ProductOut])
def list_deleted_products(db: Session = Depends(get_db)):
    return product_service.list_deleted(db)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    """
    Получить товар по ID.

    Raises:
        NotFound: Если товар не найден
    """
    return product_service.get(db, product_id)


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    """
    Создать товар.

    Args:
        payload: Данные товара (category_id обязателен)
        db: Сессия базы данных

    Returns:
        ProductOut: Созданный товар

    Raises:
        NotFound: Категория не существует
        Conflict: Категория удалена или товар с таким именем в ней уже есть
    """
    return product_service.create(db, payload)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(product_id: int, payload: ProductUpdate, db: Session = Depends(get_db)):
    """Частично обновить товар (в том числе перенести в другую категорию)."""
    return product_service.update(db, product_id, payload)


@router.delete("/{product_id}", response_model=MessageOut)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    product_service.delete(db, product_id)
    return {"message": "Product deleted successfully"}


@router.patch("/{product_id}/reactivate", response_model=ProductOut)
def reactivate_product(product_id: int, db: Session = Depends(get_db)):
    return product_service.reactivate(db, product_id)
