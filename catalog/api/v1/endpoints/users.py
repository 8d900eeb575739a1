"""
API endpoints для работы с пользователями.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from catalog.db.database import get_db
from catalog.schemas.common import ErrorOut, MessageOut
from catalog.schemas.user import UserCreate, UserLogin, UserOut, UserUpdate
from catalog.services.users import user_service

router = APIRouter(
    responses={
        404: {"model": ErrorOut},
        409: {"model": ErrorOut},
    }
)


@router.get("", response_model=List[UserOut])
def list_users(db: Session = Depends(get_db)):
    return user_service.list_all(db)


@router.get("/active", response_model=List[UserOut])
def list_active_users(db: Session = Depends(get_db)):
    return user_service.list_active(db)


@router.get("/deleted", response_model=List[UserOut])
def list_deleted_users(db: Session = Depends(get_db)):
    return user_service.list_deleted(db)


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return user_service.get(db, user_id)


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    """
    Зарегистрировать пользователя с ролью CLIENT.

    Raises:
        Conflict: Email уже зарегистрирован
    """
    return user_service.create(db, payload)


@router.post("/login", response_model=UserOut, responses={401: {"model": ErrorOut}})
def login(payload: UserLogin, db: Session = Depends(get_db)):
    """
    Вход по email и паролю.

    Args:
        payload: Данные для входа (email, password)
        db: Сессия базы данных

    Returns:
        UserOut: Данные пользователя

    Raises:
        Unauthorized: При неверных учетных данных
    """
    return user_service.login(db, payload.email, payload.password)


@router.put("/{user_id}", response_model=UserOut)
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db)):
    """Частично обновить пользователя (имя, email, пароль)."""
    return user_service.update(db, user_id, payload)


@router.delete("/{user_id}", response_model=MessageOut)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    user_service.delete(db, user_id)
    return {"message": "User marked as deleted"}


@router.patch("/{user_id}/reactivate", response_model=UserOut)
def reactivate_user(user_id: int, db: Session = Depends(get_db)):
    return user_service.reactivate(db, user_id)
