"""
Сервис пользователей: регистрация, вход и жизненный цикл учетной записи.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from catalog.core.errors import Unauthorized
from catalog.core.security import password_service
from catalog.db.models import Role, User
from catalog.schemas.user import UserOut
from catalog.services import policies, uniqueness
from catalog.services.lifecycle import LifecycleEngine, ResourceKind, as_changes

logger = logging.getLogger(__name__)


def _validate(data: Dict[str, Any]) -> None:
    policies.require_text(data, ("name", "email", "password"))
    policies.validate_email_format(data["email"])


def _build(db: Session, data: Dict[str, Any]) -> User:
    # Роль не задается клиентом
    return User(
        name=data["name"],
        email=data["email"],
        password=password_service.get_password_hash(data["password"]),
        role=Role.CLIENT,
    )


def _guard_update(db: Session, user: User, changes: Dict[str, Any]) -> None:
    email = changes.get("email")
    if email and email.strip():
        policies.validate_email_format(email)

    # Пароль сравнивается через контекст passlib: совпадающий пароль не
    # перезаписывается, новый сохраняется в формате первой схемы
    password = changes.get("password")
    if password and password.strip():
        if password_service.verify_password(password, user.password):
            changes["password"] = None
        else:
            changes["password"] = password_service.get_password_hash(password)


user_kind = ResourceKind(
    label="User",
    model=User,
    build=_build,
    to_view=UserOut.model_validate,
    updatable_fields=("name", "email", "password"),
    conflict_message=uniqueness.EMAIL_IN_USE,
    validate=_validate,
    update_guard=_guard_update,
    check_unique=uniqueness.check_user_unique,
)


class UserService:
    """Операции над пользователями."""

    def __init__(self):
        self.engine = LifecycleEngine(user_kind)

    def list_all(self, db: Session) -> List[UserOut]:
        return self.engine.views(self.engine.list_all(db))

    def list_active(self, db: Session) -> List[UserOut]:
        return self.engine.views(self.engine.list_active(db))

    def list_deleted(self, db: Session) -> List[UserOut]:
        return self.engine.views(self.engine.list_deleted(db))

    def get(self, db: Session, user_id: int) -> UserOut:
        return user_kind.to_view(self.engine.get_by_id(db, user_id))

    def create(self, db: Session, data: Any) -> UserOut:
        email = as_changes(data).get("email")
        return self.engine.create(
            db,
            data,
            exists=lambda s: uniqueness.user_email_taken(s, email),
            conflict_message=uniqueness.EMAIL_REGISTERED,
        )

    def login(self, db: Session, email: str, password: str) -> UserOut:
        """
        Проверка учетных данных.

        Args:
            db: Сессия базы данных
            email: Email (точное совпадение)
            password: Пароль

        Returns:
            UserOut: Данные пользователя

        Raises:
            Unauthorized: Пользователь не найден или пароль неверен
        """
        user = db.scalar(select(User).where(User.email == email))
        try:
            policies.check_credentials(user, password)
        except Unauthorized:
            logger.warning(f"Login failed for {email}")
            raise
        logger.info(f"User {user.id} logged in")
        return user_kind.to_view(user)

    def update(self, db: Session, user_id: int, data: Any) -> UserOut:
        return self.engine.update(db, user_id, data)

    def delete(self, db: Session, user_id: int) -> User:
        return self.engine.delete(db, user_id)

    def reactivate(self, db: Session, user_id: int) -> UserOut:
        return self.engine.reactivate(db, user_id)


# Экспорт сервиса
user_service = UserService()
