#!/usr/bin/env python3
"""
Скрипт для создания администратора каталога.

Через API роль назначить нельзя (всегда CLIENT), поэтому администратор
создается или повышается этим скриптом.
"""

import argparse
import sys
from pathlib import Path

# Добавляем путь к пакету catalog
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import select

from catalog.core.errors import CatalogError
from catalog.db.database import SessionLocal, transaction
from catalog.db.models import Role, User
from catalog.services.users import user_service


def create_admin(name: str, email: str, password: str) -> User:
    """
    Создает пользователя (если его нет) и назначает ему роль ADMIN.

    Args:
        name: Имя администратора
        email: Email (логин)
        password: Пароль

    Returns:
        User: Администратор
    """
    db = SessionLocal()
    try:
        user = db.scalar(select(User).where(User.email == email))
        if user is None:
            print(f"📝 Создаем пользователя {email}...")
            view = user_service.create(
                db, {"name": name, "email": email, "password": password}
            )
            user = db.get(User, view.id)
        else:
            print(f"✅ Пользователь уже существует: ID {user.id}")

        with transaction(db):
            user.role = Role.ADMIN
        return user
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description="Create catalog administrator")
    parser.add_argument("email", help="Email администратора")
    parser.add_argument("password", help="Пароль администратора")
    parser.add_argument("--name", default="Administrator", help="Имя администратора")
    args = parser.parse_args()

    try:
        admin = create_admin(args.name, args.email, args.password)
    except CatalogError as e:
        print(f"❌ Ошибка при создании администратора: {e.reason}")
        sys.exit(1)

    print("🎉 Администратор готов к использованию!")
    print(f"   ID: {admin.id}")
    print(f"   Email: {admin.email}")
    print(f"   Роль: {admin.role.value}")


if __name__ == "__main__":
    main()
