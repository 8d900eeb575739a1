"""
Тест скрипта назначения администратора.
"""

from catalog.db.models import Role, User
from scripts import create_admin as script


def test_create_admin_creates_and_promotes(db, session_factory, monkeypatch):
    monkeypatch.setattr(script, "SessionLocal", session_factory)

    admin = script.create_admin("Root", "root@example.com", "pw")

    assert admin.role == Role.ADMIN
    assert db.get(User, admin.id).role == Role.ADMIN


def test_create_admin_promotes_existing_user(db, session_factory, monkeypatch):
    monkeypatch.setattr(script, "SessionLocal", session_factory)
    first = script.create_admin("Root", "root@example.com", "pw")

    again = script.create_admin("Other", "root@example.com", "ignored")

    assert again.id == first.id
    assert db.query(User).count() == 1
