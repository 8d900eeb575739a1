"""
Модели базы данных.

Импортирует все модели для корректной работы SQLAlchemy.
"""

from .base import Base, SoftDeleteMixin
from .category import Category
from .product import Product
from .user import Role, User

__all__ = [
    "Base",
    "SoftDeleteMixin",
    "Category",
    "Product",
    "Role",
    "User",
]
