"""
Модель категории товаров.
"""

from typing import List, Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, SoftDeleteMixin


class Category(SoftDeleteMixin, Base):
    """
    Модель категории товаров.

    Attributes:
        id: Уникальный идентификатор категории
        deleted: Флаг мягкого удаления
        name: Название категории (уникально, с учетом регистра)
        description: Описание категории
        image_url: URL изображения категории
        products: Товары категории (по category_id, упорядочены по id)
    """

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Слабая связь: категория не управляет жизнью товаров,
    # удаление только переключает флаг (см. services/cascade.py)
    products: Mapped[List["Product"]] = relationship(
        back_populates="category",
        order_by="Product.id",
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}', deleted={self.deleted})>"
