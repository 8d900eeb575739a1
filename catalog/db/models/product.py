"""
Модель товара.
"""

from typing import Optional

from sqlalchemy import Float, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, SoftDeleteMixin


class Product(SoftDeleteMixin, Base):
    """
    Модель товара.

    Attributes:
        id: Уникальный идентификатор товара
        deleted: Флаг мягкого удаления
        name: Название товара (уникально в пределах категории)
        description: Описание товара
        price: Цена (неотрицательная)
        stock: Остаток на складе (необязательный)
        image_url: URL изображения товара
        category_id: ID категории товара
        category: Связь с категорией
    """

    __tablename__ = "products"

    # Пара (name, category_id) уникальна среди всех товаров, включая удаленные
    __table_args__ = (
        UniqueConstraint("name", "category_id", name="uq_product_name_category"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    stock: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="RESTRICT"), index=True, nullable=False
    )

    category: Mapped["Category"] = relationship(back_populates="products")

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}', category_id={self.category_id})>"
