"""
Pydantic схемы товаров.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from catalog.schemas.common import NonBlankStr


class ProductCreate(BaseModel):
    """Схема для создания товара."""

    name: NonBlankStr = Field(..., max_length=255, description="Название товара")
    description: NonBlankStr = Field(..., description="Описание товара")
    price: float = Field(..., ge=0, description="Цена")
    stock: Optional[int] = Field(None, ge=0, description="Остаток на складе")
    image_url: Optional[str] = Field(None, description="URL изображения")
    category_id: int = Field(..., description="ID категории")


class ProductUpdate(BaseModel):
    """Схема для частичного обновления товара."""

    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    image_url: Optional[str] = None
    category_id: Optional[int] = None


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    price: float
    stock: Optional[int] = None
    image_url: Optional[str] = None
    category_id: int
    category_name: Optional[str] = None
    deleted: bool

    @classmethod
    def from_product(cls, product) -> "ProductOut":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
            image_url=product.image_url,
            category_id=product.category_id,
            category_name=product.category.name if product.category else None,
            deleted=product.deleted,
        )
