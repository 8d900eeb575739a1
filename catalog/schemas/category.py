"""
Pydantic схемы категорий.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from catalog.schemas.common import NonBlankStr
from catalog.schemas.product import ProductOut


class CategoryCreate(BaseModel):
    """Схема для создания категории."""

    name: NonBlankStr = Field(..., max_length=255, description="Название категории")
    description: NonBlankStr = Field(..., description="Описание категории")
    image_url: Optional[str] = Field(None, description="URL изображения")


class CategoryUpdate(BaseModel):
    """Схема для частичного обновления категории."""

    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    image_url: Optional[str] = None


class CategoryOut(BaseModel):
    """Схема для вывода категории."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    deleted: bool


class CategoryDetailOut(CategoryOut):
    """Категория с вложенным списком товаров."""

    products: List[ProductOut] = []
