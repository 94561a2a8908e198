"""
Product and category schemas.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

PRODUCT_STATUS_PATTERN = r'^(active|inactive|out_of_stock)$'


class ProductCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    price: float = Field(..., ge=0)
    stock: int = Field(..., ge=0)
    status: str = Field('active', pattern=PRODUCT_STATUS_PATTERN)


class ProductUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    status: Optional[str] = Field(None, pattern=PRODUCT_STATUS_PATTERN)


class CategoryCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    icon: Optional[str] = Field(None, max_length=100)
    image: Optional[str] = Field(None, max_length=500)
    is_active: bool = True
    order: Optional[int] = None


class CategoryUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    icon: Optional[str] = Field(None, max_length=100)
    image: Optional[str] = Field(None, max_length=500)
    is_active: Optional[bool] = None
    order: Optional[int] = None


class CategoriesInitRequest(BaseModel):
    """Custom seed list for /categories/init."""
    categories: List[CategoryCreateRequest] = Field(..., min_length=1)
