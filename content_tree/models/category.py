"""Category-related models"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from content_tree.models.base import PatchModel

CATEGORY_NAME_MAX_LENGTH = 32


class CategoryBase(BaseModel):
    """Base category model"""

    name: str = Field(..., min_length=1, max_length=CATEGORY_NAME_MAX_LENGTH)
    image: str = ""
    keywords: List[str]
    enabled: bool
    parent_id: Optional[str] = None


class CategoryCreate(CategoryBase):
    """Model for creating categories"""

    pass


class CategoryUpdate(PatchModel):
    """Model for updating categories; parent_id is not patchable"""

    name: Optional[str] = Field(
        None, min_length=1, max_length=CATEGORY_NAME_MAX_LENGTH
    )
    image: Optional[str] = None
    keywords: Optional[List[str]] = None
    enabled: Optional[bool] = None


class Category(CategoryBase):
    """Complete category model with metadata"""

    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CategoryResponse(BaseModel):
    """Response model for category operations"""

    success: bool
    data: Category


class CategoryListResponse(BaseModel):
    """Response model for listing categories"""

    success: bool
    data: list[Category]
    total: int
