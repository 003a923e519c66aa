"""Content item models"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from content_tree.models.base import PatchModel

CONTENT_NAME_MAX_LENGTH = 16


class ContentBase(BaseModel):
    """Base content model"""

    name: str = Field(..., min_length=1, max_length=CONTENT_NAME_MAX_LENGTH)
    image: str = ""
    keywords: List[str]
    enabled: bool
    category_id: Optional[str] = None
    checklist: List[str] = Field(default_factory=list)
    description: str = ""
    video: str = ""


class ContentCreate(ContentBase):
    """Model for creating content items"""

    pass


class ContentUpdate(PatchModel):
    """Model for updating content items; category_id is not patchable"""

    name: Optional[str] = Field(None, min_length=1, max_length=CONTENT_NAME_MAX_LENGTH)
    image: Optional[str] = None
    keywords: Optional[List[str]] = None
    enabled: Optional[bool] = None
    checklist: Optional[List[str]] = None
    description: Optional[str] = None
    video: Optional[str] = None


class Content(ContentBase):
    """Complete content model with metadata"""

    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ContentResponse(BaseModel):
    success: bool
    data: Content


class ContentListResponse(BaseModel):
    success: bool
    data: list[Content]
    total: int
