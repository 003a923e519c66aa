"""Search models"""

from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional

from content_tree.models.category import Category
from content_tree.models.content import Content


class EntityKind(str, Enum):
    CATEGORY = "category"
    CONTENT = "content"


class SearchRequest(BaseModel):
    """Free-text search request; limit falls back to the configured default"""

    input: str
    type: Optional[EntityKind] = None
    page: int = Field(default=0, ge=0)
    limit: Optional[int] = Field(default=None, ge=1)


class SearchResult(BaseModel):
    categories: List[Category]
    contents: List[Content]


class SearchResponse(BaseModel):
    success: bool
    data: SearchResult
