"""Path resolution models"""

from pydantic import BaseModel
from typing import List, Optional

from content_tree.models.content import Content


class PathRequest(BaseModel):
    """Ordered segment names, root first"""

    path: List[str]


class PathResolution(BaseModel):
    """Category ids along the path, plus the terminal item if the last segment named one"""

    ids: List[str]
    element: Optional[Content] = None


class AncestorEntry(BaseModel):
    id: str
    parent_id: Optional[str] = None
    name: str


class PathResponse(BaseModel):
    success: bool
    data: PathResolution


class AncestorChainResponse(BaseModel):
    success: bool
    data: List[AncestorEntry]
