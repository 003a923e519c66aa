"""Path resolution and search endpoints"""

from fastapi import APIRouter, Depends
from typing import Optional

from content_tree.core.security import Principal, get_principal
from content_tree.models.path import PathRequest, PathResponse
from content_tree.models.search import SearchRequest, SearchResponse
from content_tree.services.path import PathResolver
from content_tree.services.search import SearchService
from content_tree.services.service_factory import (
    get_path_resolver,
    get_search_service,
)


router = APIRouter(prefix="/content", tags=["tree"])


@router.post("/path", response_model=PathResponse)
async def resolve_path(
    request: PathRequest,
    principal: Optional[Principal] = Depends(get_principal),
    resolver: PathResolver = Depends(get_path_resolver),
):
    """Convert a path of names into category ids (and a terminal item)"""
    resolution = await resolver.resolve_path(
        request.path, authenticated=principal is not None
    )
    return PathResponse(success=True, data=resolution)


@router.post("/search", response_model=SearchResponse)
async def search(
    request: SearchRequest,
    principal: Optional[Principal] = Depends(get_principal),
    service: SearchService = Depends(get_search_service),
):
    """Search categories and items by name, keywords and description"""
    result = await service.search(
        request.input,
        type_filter=request.type,
        page=request.page,
        limit=request.limit,
        authenticated=principal is not None,
    )
    return SearchResponse(success=True, data=result)
