"""Content item API endpoints"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from content_tree.core.security import Principal, get_principal
from content_tree.models.content import (
    ContentCreate,
    ContentUpdate,
    ContentResponse,
    ContentListResponse,
)
from content_tree.services.content import ContentService
from content_tree.services.service_factory import get_content_service


router = APIRouter(prefix="/contents", tags=["contents"])


@router.get("/", response_model=ContentListResponse)
async def list_contents(
    category_id: Optional[str] = Query(
        None, description="Owning category ID; omit for unfiled items"
    ),
    principal: Optional[Principal] = Depends(get_principal),
    service: ContentService = Depends(get_content_service),
):
    """List the items filed under a category"""
    contents = await service.list_contents(
        category_id=category_id, authenticated=principal is not None
    )
    return ContentListResponse(success=True, data=contents, total=len(contents))


@router.get("/{content_id}", response_model=ContentResponse)
async def get_content(
    content_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    service: ContentService = Depends(get_content_service),
):
    content = await service.get_content(content_id, authenticated=principal is not None)
    return ContentResponse(success=True, data=content)


@router.post("/", response_model=ContentResponse, status_code=201)
async def create_content(
    content_data: ContentCreate,
    principal: Optional[Principal] = Depends(get_principal),
    service: ContentService = Depends(get_content_service),
):
    """Create a new content item"""
    content = await service.create_content(content_data, principal)
    return ContentResponse(success=True, data=content)


@router.patch("/{content_id}", response_model=ContentResponse)
async def update_content(
    content_id: str,
    update_data: ContentUpdate,
    principal: Optional[Principal] = Depends(get_principal),
    service: ContentService = Depends(get_content_service),
):
    content = await service.update_content(content_id, update_data, principal)
    return ContentResponse(success=True, data=content)


@router.delete("/{content_id}", response_model=ContentResponse)
async def delete_content(
    content_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    service: ContentService = Depends(get_content_service),
):
    content = await service.delete_content(content_id, principal)
    return ContentResponse(success=True, data=content)
