"""Category API endpoints"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from content_tree.core.security import Principal, get_principal
from content_tree.models.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryListResponse,
)
from content_tree.models.path import AncestorChainResponse
from content_tree.services.category import CategoryService
from content_tree.services.path import PathResolver
from content_tree.services.service_factory import (
    get_category_service,
    get_path_resolver,
)


router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("/", response_model=CategoryListResponse)
async def list_categories(
    parent_id: Optional[str] = Query(
        None, description="Parent category ID; omit for root categories"
    ),
    principal: Optional[Principal] = Depends(get_principal),
    service: CategoryService = Depends(get_category_service),
):
    """List the direct children of a category"""
    categories = await service.list_categories(
        parent_id=parent_id, authenticated=principal is not None
    )
    return CategoryListResponse(success=True, data=categories, total=len(categories))


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    service: CategoryService = Depends(get_category_service),
):
    """Get a category by ID"""
    category = await service.get_category(
        category_id, authenticated=principal is not None
    )
    return CategoryResponse(success=True, data=category)


@router.get("/{category_id}/ancestors", response_model=AncestorChainResponse)
async def get_ancestor_chain(
    category_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    resolver: PathResolver = Depends(get_path_resolver),
):
    """Category and its visible ancestors, nearest first"""
    chain = await resolver.resolve_ancestor_chain(
        category_id, authenticated=principal is not None
    )
    return AncestorChainResponse(success=True, data=chain)


@router.post("/", response_model=CategoryResponse, status_code=201)
async def create_category(
    category_data: CategoryCreate,
    principal: Optional[Principal] = Depends(get_principal),
    service: CategoryService = Depends(get_category_service),
):
    """Create a new category"""
    category = await service.create_category(category_data, principal)
    return CategoryResponse(success=True, data=category)


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    update_data: CategoryUpdate,
    principal: Optional[Principal] = Depends(get_principal),
    service: CategoryService = Depends(get_category_service),
):
    """Update the provided fields of a category"""
    category = await service.update_category(category_id, update_data, principal)
    return CategoryResponse(success=True, data=category)


@router.delete("/{category_id}", response_model=CategoryResponse)
async def delete_category(
    category_id: str,
    principal: Optional[Principal] = Depends(get_principal),
    service: CategoryService = Depends(get_category_service),
):
    """Delete a category together with its subtree and their content"""
    category = await service.delete_category(category_id, principal)
    return CategoryResponse(success=True, data=category)
