"""API v1 router"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from content_tree.services.health import health_service
from content_tree.services.service_factory import get_document_store
from content_tree.store.base import DocumentStore
from content_tree.models.health import HealthResponse
from content_tree.api.category_router import router as category_router
from content_tree.api.content_router import router as content_router
from content_tree.api.tree_router import router as tree_router

router = APIRouter()

router.include_router(category_router)
router.include_router(content_router)
router.include_router(tree_router)


# Health Check Endpoint
@router.get("/health", response_model=HealthResponse)
async def health_check(store: DocumentStore = Depends(get_document_store)):
    """Monitor backend health and document store reachability"""
    health_data = await health_service.get_health_status(store)
    status_code = 200 if health_data["status"] == "healthy" else 503

    return JSONResponse(
        status_code=status_code, content={"success": True, "data": health_data}
    )
