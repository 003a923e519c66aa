"""Health monitoring service"""

import time
from typing import Dict, Any

from content_tree.core.config import settings
from content_tree.store.base import DocumentStore


class HealthService:
    """Service for monitoring application health"""

    def __init__(self):
        self.start_time = time.time()

    def get_uptime(self) -> int:
        """Get server uptime in seconds"""
        return int(time.time() - self.start_time)

    async def get_health_status(self, store: DocumentStore) -> Dict[str, Any]:
        """Get comprehensive health status"""
        store_up = await store.ping()

        return {
            "status": "healthy" if store_up else "unhealthy",
            "version": "1.0.0",
            "storage_backend": settings.STORAGE_BACKEND,
            "services": {
                "document_store": "up" if store_up else "down",
            },
            "uptime_seconds": self.get_uptime(),
        }


# Global service instance
health_service = HealthService()
