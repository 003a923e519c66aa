"""Health check models"""

from pydantic import BaseModel
from typing import Literal


class ServicesStatus(BaseModel):
    document_store: Literal["up", "down"]


class HealthData(BaseModel):
    status: Literal["healthy", "unhealthy"]
    version: str = "1.0.0"
    storage_backend: str
    services: ServicesStatus
    uptime_seconds: int


class HealthResponse(BaseModel):
    success: bool
    data: HealthData
