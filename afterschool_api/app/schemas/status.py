"""Response models for the banner and health endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class StatusBanner(BaseModel):
    message: str
    timestamp: datetime
    status: str = "running"
    database: str


class HealthStatus(BaseModel):
    status: str
    database: str
    timestamp: datetime
    error: Optional[str] = None

    @property
    def healthy(self) -> bool:
        return self.status == "healthy"
