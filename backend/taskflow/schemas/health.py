"""
Pydantic schema for the health check.
"""
from pydantic import BaseModel
from datetime import datetime


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: datetime
    environment: str
