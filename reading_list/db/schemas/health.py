from typing import Optional

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str
    timestamp: str
    database: str
    service: str = "reading-list-service"
    error: Optional[str] = None
