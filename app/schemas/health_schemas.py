# app/schemas/health_schemas.py
from pydantic import BaseModel
from typing import Dict, Optional


class ComponentStatus(BaseModel):
    status: str
    detail: Optional[str] = None
    base: Optional[str] = None
    last_update: Optional[str] = None


class HealthResponse(BaseModel):
    service: str
    version: str
    time: str
    indicator: str
    description: str
    components: Dict[str, ComponentStatus]
