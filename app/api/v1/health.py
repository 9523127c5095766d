from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.core.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    status: Literal["ok", "error"] = Field(..., description="The status of the health check")
    version: str = Field(..., description="Version du service")


@router.get("/health", tags=["health"], response_model=HealthResponse)
async def health():
    # Service sans état: aucune dépendance externe à vérifier
    return HealthResponse(status="ok", version=settings.VERSION)
