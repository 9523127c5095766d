"""Schemas Pydantic pour validation des donnees."""

from app.schemas.responses import (
    COMMON_RESPONSES,
    ProblemDetailResponse,
    ValidationErrorResponse,
)

__all__ = [
    "COMMON_RESPONSES",
    "ProblemDetailResponse",
    "ValidationErrorResponse",
]
