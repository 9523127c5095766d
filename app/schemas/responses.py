"""
Schémas de réponses OpenAPI pour RFC 9457 Problem Details.

Ce module réexporte les schémas du module fastapi-errors-rfc9457 utilisés
par le router principal.
"""

from fastapi_errors_rfc9457 import (
    COMMON_RESPONSES,
    ProblemDetailResponse,
    ValidationErrorResponse,
)

__all__ = [
    "COMMON_RESPONSES",
    "ProblemDetailResponse",
    "ValidationErrorResponse",
]
