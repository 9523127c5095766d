from fastapi import APIRouter

from app.api.v1 import health
from app.api.v1.endpoints import forms, passwords, payments
from app.schemas import COMMON_RESPONSES

# Router principal avec réponses RFC 9457 par défaut
router = APIRouter(responses=COMMON_RESPONSES)

router.include_router(health.router, tags=["health"])
router.include_router(passwords.router, prefix="/passwords", tags=["passwords"])
router.include_router(payments.router, prefix="/payments", tags=["payments"])
router.include_router(forms.router, prefix="/forms", tags=["forms"])
