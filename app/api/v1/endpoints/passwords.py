"""Endpoints API pour l'évaluation de la robustesse des mots de passe."""

from fastapi import APIRouter, status

from app.schemas.password import PasswordStrengthRequest, PasswordStrengthResponse
from app.services import password_strength

router = APIRouter()


@router.post(
    "/strength",
    response_model=PasswordStrengthResponse,
    status_code=status.HTTP_200_OK,
    summary="Évaluer la robustesse d'un mot de passe",
    description="Calcule le score (0-100), les suggestions et le niveau affiché sous la jauge",
)
async def evaluate_password_strength(request: PasswordStrengthRequest) -> PasswordStrengthResponse:
    """
    Évalue un mot de passe candidat.

    Le mot de passe n'est ni stocké ni journalisé.
    """
    strength = password_strength.validate_password(request.password)
    return PasswordStrengthResponse(
        **strength.model_dump(),
        level=password_strength.describe_strength(strength.score),
    )
