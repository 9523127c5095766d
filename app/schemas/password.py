"""Schémas Pydantic pour l'évaluation de la robustesse des mots de passe."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PasswordStrength(BaseModel):
    """Résultat du scoring d'un mot de passe."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100, description="Score de robustesse (0-100)")
    feedback: list[str] = Field(
        default_factory=list, description="Suggestions d'amélioration, dans l'ordre des critères"
    )
    is_valid: bool = Field(..., description="score >= 60 et longueur >= 8")


class StrengthLevel(BaseModel):
    """Libellé et couleur de la jauge de robustesse."""

    model_config = ConfigDict(frozen=True)

    label: Literal["Very Weak", "Weak", "Good", "Strong"]
    color: Literal["red", "yellow", "blue", "green"]


class PasswordStrengthRequest(BaseModel):
    """Requête d'évaluation d'un mot de passe."""

    password: str = Field(..., description="Mot de passe candidat (jamais journalisé)")


class PasswordStrengthResponse(PasswordStrength):
    """Score, suggestions et niveau de présentation."""

    level: StrengthLevel
