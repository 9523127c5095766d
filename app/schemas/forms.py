"""Schémas de réponse des endpoints de validation de formulaires."""

from typing import Any

from pydantic import BaseModel, Field


class FormListResponse(BaseModel):
    forms: list[str] = Field(..., description="Noms des formulaires connus, triés")


class FormValidationResponse(BaseModel):
    """Résultat d'une validation réussie: données normalisées (espaces retirés, types convertis)."""

    form: str = Field(..., examples=["symptom-log"])
    valid: bool = True
    data: dict[str, Any]
