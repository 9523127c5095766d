"""Endpoints API pour la validation des formulaires du front-end.

Chaque écran soumet son formulaire ici avant d'écrire en base: les règles
de validation sont ainsi partagées entre le web, l'application mobile et
les fonctions serverless.
"""

from typing import Any

from fastapi import APIRouter, Body, Request, status

from app.schemas.forms import FormListResponse, FormValidationResponse
from app.services import form_validation

router = APIRouter()


@router.get(
    "",
    response_model=FormListResponse,
    summary="Lister les formulaires validables",
)
async def list_forms() -> FormListResponse:
    return FormListResponse(forms=form_validation.list_forms())


@router.post(
    "/{form_name}/validate",
    response_model=FormValidationResponse,
    status_code=status.HTTP_200_OK,
    summary="Valider un formulaire",
    description="Valide et normalise les données d'un formulaire (espaces retirés, types convertis)",
)
async def validate_form(
    form_name: str,
    request: Request,
    payload: dict[str, Any] = Body(..., description="Données brutes du formulaire"),
) -> FormValidationResponse:
    """
    Valide un formulaire.

    Erreurs:
    - 404 si le formulaire est inconnu
    - 422 si les données sont invalides (liste `errors`)
    - 422 "Password Too Weak" à l'inscription (extensions `score` et `feedback`)
    """
    validated = form_validation.validate_form(form_name, payload, instance=request.url.path)
    return FormValidationResponse(form=form_name, data=form_validation.to_public_data(validated))
