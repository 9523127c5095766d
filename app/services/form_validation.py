"""Service de validation des formulaires du front-end.

Chaque formulaire est identifié par un nom kebab-case et associé à un
modèle Pydantic. La validation renvoie les données normalisées ou lève
une exception RFC 9457 exploitable telle quelle par le client.
"""

import logging
from typing import Any

from opentelemetry import trace
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import FormValidationError, UnknownFormError
from app.schemas.auth import LoginForm, PasswordChangeForm, SignupForm
from app.schemas.billing import InsuranceClaimForm, InsuranceForm, PaymentForm
from app.schemas.children import (
    CaregiverMessageForm,
    RehabActivityForm,
    SchoolAccommodationForm,
    SymptomLogForm,
)
from app.schemas.clinical import (
    AppointmentBookingForm,
    AppointmentNotesForm,
    HealthRecordForm,
    PrescriptionForm,
    VitalSignsForm,
)
from app.schemas.community import ForumPostForm, ForumReplyForm
from app.schemas.orders import LabOrderForm, PharmacyOrderForm

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)

FORM_REGISTRY: dict[str, type[BaseModel]] = {
    "login": LoginForm,
    "signup": SignupForm,
    "password-change": PasswordChangeForm,
    "symptom-log": SymptomLogForm,
    "caregiver-message": CaregiverMessageForm,
    "rehab-activity": RehabActivityForm,
    "school-accommodation": SchoolAccommodationForm,
    "appointment-booking": AppointmentBookingForm,
    "appointment-notes": AppointmentNotesForm,
    "health-record": HealthRecordForm,
    "vital-signs": VitalSignsForm,
    "payment": PaymentForm,
    "forum-post": ForumPostForm,
    "forum-reply": ForumReplyForm,
    "prescription": PrescriptionForm,
    "insurance": InsuranceForm,
    "insurance-claim": InsuranceClaimForm,
    "lab-order": LabOrderForm,
    "pharmacy-order": PharmacyOrderForm,
}

# Jamais renvoyés au client ni journalisés
SENSITIVE_FIELDS = frozenset({"password", "confirm_password", "current_password", "new_password"})


def list_forms() -> list[str]:
    return sorted(FORM_REGISTRY)


def get_form_model(form_name: str, instance: str | None = None) -> type[BaseModel]:
    """
    Récupère le modèle associé à un nom de formulaire.

    Raises:
        UnknownFormError: Si le formulaire n'est pas enregistré
    """
    model = FORM_REGISTRY.get(form_name)
    if model is None:
        raise UnknownFormError(form_name, instance=instance)
    return model


def _serialize_errors(exc: PydanticValidationError) -> list[dict[str, Any]]:
    """Réduit les erreurs Pydantic à loc/msg/type (sans l'entrée, qui peut contenir un mot de passe)."""
    return [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]


def validate_form(
    form_name: str,
    payload: dict[str, Any],
    instance: str | None = None,
) -> BaseModel:
    """
    Valide un formulaire soumis.

    Args:
        form_name: Nom kebab-case du formulaire (ex: "symptom-log")
        payload: Données brutes envoyées par le client
        instance: URI de la requête, reprise dans le Problem Detail

    Returns:
        Instance du modèle validé

    Raises:
        UnknownFormError: Formulaire inconnu (404)
        FormValidationError: Données invalides (422)
        WeakPasswordError: Mot de passe trop faible à l'inscription (422)
    """
    with tracer.start_as_current_span("validate_form") as span:
        span.set_attribute("form.name", form_name)
        model = get_form_model(form_name, instance=instance)
        try:
            validated = model.model_validate(payload, context={"instance": instance})
        except PydanticValidationError as e:
            errors = _serialize_errors(e)
            span.set_attribute("form.valid", False)
            span.set_attribute("form.error_count", len(errors))
            logger.info(f"Form '{form_name}' rejected with {len(errors)} error(s)")
            raise FormValidationError(form_name, errors=errors, instance=instance) from e

        span.set_attribute("form.valid", True)
        return validated


def to_public_data(form: BaseModel) -> dict[str, Any]:
    """Données normalisées sérialisables en JSON, sans les champs de mot de passe."""
    excluded = SENSITIVE_FIELDS & set(type(form).model_fields)
    return form.model_dump(mode="json", exclude=set(excluded))
