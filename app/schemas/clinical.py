"""Schémas Pydantic des formulaires cliniques.

Rendez-vous, dossiers de santé, constantes vitales et prescriptions.
"""

from datetime import datetime
from typing import Annotated, Any, Literal
from uuid import UUID

from pydantic import BaseModel, Field, StringConstraints

from app.schemas.utils import IsoDateStr

HealthRecordType = Literal[
    "lab_results",
    "imaging",
    "vital_signs",
    "medication_history",
    "consultation_notes",
    "surgical_records",
    "vaccination_records",
    "allergy_information",
    "discharge_summary",
    "other",
]


class AppointmentBookingForm(BaseModel):
    """Réservation d'une consultation."""

    provider_id: UUID = Field(..., description="Identifiant du professionnel de santé")
    appointment_date: datetime = Field(..., description="Date et heure ISO 8601")
    type: Literal["video", "audio", "in_person"]
    reason: Annotated[str, StringConstraints(min_length=10, max_length=500, strip_whitespace=True)]
    duration_minutes: int = Field(..., ge=15, le=120)


class AppointmentNotesForm(BaseModel):
    notes: Annotated[str, StringConstraints(max_length=2000, strip_whitespace=True)] | None = None


class HealthRecordForm(BaseModel):
    """Ajout d'un document au dossier de santé."""

    type: HealthRecordType
    title: Annotated[str, StringConstraints(min_length=1, max_length=200, strip_whitespace=True)]
    recorded_date: IsoDateStr
    data: dict[str, Any] = Field(default_factory=dict)


class VitalSignsForm(BaseModel):
    """Constantes vitales saisies par le patient ou le soignant."""

    blood_pressure_systolic: int | None = Field(None, ge=50, le=250)
    blood_pressure_diastolic: int | None = Field(None, ge=30, le=150)
    heart_rate: int | None = Field(None, ge=30, le=250)
    temperature: float | None = Field(None, ge=35, le=43, description="Température en °C")
    oxygen_saturation: int | None = Field(None, ge=50, le=100, description="SpO2 en %")


class PrescriptionForm(BaseModel):
    medication_name: Annotated[
        str, StringConstraints(min_length=1, max_length=200, strip_whitespace=True)
    ]
    dosage: Annotated[str, StringConstraints(min_length=1, max_length=100, strip_whitespace=True)]
    frequency: Annotated[
        str, StringConstraints(min_length=1, max_length=100, strip_whitespace=True)
    ]
    duration: Annotated[str, StringConstraints(max_length=100, strip_whitespace=True)] | None = None
    instructions: (
        Annotated[str, StringConstraints(max_length=1000, strip_whitespace=True)] | None
    ) = None
