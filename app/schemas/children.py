"""Schémas Pydantic des formulaires de l'espace enfants (rééducation)."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, StringConstraints, field_validator


class SymptomLogForm(BaseModel):
    """Journal quotidien des symptômes post-commotion."""

    headache_level: int = Field(..., ge=0, le=10, description="Intensité des maux de tête")
    dizziness_level: int = Field(..., ge=0, le=10, description="Intensité des vertiges")
    mood_rating: int = Field(..., ge=1, le=5, description="Humeur de 1 (mauvaise) à 5")
    memory_issues: bool
    notes: Annotated[str, StringConstraints(max_length=1000, strip_whitespace=True)] | None = None

    @field_validator("notes")
    @classmethod
    def empty_notes_to_none(cls, v: str | None) -> str | None:
        return v or None


class CaregiverMessageForm(BaseModel):
    """Message d'un aidant à l'équipe soignante."""

    subject: Annotated[str, StringConstraints(min_length=1, max_length=200, strip_whitespace=True)]
    message: Annotated[str, StringConstraints(min_length=1, max_length=2000, strip_whitespace=True)]
    priority: Literal["low", "medium", "high", "urgent"]


class RehabActivityForm(BaseModel):
    """Séance d'activité de rééducation (jeu, exercice)."""

    activity_name: Annotated[
        str, StringConstraints(min_length=1, max_length=100, strip_whitespace=True)
    ]
    duration_minutes: int = Field(..., ge=1, le=480, description="Durée, 8 heures maximum")
    difficulty_level: Literal["easy", "medium", "hard"]
    score: int | None = Field(None, ge=0, le=100)
    notes: Annotated[str, StringConstraints(max_length=500, strip_whitespace=True)] | None = None


class SchoolAccommodationForm(BaseModel):
    """Demande d'aménagement scolaire."""

    accommodation_type: Annotated[
        str, StringConstraints(min_length=1, max_length=100, strip_whitespace=True)
    ]
    description: Annotated[
        str, StringConstraints(min_length=1, max_length=1000, strip_whitespace=True)
    ]
    status: Literal["requested", "approved", "implemented", "rejected"]
