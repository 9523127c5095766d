"""Schémas Pydantic des formulaires d'authentification.

L'inscription impose, en plus des contraintes de format, un mot de passe
jugé valide par le service de robustesse (score >= 60, 8 caractères minimum).
"""

from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    Field,
    StringConstraints,
    ValidationInfo,
    field_validator,
    model_validator,
)

from app.schemas.utils import Email, PersonName, PhoneNumber
from app.services.password_strength import ensure_strong_password

FormPassword = Annotated[str, Field(min_length=6, max_length=100)]


def _instance_from(info: ValidationInfo) -> str | None:
    return (info.context or {}).get("instance")


class LoginForm(BaseModel):
    """Connexion par email et mot de passe."""

    email: Email
    password: FormPassword


class SignupForm(BaseModel):
    """Création de compte patient ou professionnel de santé."""

    email: Email
    password: FormPassword
    confirm_password: str
    first_name: PersonName = Field(..., examples=["Aarav"])
    last_name: PersonName = Field(..., examples=["Sharma"])
    phone: PhoneNumber
    role: Literal["patient", "provider"] = Field(..., description="Rôle choisi à l'inscription")

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, v: str, info: ValidationInfo) -> str:
        # Absent si le mot de passe a déjà échoué à la validation
        password = info.data.get("password")
        if password is not None and v != password:
            raise ValueError("Passwords do not match")
        return v

    @model_validator(mode="after")
    def check_strength(self, info: ValidationInfo) -> "SignupForm":
        """
        Vérifie la robustesse du mot de passe une fois le formulaire valide.

        Le contexte de validation peut fournir l'URI de la requête (`instance`),
        reprise dans le Problem Detail.

        Raises:
            WeakPasswordError: Si le mot de passe est trop faible
        """
        ensure_strong_password(self.password, instance=_instance_from(info))
        return self


class PasswordChangeForm(BaseModel):
    """Changement de mot de passe depuis les paramètres du compte."""

    current_password: Annotated[str, StringConstraints(min_length=1)]
    new_password: FormPassword
    confirm_password: str

    @field_validator("new_password")
    @classmethod
    def differs_from_current(cls, v: str, info: ValidationInfo) -> str:
        if v == info.data.get("current_password"):
            raise ValueError("New password must be different from the current password")
        return v

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, v: str, info: ValidationInfo) -> str:
        new_password = info.data.get("new_password")
        if new_password is not None and v != new_password:
            raise ValueError("Passwords do not match")
        return v

    @model_validator(mode="after")
    def check_strength(self, info: ValidationInfo) -> "PasswordChangeForm":
        ensure_strong_password(self.new_password, instance=_instance_from(info))
        return self
