"""Schémas Pydantic des formulaires de paiement et d'assurance."""

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from app.schemas.utils import Amount, Email, IsoDateStr, PhoneNumber


class PaymentForm(BaseModel):
    """Coordonnées de paiement saisies avant redirection vers la passerelle."""

    amount: Amount
    customer_email: Email
    customer_phone: PhoneNumber
    description: (
        Annotated[str, StringConstraints(max_length=500, strip_whitespace=True)] | None
    ) = None


class InsuranceForm(BaseModel):
    """Enregistrement d'une police d'assurance santé."""

    provider_name: Annotated[
        str, StringConstraints(min_length=1, max_length=100, strip_whitespace=True)
    ]
    policy_number: Annotated[
        str,
        StringConstraints(
            min_length=1, max_length=50, pattern=r"^[A-Z0-9-]+$", strip_whitespace=True
        ),
    ] = Field(..., description="Lettres majuscules, chiffres et tirets", examples=["HDFC-2024-001"])
    coverage_amount: float = Field(..., gt=0, le=100_000_000)
    expiry_date: IsoDateStr


class InsuranceClaimForm(BaseModel):
    """Déclaration de sinistre auprès de l'assureur."""

    insurance_provider: str = Field(..., min_length=1)
    policy_number: str = Field(..., min_length=3, max_length=50)
    claim_amount: float = Field(..., gt=0, le=10_000_000)
    appointment_id: str | None = None
    description: str = Field(..., min_length=10, max_length=1000)
    service_date: str = Field(..., min_length=1)
    diagnosis: str = Field(..., min_length=3, max_length=500)
