"""Annotations Pydantic réutilisables pour validation.

Ce module centralise les types annotés pour assurer la cohérence
de la validation à travers tous les formulaires du service.
"""

from typing import Annotated

from pydantic import AfterValidator, BeforeValidator, EmailStr, Field, StringConstraints

EMAIL_MAX_LENGTH = 255


def _strip(value):
    return value.strip() if isinstance(value, str) else value


def _check_email_length(value: str) -> str:
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError("Email must be less than 255 characters")
    return value


# Téléphones indiens (10 chiffres, sans indicatif)
PhoneNumber = Annotated[
    str,
    StringConstraints(pattern=r"^[0-9]{10}$", strip_whitespace=True),
    Field(
        description="Numéro de téléphone à 10 chiffres",
        examples=["9876543210"],
    ),
]

# Code postal indien (PIN code)
Pincode = Annotated[
    str,
    StringConstraints(pattern=r"^\d{6}$", strip_whitespace=True),
    Field(description="Code postal à 6 chiffres", examples=["400001"]),
]

# Date calendaire saisie au format YYYY-MM-DD
IsoDateStr = Annotated[
    str,
    StringConstraints(pattern=r"^\d{4}-\d{2}-\d{2}$", strip_whitespace=True),
    Field(description="Date au format YYYY-MM-DD", examples=["2025-01-15"]),
]

# Prénom / nom: lettres, espaces, apostrophes et traits d'union
PersonName = Annotated[
    str,
    StringConstraints(
        min_length=1,
        max_length=50,
        pattern=r"^[a-zA-Z\s'-]+$",
        strip_whitespace=True,
    ),
]

# Métadonnées
Email = Annotated[
    EmailStr,
    BeforeValidator(_strip),
    AfterValidator(_check_email_length),
    Field(description="Adresse email valide (255 caractères max)"),
]

# Montants (INR)
Amount = Annotated[float, Field(gt=0, le=1_000_000, description="Montant en roupies")]
