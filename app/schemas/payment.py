"""Schémas Pydantic pour le calcul des frais de paiement.

Les montants sont exprimés dans la devise configurée (INR par défaut) et
manipulés en Decimal pour éviter les erreurs d'arrondi binaire.
"""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PaymentMode = Literal["card", "cash", "qr"]


class PaymentMethod(BaseModel):
    """Moyen de paiement en ligne proposé au patient."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identifiant du moyen de paiement", examples=["upi"])
    name: str = Field(..., description="Libellé affiché")
    processing_fee_percent: Decimal = Field(..., ge=0, description="Frais en pourcentage")
    processing_time: str = Field(..., description="Délai de confirmation indicatif")
    min_amount: Decimal | None = Field(None, description="Montant minimal requis")
    available: bool = Field(True, description="Faux si le montant est sous le minimum requis")
    features: list[str] = Field(default_factory=list)
    priority: int = Field(..., ge=1, description="Ordre d'affichage")


class PaymentQuoteRequest(BaseModel):
    """Demande de devis pour un paiement en ligne."""

    amount: Decimal = Field(..., description="Montant de la prestation", examples=["1500"])
    method_id: str = Field(..., description="Identifiant du moyen de paiement", examples=["cards"])


class PaymentQuote(BaseModel):
    """Montant, frais et total pour un moyen de paiement."""

    model_config = ConfigDict(frozen=True)

    method_id: str
    amount: Decimal
    fee: Decimal = Field(..., description="Frais arrondis au centime")
    total: Decimal = Field(..., description="amount + fee")
    currency: str = "INR"


class PaymentCounter(BaseModel):
    """Guichet de paiement physique à l'hôpital."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    location: str
    floor: str
    open_time: str
    close_time: str
    queue_number: int | None = None
    wait_time: str | None = None
    accepted_methods: list[str] = Field(default_factory=list)
    processing_fee_percent: Decimal = Field(..., ge=0)


class PosQuoteRequest(BaseModel):
    """Demande de devis pour un paiement au guichet."""

    amount: Decimal = Field(..., examples=["2500"])
    counter_id: str = Field(..., examples=["main-billing"])
    payment_mode: PaymentMode = Field(
        "card", description="Seul le paiement par carte supporte les frais du guichet"
    )


class PosQuote(BaseModel):
    """Devis d'un paiement au guichet."""

    model_config = ConfigDict(frozen=True)

    counter_id: str
    payment_mode: PaymentMode
    amount: Decimal
    fee: Decimal
    total: Decimal
    currency: str = "INR"


class EmiOption(BaseModel):
    """Plan de financement en mensualités (EMI)."""

    model_config = ConfigDict(frozen=True)

    months: int = Field(..., gt=0, description="Durée en mois")
    interest_rate: Decimal = Field(..., ge=0, description="Taux annuel en pourcentage")
    monthly_amount: int = Field(..., description="Mensualité arrondie à l'unité")
    total_amount: int = Field(..., description="monthly_amount * months")
