"""Schémas Pydantic des commandes laboratoire et pharmacie."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from app.schemas.utils import Pincode


class LabOrderForm(BaseModel):
    """Commande d'analyses auprès d'un laboratoire partenaire."""

    test_types: list[str] = Field(..., min_length=1, description="Au moins une analyse")
    lab_partner: str = Field(..., min_length=1)
    preferred_date: str = Field(..., min_length=1)
    preferred_time: str = Field(..., min_length=1)
    sample_type: Literal["home_collection", "lab_visit"]
    address: str | None = Field(None, min_length=10, max_length=500)
    special_instructions: str | None = Field(None, max_length=500)

    @model_validator(mode="after")
    def require_address_for_home_collection(self) -> "LabOrderForm":
        if self.sample_type == "home_collection" and not self.address:
            raise ValueError("Full address required for home collection")
        return self


class MedicationItem(BaseModel):
    name: str = Field(..., min_length=1)
    dosage: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0, le=100)


class DeliveryAddress(BaseModel):
    street: str = Field(..., min_length=5)
    city: str = Field(..., min_length=2)
    state: str = Field(..., min_length=2)
    pincode: Pincode


class PharmacyOrderForm(BaseModel):
    """Commande de médicaments avec livraison à domicile."""

    medications: list[MedicationItem] = Field(..., min_length=1)
    pharmacy_partner: str = Field(..., min_length=1)
    delivery_address: DeliveryAddress
    prescription_id: str | None = None
    delivery_instructions: str | None = Field(None, max_length=300)
