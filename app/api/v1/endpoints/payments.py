"""Endpoints API pour le calcul des frais de paiement.

Ce module expose le catalogue des moyens de paiement en ligne, les guichets
hospitaliers et les plans EMI, ainsi que les devis correspondants.
"""

from decimal import Decimal

from fastapi import APIRouter, Query, Request, status

from app.schemas.payment import (
    EmiOption,
    PaymentCounter,
    PaymentMethod,
    PaymentQuote,
    PaymentQuoteRequest,
    PosQuote,
    PosQuoteRequest,
)
from app.services import payment_fees

router = APIRouter()


@router.get(
    "/methods",
    response_model=list[PaymentMethod],
    summary="Lister les moyens de paiement en ligne",
    description="Moyens de paiement triés par priorité, avec leurs frais",
)
async def list_payment_methods(
    amount: Decimal | None = Query(None, gt=0, description="Montant à payer (plafond EMI)"),
) -> list[PaymentMethod]:
    return payment_fees.list_payment_methods(amount)


@router.post(
    "/quote",
    response_model=PaymentQuote,
    status_code=status.HTTP_200_OK,
    summary="Devis d'un paiement en ligne",
    description="Calcule les frais et le total pour un moyen de paiement",
)
async def quote_payment(quote_request: PaymentQuoteRequest, request: Request) -> PaymentQuote:
    """
    Calcule le devis d'un paiement en ligne.

    Un moyen de paiement inconnu n'ajoute aucun frais.
    """
    return payment_fees.quote_payment(
        quote_request.amount,
        quote_request.method_id,
        instance=request.url.path,
    )


@router.get(
    "/counters",
    response_model=list[PaymentCounter],
    summary="Lister les guichets de paiement hospitaliers",
)
async def list_payment_counters() -> list[PaymentCounter]:
    return payment_fees.list_payment_counters()


@router.post(
    "/pos-quote",
    response_model=PosQuote,
    status_code=status.HTTP_200_OK,
    summary="Devis d'un paiement au guichet",
    description="Les frais du guichet ne s'appliquent qu'au paiement par carte",
)
async def quote_pos_payment(quote_request: PosQuoteRequest, request: Request) -> PosQuote:
    return payment_fees.quote_pos_payment(
        quote_request.amount,
        quote_request.counter_id,
        quote_request.payment_mode,
        instance=request.url.path,
    )


@router.get(
    "/emi-options",
    response_model=list[EmiOption],
    summary="Plans de financement EMI",
    description="Mensualités pour 3, 6, 9, 12, 18 et 24 mois",
)
async def get_emi_options(
    request: Request,
    amount: Decimal = Query(..., description="Montant à financer"),
) -> list[EmiOption]:
    return payment_fees.get_emi_options(amount, instance=request.url.path)
