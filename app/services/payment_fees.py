"""Service métier de calcul des frais de paiement.

Trois calculs sont fournis:
- Frais des moyens de paiement en ligne (UPI, cartes, wallets, net banking, EMI).
- Frais des guichets de paiement hospitaliers (POS), appliqués au paiement par carte.
- Mensualités EMI selon la formule d'annuité standard.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from opentelemetry import trace

from app.core.config import settings
from app.core.exceptions import InvalidAmountError, UnknownPaymentCounterError
from app.schemas.payment import (
    EmiOption,
    PaymentCounter,
    PaymentMethod,
    PaymentMode,
    PaymentQuote,
    PosQuote,
)

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
HUNDRED = Decimal("100")

# Montant minimal finançable en EMI
EMI_MIN_FINANCED_AMOUNT = Decimal("1000")

EMI_TENURES = (3, 6, 9, 12, 18, 24)

_ONLINE_METHODS: tuple[dict, ...] = (
    {
        "id": "upi",
        "name": "UPI (Recommended)",
        "processing_fee_percent": Decimal("0"),
        "processing_time": "Instant",
        "features": ["Zero fees", "Instant confirmation", "Most popular"],
        "priority": 1,
    },
    {
        "id": "cards",
        "name": "Credit/Debit Cards",
        "processing_fee_percent": Decimal("1.8"),
        "processing_time": "2-3 minutes",
        "features": ["Widely accepted", "EMI available", "Secure"],
        "priority": 2,
    },
    {
        "id": "wallets",
        "name": "Digital Wallets",
        "processing_fee_percent": Decimal("0.5"),
        "processing_time": "Instant",
        "features": ["Quick payment", "Rewards available", "No OTP required"],
        "priority": 3,
    },
    {
        "id": "netbanking",
        "name": "Net Banking",
        "processing_fee_percent": Decimal("2.0"),
        "processing_time": "3-5 minutes",
        "features": ["Bank security", "Higher limits", "Detailed records"],
        "priority": 4,
    },
    {
        "id": "emi",
        "name": "EMI Financing",
        "processing_fee_percent": Decimal("0"),
        "processing_time": "5-10 minutes",
        "features": ["0% interest options", "Flexible tenure", "Instant approval"],
        "priority": 5,
    },
)

PAYMENT_COUNTERS: dict[str, PaymentCounter] = {
    counter.id: counter
    for counter in (
        PaymentCounter(
            id="main-billing",
            name="Main Billing Counter",
            location="Ground Floor, Near Reception",
            floor="Ground Floor",
            open_time="24/7",
            close_time="24/7",
            queue_number=12,
            wait_time="15-20 mins",
            accepted_methods=["Credit Card", "Debit Card", "Cash", "UPI QR"],
            processing_fee_percent=Decimal("2"),
        ),
        PaymentCounter(
            id="express-counter",
            name="Express Payment Counter",
            location="First Floor, Wing A",
            floor="1st Floor",
            open_time="08:00 AM",
            close_time="08:00 PM",
            queue_number=5,
            wait_time="5-10 mins",
            accepted_methods=["Credit Card", "Debit Card", "UPI QR"],
            processing_fee_percent=Decimal("1.5"),
        ),
        PaymentCounter(
            id="emergency-billing",
            name="Emergency Billing",
            location="Emergency Ward",
            floor="Ground Floor",
            open_time="24/7",
            close_time="24/7",
            queue_number=3,
            wait_time="2-5 mins",
            accepted_methods=["Credit Card", "Debit Card", "Cash"],
            processing_fee_percent=Decimal("0"),
        ),
        PaymentCounter(
            id="pharmacy-counter",
            name="Pharmacy Payment",
            location="Hospital Pharmacy",
            floor="Ground Floor",
            open_time="06:00 AM",
            close_time="11:00 PM",
            queue_number=8,
            wait_time="10-15 mins",
            accepted_methods=["Credit Card", "Debit Card", "Cash", "UPI QR"],
            processing_fee_percent=Decimal("1"),
        ),
    )
}


def _to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def check_amount(amount: Decimal, instance: str | None = None) -> Decimal:
    """
    Vérifie qu'un montant est strictement positif et sous le plafond configuré.

    Raises:
        InvalidAmountError: Si le montant est hors limites
    """
    amount = Decimal(amount)
    if not amount.is_finite() or amount <= 0:
        raise InvalidAmountError(
            amount=amount, reason="Amount must be greater than 0", instance=instance
        )
    if amount > settings.PAYMENT_MAX_AMOUNT:
        raise InvalidAmountError(
            amount=amount,
            reason=f"Amount cannot exceed {settings.PAYMENT_MAX_AMOUNT} {settings.PAYMENT_CURRENCY}",
            instance=instance,
        )
    return amount


def check_emi_amount(amount: Decimal, instance: str | None = None) -> Decimal:
    """
    Vérifie qu'un montant atteint le minimum finançable en EMI.

    Raises:
        InvalidAmountError: Si le montant est sous le minimum EMI
    """
    amount = check_amount(amount, instance=instance)
    if amount < EMI_MIN_FINANCED_AMOUNT:
        raise InvalidAmountError(
            amount=amount,
            reason=f"Minimum amount for EMI Financing is {EMI_MIN_FINANCED_AMOUNT} {settings.PAYMENT_CURRENCY}",
            instance=instance,
        )
    return amount


def list_payment_methods(amount: Decimal | None = None) -> list[PaymentMethod]:
    """
    Liste les moyens de paiement en ligne triés par priorité.

    L'EMI exige un montant minimal de 1000: en dessous, la méthode est listée
    mais marquée indisponible.
    """
    methods = []
    for entry in _ONLINE_METHODS:
        min_amount = EMI_MIN_FINANCED_AMOUNT if entry["id"] == "emi" else None
        available = min_amount is None or amount is None or amount >= min_amount
        methods.append(PaymentMethod(**entry, min_amount=min_amount, available=available))
    return sorted(methods, key=lambda method: method.priority)


def get_payment_method(method_id: str) -> PaymentMethod | None:
    for method in list_payment_methods():
        if method.id == method_id:
            return method
    return None


def calculate_fee(amount: Decimal, method_id: str) -> Decimal:
    """
    Calcule les frais d'un paiement en ligne.

    Un moyen de paiement inconnu n'ajoute aucun frais.

    Args:
        amount: Montant de la prestation
        method_id: Identifiant du moyen de paiement

    Returns:
        Frais arrondis au centime
    """
    method = get_payment_method(method_id)
    if method is None:
        logger.warning(f"Unknown payment method '{method_id}', no fee applied")
        return _to_cents(Decimal("0"))
    return _to_cents(Decimal(amount) * method.processing_fee_percent / HUNDRED)


def quote_payment(amount: Decimal, method_id: str, instance: str | None = None) -> PaymentQuote:
    """Devis complet (montant, frais, total) pour un paiement en ligne."""
    with tracer.start_as_current_span("quote_payment") as span:
        amount = check_amount(amount, instance=instance)
        if method_id == "emi":
            amount = check_emi_amount(amount, instance=instance)
        fee = calculate_fee(amount, method_id)
        span.set_attribute("payment.method_id", method_id)
        span.set_attribute("payment.fee", str(fee))
        return PaymentQuote(
            method_id=method_id,
            amount=_to_cents(amount),
            fee=fee,
            total=_to_cents(amount + fee),
            currency=settings.PAYMENT_CURRENCY,
        )


def list_payment_counters() -> list[PaymentCounter]:
    return list(PAYMENT_COUNTERS.values())


def quote_pos_payment(
    amount: Decimal,
    counter_id: str,
    payment_mode: PaymentMode = "card",
    instance: str | None = None,
) -> PosQuote:
    """
    Devis d'un paiement au guichet hospitalier.

    Les frais du guichet ne s'appliquent qu'au paiement par carte;
    espèces et QR code sont sans frais.

    Raises:
        UnknownPaymentCounterError: Si le guichet n'existe pas
        InvalidAmountError: Si le montant est hors limites
    """
    with tracer.start_as_current_span("quote_pos_payment") as span:
        amount = check_amount(amount, instance=instance)
        counter = PAYMENT_COUNTERS.get(counter_id)
        if counter is None:
            raise UnknownPaymentCounterError(counter_id, instance=instance)

        fee = Decimal("0")
        if payment_mode == "card":
            fee = amount * counter.processing_fee_percent / HUNDRED
        fee = _to_cents(fee)

        span.set_attribute("payment.counter_id", counter_id)
        span.set_attribute("payment.mode", payment_mode)
        return PosQuote(
            counter_id=counter_id,
            payment_mode=payment_mode,
            amount=_to_cents(amount),
            fee=fee,
            total=_to_cents(amount + fee),
            currency=settings.PAYMENT_CURRENCY,
        )


def calculate_emi(principal: Decimal, annual_rate: Decimal, months: int) -> int:
    """
    Calcule la mensualité d'un financement EMI.

    Formule d'annuité: P·r·(1+r)^n / ((1+r)^n - 1) avec r = taux annuel / 1200.
    À taux nul, la mensualité est simplement P / n.

    Args:
        principal: Montant financé
        annual_rate: Taux annuel en pourcentage (ex: 12 pour 12%)
        months: Durée en mois

    Returns:
        Mensualité arrondie à l'unité (demi-unité vers le haut)
    """
    if months <= 0:
        raise ValueError("months must be positive")

    principal = Decimal(principal)
    monthly_rate = Decimal(annual_rate) / Decimal(1200)
    if monthly_rate == 0:
        emi = principal / months
    else:
        growth = (1 + monthly_rate) ** months
        emi = principal * monthly_rate * growth / (growth - 1)
    return int(emi.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def emi_rate_for(months: int) -> Decimal:
    """Taux annuel selon la durée: 0% jusqu'à 6 mois, 12% jusqu'à 12 mois, 18% au-delà."""
    if months <= 6:
        return Decimal("0")
    if months <= 12:
        return Decimal("12")
    return Decimal("18")


def get_emi_options(amount: Decimal, instance: str | None = None) -> list[EmiOption]:
    """Plans EMI proposés pour un montant, du plus court au plus long."""
    with tracer.start_as_current_span("get_emi_options") as span:
        amount = check_emi_amount(amount, instance=instance)
        options = []
        for months in EMI_TENURES:
            rate = emi_rate_for(months)
            monthly_amount = calculate_emi(amount, rate, months)
            options.append(
                EmiOption(
                    months=months,
                    interest_rate=rate,
                    monthly_amount=monthly_amount,
                    total_amount=monthly_amount * months,
                )
            )
        span.set_attribute("emi.options_count", len(options))
        return options
