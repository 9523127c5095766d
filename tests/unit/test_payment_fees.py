"""Tests unitaires pour le service de calcul des frais de paiement."""

from decimal import Decimal

import pytest

from app.core.exceptions import InvalidAmountError, UnknownPaymentCounterError
from app.services.payment_fees import (
    EMI_TENURES,
    calculate_emi,
    calculate_fee,
    check_amount,
    emi_rate_for,
    get_emi_options,
    get_payment_method,
    list_payment_counters,
    list_payment_methods,
    quote_payment,
    quote_pos_payment,
)


class TestPaymentMethods:
    """Tests du catalogue des moyens de paiement en ligne."""

    def test_methods_sorted_by_priority(self):
        methods = list_payment_methods()

        assert [m.id for m in methods] == ["upi", "cards", "wallets", "netbanking", "emi"]
        assert [m.priority for m in methods] == [1, 2, 3, 4, 5]

    def test_fee_percentages(self):
        fees = {m.id: m.processing_fee_percent for m in list_payment_methods()}

        assert fees == {
            "upi": Decimal("0"),
            "cards": Decimal("1.8"),
            "wallets": Decimal("0.5"),
            "netbanking": Decimal("2.0"),
            "emi": Decimal("0"),
        }

    def test_emi_unavailable_below_minimum(self):
        """Sous 1000, l'EMI est listé avec son minimum mais indisponible."""
        emi = next(m for m in list_payment_methods(Decimal("500")) if m.id == "emi")
        assert emi.min_amount == Decimal("1000")
        assert emi.available is False

    def test_emi_available_from_minimum(self):
        for amount in ("1000", "5000"):
            emi = next(m for m in list_payment_methods(Decimal(amount)) if m.id == "emi")
            assert emi.min_amount == Decimal("1000")
            assert emi.available is True

    def test_other_methods_have_no_minimum(self):
        for method in list_payment_methods(Decimal("1")):
            if method.id != "emi":
                assert method.min_amount is None
                assert method.available is True

    def test_get_unknown_method(self):
        assert get_payment_method("crypto") is None


class TestCalculateFee:
    """Tests du calcul des frais en ligne."""

    @pytest.mark.parametrize(
        "amount,method_id,expected",
        [
            ("1500", "cards", "27.00"),
            ("1500", "upi", "0.00"),
            ("333", "wallets", "1.67"),  # 1.665 arrondi au centime supérieur
            ("999.99", "netbanking", "20.00"),
            ("2000", "emi", "0.00"),
        ],
    )
    def test_fee(self, amount, method_id, expected):
        assert calculate_fee(Decimal(amount), method_id) == Decimal(expected)

    def test_unknown_method_has_no_fee(self):
        assert calculate_fee(Decimal("1500"), "crypto") == Decimal("0")

    def test_quote_payment(self):
        quote = quote_payment(Decimal("1500"), "cards")

        assert quote.method_id == "cards"
        assert quote.amount == Decimal("1500")
        assert quote.fee == Decimal("27")
        assert quote.total == Decimal("1527")
        assert quote.currency == "INR"

    def test_quote_total_is_amount_plus_fee(self):
        quote = quote_payment(Decimal("999.99"), "netbanking")
        assert quote.total == quote.amount + quote.fee


class TestCheckAmount:
    """Tests des bornes de montant."""

    @pytest.mark.parametrize("amount", ["0", "-10", "1000000.01", "NaN", "Infinity"])
    def test_invalid_amounts(self, amount):
        with pytest.raises(InvalidAmountError) as exc_info:
            check_amount(Decimal(amount), instance="/api/v1/payments/quote")

        exc = exc_info.value
        assert exc.status_code == 400
        assert exc.problem_detail.instance == "/api/v1/payments/quote"
        assert exc.to_dict()["errors"][0]["loc"] == ["amount"]

    def test_max_amount_accepted(self):
        assert check_amount(Decimal("1000000")) == Decimal("1000000")


class TestPosPayments:
    """Tests des paiements au guichet hospitalier."""

    def test_counters(self):
        counters = {c.id: c.processing_fee_percent for c in list_payment_counters()}

        assert counters == {
            "main-billing": Decimal("2"),
            "express-counter": Decimal("1.5"),
            "emergency-billing": Decimal("0"),
            "pharmacy-counter": Decimal("1"),
        }

    def test_card_fee_applied(self):
        quote = quote_pos_payment(Decimal("2500"), "main-billing", "card")

        assert quote.fee == Decimal("50.00")
        assert quote.total == Decimal("2550.00")

    @pytest.mark.parametrize("payment_mode", ["cash", "qr"])
    def test_no_fee_without_card(self, payment_mode):
        quote = quote_pos_payment(Decimal("2500"), "main-billing", payment_mode)

        assert quote.fee == Decimal("0")
        assert quote.total == Decimal("2500")

    def test_default_mode_is_card(self):
        quote = quote_pos_payment(Decimal("1000"), "express-counter")

        assert quote.payment_mode == "card"
        assert quote.fee == Decimal("15.00")

    def test_unknown_counter(self):
        with pytest.raises(UnknownPaymentCounterError) as exc_info:
            quote_pos_payment(Decimal("1000"), "rooftop-counter")

        assert exc_info.value.status_code == 404
        assert exc_info.value.to_dict()["resource_id"] == "rooftop-counter"


class TestEmi:
    """Tests du calcul des mensualités EMI."""

    def test_zero_rate_is_plain_division(self):
        assert calculate_emi(Decimal("12000"), Decimal("0"), 3) == 4000

    def test_zero_rate_rounds_half_up(self):
        assert calculate_emi(Decimal("1000"), Decimal("0"), 3) == 333
        assert calculate_emi(Decimal("1001"), Decimal("0"), 2) == 501

    def test_annuity_formula(self):
        """12000 sur 12 mois à 12%: r = 1%, mensualité 1066.19."""
        assert calculate_emi(Decimal("12000"), Decimal("12"), 12) == 1066

    def test_invalid_tenure(self):
        with pytest.raises(ValueError):
            calculate_emi(Decimal("12000"), Decimal("12"), 0)

    @pytest.mark.parametrize(
        "months,rate",
        [(3, "0"), (6, "0"), (9, "12"), (12, "12"), (18, "18"), (24, "18")],
    )
    def test_rate_by_tenure(self, months, rate):
        assert emi_rate_for(months) == Decimal(rate)

    def test_emi_options(self):
        options = get_emi_options(Decimal("12000"))

        assert [o.months for o in options] == list(EMI_TENURES)
        assert options[0].monthly_amount == 4000
        assert options[0].total_amount == 12000
        assert options[3].monthly_amount == 1066
        assert options[3].total_amount == 1066 * 12
        for option in options:
            assert option.total_amount == option.monthly_amount * option.months

    def test_emi_options_invalid_amount(self):
        with pytest.raises(InvalidAmountError):
            get_emi_options(Decimal("0"))

    def test_emi_options_below_minimum(self):
        """Sous 1000, aucun plan EMI n'est proposé."""
        with pytest.raises(InvalidAmountError) as exc_info:
            get_emi_options(Decimal("999.99"), instance="/api/v1/payments/emi-options")

        detail = exc_info.value.problem_detail
        assert detail.detail == "Minimum amount for EMI Financing is 1000 INR"
        assert detail.instance == "/api/v1/payments/emi-options"

    def test_emi_options_at_minimum(self):
        options = get_emi_options(Decimal("1000"))
        assert options[0].monthly_amount == 333

    def test_emi_quote_below_minimum(self):
        with pytest.raises(InvalidAmountError):
            quote_payment(Decimal("500"), "emi")

    def test_emi_quote_at_minimum(self):
        quote = quote_payment(Decimal("1000"), "emi")
        assert quote.total == Decimal("1000.00")
