"""
RFC 9457 Problem Details pour HTTP APIs - Exceptions Mirai Health.

Ce module réexporte les exceptions du module fastapi-errors-rfc9457 et
définit les erreurs métier du service (mot de passe faible, formulaire
inconnu, guichet de paiement inconnu, montant invalide).
"""

from typing import Any

from fastapi_errors_rfc9457 import (
    NotFoundError,
    ProblemDetail,
    RFC9457Exception,
    ValidationError,
)

# Exception de base du service
MiraiHealthException = RFC9457Exception


class WeakPasswordError(RFC9457Exception):
    """
    Exception levée lorsqu'un mot de passe n'atteint pas le niveau de robustesse requis.

    Le score et la liste des suggestions sont exposés en extensions RFC 9457
    pour que le client puisse afficher la jauge de robustesse.

    Attributes:
        status_code: Code HTTP 422 (Unprocessable Content)
        problem_detail: Détails de l'erreur au format RFC 9457

    Example:
        ```python
        strength = validate_password(password)
        if not strength.is_valid:
            raise WeakPasswordError(score=strength.score, feedback=strength.feedback)
        ```
    """

    def __init__(
        self,
        score: int,
        feedback: list[str],
        instance: str | None = None,
    ):
        """
        Initialise une exception de mot de passe faible.

        Args:
            score: Score de robustesse calculé (0-100)
            feedback: Suggestions d'amélioration, la première sert de détail
            instance: URI identifiant l'occurrence spécifique de l'erreur
        """
        detail = feedback[0] if feedback else "Please use a stronger password"
        super().__init__(
            status_code=422,
            title="Password Too Weak",
            detail=detail,
            instance=instance,
            score=score,
            feedback=list(feedback),
        )


class FormValidationError(RFC9457Exception):
    """
    Exception levée lorsqu'un formulaire soumis ne respecte pas son schéma.

    Les erreurs pydantic (loc, msg, type) sont exposées dans l'extension `errors`.
    """

    def __init__(
        self,
        form_name: str,
        errors: list[dict[str, Any]],
        instance: str | None = None,
    ):
        super().__init__(
            status_code=422,
            title="Validation Error",
            detail=f"Invalid payload for form '{form_name}'",
            instance=instance,
            form=form_name,
            errors=errors,
        )


class UnknownFormError(NotFoundError):
    """Exception levée lorsqu'un nom de formulaire n'existe pas dans le registre."""

    def __init__(self, form_name: str, instance: str | None = None):
        super().__init__(
            detail=f"Unknown form '{form_name}'",
            resource_type="form",
            resource_id=form_name,
            instance=instance,
        )


class UnknownPaymentCounterError(NotFoundError):
    """Exception levée lorsqu'un guichet de paiement hospitalier n'existe pas."""

    def __init__(self, counter_id: str, instance: str | None = None):
        super().__init__(
            detail=f"Unknown payment counter '{counter_id}'",
            resource_type="payment_counter",
            resource_id=counter_id,
            instance=instance,
        )


class InvalidAmountError(ValidationError):
    """
    Exception levée lorsqu'un montant de paiement est hors limites.

    Example:
        ```python
        if amount <= 0:
            raise InvalidAmountError(amount=amount, reason="Amount must be greater than 0")
        ```
    """

    def __init__(self, amount: Any, reason: str, instance: str | None = None):
        super().__init__(
            detail=reason,
            errors=[{"loc": ["amount"], "msg": reason, "type": "value_error", "input": str(amount)}],
            instance=instance,
        )


__all__ = [
    "FormValidationError",
    "InvalidAmountError",
    "MiraiHealthException",
    "NotFoundError",
    "ProblemDetail",
    "RFC9457Exception",
    "UnknownFormError",
    "UnknownPaymentCounterError",
    "ValidationError",
    "WeakPasswordError",
]
