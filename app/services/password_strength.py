"""Service de calcul de la robustesse des mots de passe.

Le score est additif sur cinq critères indépendants (longueur, minuscules,
majuscules, chiffres, symboles), puis deux pénalités sont appliquées
(motifs courants, caractères répétés). Chaque critère non satisfait
ajoute une suggestion lisible par l'utilisateur.

Fonctions pures: aucune entrée/sortie, aucun état partagé.
"""

import logging
import re

from opentelemetry import trace

from app.core.config import settings
from app.core.exceptions import WeakPasswordError
from app.schemas.password import PasswordStrength, StrengthLevel

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)

STRONG_LENGTH = 12
MIN_LENGTH = 8

LENGTH_STRONG_POINTS = 25
LENGTH_MIN_POINTS = 15
LOWERCASE_POINTS = 20
UPPERCASE_POINTS = 20
DIGIT_POINTS = 20
SYMBOL_POINTS = 15

COMMON_PATTERN_PENALTY = 30
REPETITION_PENALTY = 15

SYMBOLS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")
COMMON_PATTERNS = ("123456", "password", "qwerty", "admin", "letmein")

_LOWERCASE_RE = re.compile(r"[a-z]")
_UPPERCASE_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
# Trois caractères identiques consécutifs ou plus
_REPETITION_RE = re.compile(r"(.)\1{2,}")

FEEDBACK_LENGTH_SHORT = "Password must be at least 8 characters long"
FEEDBACK_LENGTH_MEDIUM = "Use at least 12 characters for better security"
FEEDBACK_LOWERCASE = "Include lowercase letters"
FEEDBACK_UPPERCASE = "Include uppercase letters"
FEEDBACK_DIGIT = "Include numbers"
FEEDBACK_SYMBOL = "Include special characters (!@#$%^&*)"
FEEDBACK_COMMON = "Avoid common passwords and patterns"
FEEDBACK_REPETITION = "Avoid repetitive characters"

# (borne supérieure exclusive, libellé, couleur), dans l'ordre croissant
STRENGTH_LEVELS: tuple[tuple[int, str, str], ...] = (
    (30, "Very Weak", "red"),
    (60, "Weak", "yellow"),
    (80, "Good", "blue"),
)
STRONGEST_LEVEL = ("Strong", "green")


def _has_symbol(password: str) -> bool:
    return any(char in SYMBOLS for char in password)


def _has_common_pattern(password: str) -> bool:
    lowered = password.lower()
    return any(pattern in lowered for pattern in COMMON_PATTERNS)


def validate_password(password: str) -> PasswordStrength:
    """
    Calcule le score de robustesse d'un mot de passe.

    Args:
        password: Mot de passe candidat (aucune borne de longueur)

    Returns:
        PasswordStrength avec le score (0-100), les suggestions et la validité
    """
    with tracer.start_as_current_span("validate_password") as span:
        feedback: list[str] = []
        score = 0
        length = len(password)

        if length >= STRONG_LENGTH:
            score += LENGTH_STRONG_POINTS
        elif length >= MIN_LENGTH:
            score += LENGTH_MIN_POINTS
            feedback.append(FEEDBACK_LENGTH_MEDIUM)
        else:
            feedback.append(FEEDBACK_LENGTH_SHORT)

        if _LOWERCASE_RE.search(password):
            score += LOWERCASE_POINTS
        else:
            feedback.append(FEEDBACK_LOWERCASE)

        if _UPPERCASE_RE.search(password):
            score += UPPERCASE_POINTS
        else:
            feedback.append(FEEDBACK_UPPERCASE)

        if _DIGIT_RE.search(password):
            score += DIGIT_POINTS
        else:
            feedback.append(FEEDBACK_DIGIT)

        if _has_symbol(password):
            score += SYMBOL_POINTS
        else:
            feedback.append(FEEDBACK_SYMBOL)

        # Pénalités, le score ne descend jamais sous zéro
        if _has_common_pattern(password):
            score = max(0, score - COMMON_PATTERN_PENALTY)
            feedback.append(FEEDBACK_COMMON)

        if _REPETITION_RE.search(password):
            score = max(0, score - REPETITION_PENALTY)
            feedback.append(FEEDBACK_REPETITION)

        score = min(100, score)
        is_valid = score >= settings.PASSWORD_MIN_VALID_SCORE and length >= MIN_LENGTH

        # Jamais le mot de passe lui-même dans la trace
        span.set_attribute("password.length", length)
        span.set_attribute("password.score", score)
        span.set_attribute("password.is_valid", is_valid)

        return PasswordStrength(score=score, feedback=feedback, is_valid=is_valid)


def get_strength_label(score: int) -> str:
    """Libellé affiché sous la jauge de robustesse."""
    for upper_bound, label, _ in STRENGTH_LEVELS:
        if score < upper_bound:
            return label
    return STRONGEST_LEVEL[0]


def get_strength_color(score: int) -> str:
    """Jeton de couleur de la jauge de robustesse."""
    for upper_bound, _, color in STRENGTH_LEVELS:
        if score < upper_bound:
            return color
    return STRONGEST_LEVEL[1]


def describe_strength(score: int) -> StrengthLevel:
    return StrengthLevel(label=get_strength_label(score), color=get_strength_color(score))


def ensure_strong_password(password: str, instance: str | None = None) -> PasswordStrength:
    """
    Vérifie qu'un mot de passe est assez robuste pour une inscription.

    Args:
        password: Mot de passe candidat
        instance: URI de la requête, reprise dans le Problem Detail

    Returns:
        Le résultat du scoring si le mot de passe est valide

    Raises:
        WeakPasswordError: Si le mot de passe n'est pas valide
    """
    strength = validate_password(password)
    if not strength.is_valid:
        logger.info(f"Weak password rejected (score={strength.score})")
        raise WeakPasswordError(
            score=strength.score,
            feedback=strength.feedback,
            instance=instance,
        )
    return strength
