"""Tests unitaires pour le service de robustesse des mots de passe."""

import pytest

from app.core.exceptions import WeakPasswordError
from app.services.password_strength import (
    FEEDBACK_COMMON,
    FEEDBACK_DIGIT,
    FEEDBACK_LENGTH_MEDIUM,
    FEEDBACK_LENGTH_SHORT,
    FEEDBACK_LOWERCASE,
    FEEDBACK_REPETITION,
    FEEDBACK_SYMBOL,
    FEEDBACK_UPPERCASE,
    describe_strength,
    ensure_strong_password,
    get_strength_color,
    get_strength_label,
    validate_password,
)


class TestValidatePassword:
    """Tests du calcul de score."""

    def test_empty_password(self):
        """Le mot de passe vide a un score nul et les cinq suggestions."""
        result = validate_password("")

        assert result.score == 0
        assert result.is_valid is False
        assert result.feedback == [
            FEEDBACK_LENGTH_SHORT,
            FEEDBACK_LOWERCASE,
            FEEDBACK_UPPERCASE,
            FEEDBACK_DIGIT,
            FEEDBACK_SYMBOL,
        ]

    def test_repeated_lowercase(self):
        """12 minuscules identiques: 25 + 20 - 15 = 30."""
        result = validate_password("aaaaaaaaaaaa")

        assert result.score == 30
        assert result.is_valid is False
        assert FEEDBACK_REPETITION in result.feedback
        assert FEEDBACK_LENGTH_MEDIUM not in result.feedback

    def test_strong_password(self):
        """Tous les critères satisfaits, aucune pénalité."""
        result = validate_password("Str0ng!Passw0rd")

        assert result.score == 100
        assert result.is_valid is True
        assert result.feedback == []

    def test_common_pattern_penalty(self):
        """Le motif 'password' retire 30 points."""
        result = validate_password("password123")

        # 15 (longueur) + 20 (minuscules) + 20 (chiffres) - 30
        assert result.score == 25
        assert result.is_valid is False
        assert result.feedback == [
            FEEDBACK_LENGTH_MEDIUM,
            FEEDBACK_UPPERCASE,
            FEEDBACK_SYMBOL,
            FEEDBACK_COMMON,
        ]

    def test_common_pattern_is_case_insensitive(self):
        result = validate_password("MyQWERTYkey9!")

        assert FEEDBACK_COMMON in result.feedback
        assert result.score == 100 - 30

    def test_score_never_negative(self):
        """Les pénalités ne font jamais descendre le score sous zéro."""
        result = validate_password("111")

        # 20 (chiffres) - 15 (répétition)
        assert result.score == 5
        result = validate_password("aaa123456")
        assert result.score >= 0

    def test_both_penalties_floor_at_zero(self):
        result = validate_password("1234566666")

        # 15 + 20 = 35, -30 = 5, -15 = 0
        assert result.score == 0
        assert result.feedback[-2:] == [FEEDBACK_COMMON, FEEDBACK_REPETITION]

    def test_minimum_valid_password(self):
        """8 caractères et score >= 60 suffisent."""
        result = validate_password("Abcdef1!")

        assert result.score == 90
        assert result.is_valid is True
        assert result.feedback == [FEEDBACK_LENGTH_MEDIUM]

    def test_valid_at_threshold(self):
        """Score exactement 60 avec une pénalité: valide."""
        result = validate_password("Password1!")

        assert result.score == 60
        assert result.is_valid is True

    def test_short_password_never_valid(self):
        result = validate_password("Ab1!")

        assert result.score == 75
        assert result.is_valid is False
        assert result.feedback == [FEEDBACK_LENGTH_SHORT]

    def test_non_ascii_letters_not_counted(self):
        """Seules les lettres ASCII comptent pour les minuscules/majuscules."""
        result = validate_password("éàüçéàüçéàüç")

        assert FEEDBACK_LOWERCASE in result.feedback
        assert FEEDBACK_UPPERCASE in result.feedback

    def test_idempotent(self):
        assert validate_password("Tr1cky#Pass") == validate_password("Tr1cky#Pass")

    @pytest.mark.parametrize(
        "base,enriched",
        [
            ("abcdefghijkl", "abcdefghijkL"),
            ("abcdefghijkl", "abcdefghijk7"),
            ("abcdefghijkl", "abcdefghijk#"),
            ("ABCDEFGHIJKL", "ABCDEFGHIJKl"),
        ],
    )
    def test_monotonic_character_classes(self, base, enriched):
        """Ajouter une classe de caractères ne diminue jamais le score."""
        assert validate_password(enriched).score >= validate_password(base).score


class TestStrengthLevels:
    """Tests des libellés et couleurs de la jauge."""

    @pytest.mark.parametrize(
        "score,label,color",
        [
            (0, "Very Weak", "red"),
            (29, "Very Weak", "red"),
            (30, "Weak", "yellow"),
            (59, "Weak", "yellow"),
            (60, "Good", "blue"),
            (79, "Good", "blue"),
            (80, "Strong", "green"),
            (100, "Strong", "green"),
        ],
    )
    def test_label_and_color(self, score, label, color):
        assert get_strength_label(score) == label
        assert get_strength_color(score) == color

    def test_describe_strength(self):
        level = describe_strength(65)

        assert level.label == "Good"
        assert level.color == "blue"


class TestEnsureStrongPassword:
    """Tests du contrôle utilisé à l'inscription."""

    def test_strong_password_accepted(self):
        result = ensure_strong_password("Str0ng!Passw0rd")
        assert result.score == 100

    def test_weak_password_rejected(self):
        with pytest.raises(WeakPasswordError) as exc_info:
            ensure_strong_password("abcdefgh", instance="/api/v1/forms/signup/validate")

        exc = exc_info.value
        assert exc.status_code == 422
        assert exc.problem_detail.title == "Password Too Weak"
        assert exc.problem_detail.detail == FEEDBACK_LENGTH_MEDIUM
        assert exc.problem_detail.instance == "/api/v1/forms/signup/validate"

        result = exc.to_dict()
        assert result["score"] == 35
        assert result["feedback"][0] == FEEDBACK_LENGTH_MEDIUM
