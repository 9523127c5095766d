import json
from decimal import Decimal
from typing import Literal, TypeAlias

from pydantic import AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings

# Type personnalisé pour les listes configurables depuis l'environnement
ConfigurableList: TypeAlias = str | list[str] | list[AnyHttpUrl]


def parse_list_from_env(value: ConfigurableList, field_name: str = "field") -> list[str]:
    """
    Fonction utilitaire pour parser une liste depuis une variable d'environnement.

    Supporte les formats suivants:
    - Liste Python directe: ['val1', 'val2']
    - Format JSON: '["val1", "val2"]'
    - Format virgules: "val1,val2,val3"
    - Chaîne vide: "" → []

    Args:
        value: La valeur à parser (chaîne ou liste)
        field_name: Nom du champ pour les messages d'erreur

    Returns:
        Liste de chaînes parsée

    Raises:
        ValueError: Si le format n'est pas valide
    """
    if isinstance(value, list):
        return [str(item) for item in value]
    elif isinstance(value, str):
        value = value.strip()
        if value.startswith("[") and value.endswith("]"):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                raise ValueError(f"Format JSON invalide pour {field_name}: {value}")
        elif value:
            return [item.strip() for item in value.split(",") if item.strip()]
        else:
            return []
    raise ValueError(f"Valeur invalide pour {field_name}: {value}")


class Settings(BaseSettings):
    try:
        from app import __version__
    except ImportError:
        __version__ = "0.1.0"

    PROJECT_NAME: str = "mirai-health-core"
    VERSION: str = __version__
    DESCRIPTION: str = "Password strength, payment fees and form validation for Mirai Health"

    # API Versioning
    API_LATEST_VERSION: str = "v1"

    # Environnement
    ENVIRONMENT: Literal["development", "staging", "production", "test"] = "development"
    DEBUG: bool = False

    # OpenTelemetry
    OTEL_SERVICE_NAME: str = "mirai-health-core"
    OTEL_EXPORTER_OTLP_ENDPOINT: str = "http://localhost:4317"
    OTEL_EXPORTER_OTLP_PROTOCOL: str = "grpc"
    OTEL_EXPORTER_OTLP_INSECURE: bool = True
    OTEL_LOG_LEVEL: str = "info"
    OTEL_LOGS_EXPORTER: Literal["otlp", "console"] = "otlp"
    OTEL_TRACES_EXPORTER: Literal["otlp", "console"] = "otlp"
    OTEL_METRICS_EXPORTER: Literal["otlp", "console"] = "otlp"
    OTEL_PYTHON_LOG_LEVEL: str = "info"
    OTEL_PYTHON_LOGGING_AUTO_INSTRUMENTATION_ENABLED: bool = True
    OTEL_PYTHON_LOG_CORRELATION: bool = True
    OTEL_PYTHON_LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] [%(filename)s:%(lineno)d] [trace_id=%(otelTraceID)s span_id=%(otelSpanID)s resource.service.name=%(otelServiceName)s trace_sampled=%(otelTraceSampled)s] - %(message)s"

    # CORS
    # Définir dans .env, ex: ALLOWED_ORIGINS='["http://localhost:5173","https://*.lovable.app"]'
    ALLOWED_ORIGINS: ConfigurableList = ["http://localhost:5173", "https://lovable.app"]
    TRUSTED_HOSTS: ConfigurableList = ["localhost", "127.0.0.1"]

    # En-têtes de sécurité ajoutés à chaque réponse
    CONTENT_SECURITY_POLICY: str = "default-src 'self'; script-src 'self'; object-src 'none';"
    HSTS_MAX_AGE: int = 31536000

    # Paiements (montants en roupies)
    PAYMENT_CURRENCY: str = "INR"
    PAYMENT_MAX_AMOUNT: Decimal = Decimal("1000000")

    # Score minimal pour qu'un mot de passe soit accepté à l'inscription
    PASSWORD_MIN_VALID_SCORE: int = 60

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: ConfigurableList) -> list[str]:
        """
        Permet de définir ALLOWED_ORIGINS de plusieurs façons:
        - Chaîne séparée par des virgules: "http://localhost:5173,https://app.mirai.health"
        - Format JSON: '["http://localhost:5173","https://app.mirai.health"]'
        - Liste Python directe (si déjà parsée)
        """
        return parse_list_from_env(v, "ALLOWED_ORIGINS")

    @field_validator("TRUSTED_HOSTS", mode="before")
    @classmethod
    def assemble_trusted_hosts(cls, v: ConfigurableList) -> list[str]:
        """Parse TRUSTED_HOSTS depuis une variable d'environnement."""
        return parse_list_from_env(v, "TRUSTED_HOSTS")

    def get_api_prefix(self, version: str | None = None) -> str:
        """
        Get API prefix for a specific version.

        Args:
            version: API version (e.g., "v1", "v2"). Defaults to latest.

        Returns:
            API prefix string (e.g., "/api/v1")
        """
        version = version or self.API_LATEST_VERSION
        return f"/api/{version}"

    class Config:
        case_sensitive = True
        env_file = ".env"
        extra = "ignore"


# Instance unique des paramètres chargée depuis .env
settings = Settings()
