"""
Configuration pytest.

Le service est sans état: aucun service Docker n'est requis. Ce fichier
définit uniquement les variables d'environnement de test, avant que
`app.core.config.settings` ne soit importé.

Usage:
    pytest
"""

import os

# Variables d'environnement pour les tests
# Respecte les variables déjà définies (ex: dans GitHub Actions)
TEST_ENV = {
    "ENVIRONMENT": os.getenv("ENVIRONMENT", "test"),
    "DEBUG": os.getenv("DEBUG", "false"),
    "ALLOWED_ORIGINS": os.getenv(
        "ALLOWED_ORIGINS", "http://localhost:5173,https://*.lovable.app"
    ),
    # OpenTelemetry (test mode, aucun collecteur)
    "OTEL_SERVICE_NAME": os.getenv("OTEL_SERVICE_NAME", "mirai-health-core-test"),
    "OTEL_TRACES_EXPORTER": os.getenv("OTEL_TRACES_EXPORTER", "console"),
    "OTEL_METRICS_EXPORTER": os.getenv("OTEL_METRICS_EXPORTER", "console"),
    "OTEL_LOGS_EXPORTER": os.getenv("OTEL_LOGS_EXPORTER", "console"),
    "OTEL_SDK_DISABLED": os.getenv("OTEL_SDK_DISABLED", "true"),
}

# Appliquer les variables d'environnement de test (ne remplace pas si déjà définies)
for key, value in TEST_ENV.items():
    if key not in os.environ:
        os.environ[key] = value
