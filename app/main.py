from opentelemetry.instrumentation import auto_instrumentation

auto_instrumentation.initialize()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi_errors_rfc9457 import RFC9457Config, setup_rfc9457_handlers

from app.api.v1 import api as api_v1
from app.core.config import settings
from app.core.security_headers import (
    OriginPatternCORSMiddleware,
    SecurityHeadersMiddleware,
    build_security_headers,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gère le cycle de vie de l'application.

    Le service est sans état: aucun client externe à initialiser ni à fermer.
    """
    logger.info("=== Application Startup ===")
    logger.info(
        f"{settings.PROJECT_NAME} {settings.VERSION} ({settings.ENVIRONMENT}), "
        f"CORS origins: {settings.ALLOWED_ORIGINS}"
    )
    logger.info("=== Application Startup Complete ===")
    yield
    logger.info("=== Application Shutdown Complete ===")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    lifespan=lifespan,
    openapi_url=f"{settings.get_api_prefix()}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Exception handlers RFC 9457 Problem Details
config_rfc9457 = RFC9457Config(
    base_url="about:blank",  # Auto-detect request domain
    include_trace_id=True,  # Include OpenTelemetry trace_id
    expose_internal_errors=settings.DEBUG,  # Show detailed errors in dev
    include_error_pages=False,
)
setup_rfc9457_handlers(app, config=config_rfc9457)

# En-têtes de sécurité sur toutes les réponses
app.add_middleware(
    SecurityHeadersMiddleware,
    headers=build_security_headers(settings.CONTENT_SECURITY_POLICY, settings.HSTS_MAX_AGE),
)

# Middleware CORS (origines exactes et motifs "https://*.domaine")
app.add_middleware(
    OriginPatternCORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Middleware Trusted Hosts
if settings.ENVIRONMENT not in ("development", "test"):
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=settings.TRUSTED_HOSTS,
    )

app.include_router(api_v1.router, prefix=settings.get_api_prefix("v1"))
