"""En-têtes de sécurité HTTP ajoutés à chaque réponse.

Le CORS reste géré par le CORSMiddleware de Starlette; ce module fournit
les en-têtes de durcissement (CSP, HSTS, anti-cache, anti-framing) ainsi que
le contrôle des origines autorisées, y compris les motifs de sous-domaines
du type ``https://*.example.com``.
"""

import logging
from urllib.parse import urlsplit

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.core.config import settings

logger = logging.getLogger(__name__)

# Pages de documentation servies avec des scripts externes (Swagger UI, ReDoc)
CSP_EXEMPT_PATHS = ("/docs", "/redoc")


def build_security_headers(
    content_security_policy: str | None = None,
    hsts_max_age: int | None = None,
) -> dict[str, str]:
    """
    Construit le jeu d'en-têtes de sécurité.

    Args:
        content_security_policy: Politique CSP (settings.CONTENT_SECURITY_POLICY par défaut)
        hsts_max_age: Durée HSTS en secondes (settings.HSTS_MAX_AGE par défaut)

    Returns:
        Dictionnaire nom d'en-tête → valeur
    """
    csp = content_security_policy or settings.CONTENT_SECURITY_POLICY
    max_age = hsts_max_age if hsts_max_age is not None else settings.HSTS_MAX_AGE
    return {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "X-XSS-Protection": "1; mode=block",
        "Referrer-Policy": "strict-origin-when-cross-origin",
        "Content-Security-Policy": csp,
        "Strict-Transport-Security": f"max-age={max_age}; includeSubDomains",
        "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
        "Pragma": "no-cache",
        "Expires": "0",
    }


def origin_allowed(origin: str | None, allowed_origins: list[str]) -> bool:
    """
    Vérifie qu'une origine fait partie des origines autorisées.

    Supporte:
    - "*" (toute origine)
    - une origine exacte: "https://app.example.com"
    - un motif de sous-domaine: "https://*.example.com" (même schéma, sous-domaine strict)

    Une origine mal formée (port hors limites ou non numérique) est refusée.
    """
    if not origin:
        return False

    origin = origin.rstrip("/")
    parsed_origin = urlsplit(origin)
    try:
        origin_port = parsed_origin.port
    except ValueError:
        logger.debug(f"Malformed origin rejected: {origin}")
        return False

    for allowed in allowed_origins:
        allowed = allowed.rstrip("/")
        if allowed == "*" or allowed == origin:
            return True
        if "*." not in allowed:
            continue
        parsed_allowed = urlsplit(allowed.replace("*.", "", 1))
        if parsed_allowed.hostname is None or parsed_allowed.scheme != parsed_origin.scheme:
            continue
        try:
            allowed_port = parsed_allowed.port
        except ValueError:
            continue
        if allowed_port != origin_port:
            continue
        host = parsed_origin.hostname or ""
        if host.endswith(f".{parsed_allowed.hostname}"):
            return True
    return False


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Ajoute les en-têtes de sécurité sans écraser ceux déjà posés par l'endpoint."""

    def __init__(self, app: ASGIApp, headers: dict[str, str] | None = None):
        super().__init__(app)
        self.headers = headers or build_security_headers()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        exempt_csp = request.url.path.startswith(CSP_EXEMPT_PATHS)
        for name, value in self.headers.items():
            if exempt_csp and name == "Content-Security-Policy":
                continue
            if name not in response.headers:
                response.headers[name] = value
        return response


class OriginPatternCORSMiddleware(CORSMiddleware):
    """CORSMiddleware acceptant aussi les motifs de sous-domaines ("https://*.example.com")."""

    def __init__(self, app: ASGIApp, allow_origins: list[str] | tuple[str, ...] = (), **kwargs):
        super().__init__(app, allow_origins=allow_origins, **kwargs)
        self.origin_patterns = [str(origin) for origin in allow_origins]

    def is_allowed_origin(self, origin: str) -> bool:
        allowed = origin_allowed(origin, self.origin_patterns)
        if not allowed:
            logger.debug(f"CORS origin rejected: {origin}")
        return allowed
