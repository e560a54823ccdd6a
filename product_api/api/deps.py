"""
API Dependencies

Reusable dependencies for API routes including authentication.
"""

from typing import Annotated, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from fastapi.security.utils import get_authorization_scheme_param

from product_api.core.config import Settings, get_settings
from product_api.core.security import decode_access_token
from product_api.schemas.auth import TokenClaims


# Every route under this prefix requires a bearer token
PROTECTED_PREFIX = "/api/products"

# Bearer scheme; missing headers are handled below so the response is always 401
bearer_scheme = HTTPBearer(bearerFormat="JWT", auto_error=False)


class NotAuthenticated(Exception):
    """Raised when a protected route is called without a valid bearer token."""


def resolve_settings(app: FastAPI) -> Settings:
    """Settings for code running outside dependency injection, honouring overrides."""
    override = app.dependency_overrides.get(get_settings)
    if override is not None:
        return override()
    return getattr(app.state, "settings", None) or get_settings()


def is_protected_path(path: str) -> bool:
    return path == PROTECTED_PREFIX or path.startswith(PROTECTED_PREFIX + "/")


def claims_from_request(request: Request, settings: Settings) -> Optional[TokenClaims]:
    """
    Validate the bearer token of a raw request.

    Used where the dependency chain has not run yet, e.g. when the body
    could not be decoded.
    """
    scheme, token = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme.lower() != "bearer" or not token:
        return None
    return decode_access_token(token, settings)


async def get_current_claims(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenClaims:
    """
    Dependency guarding protected routes.

    This dependency:
    1. Extracts the bearer token from the Authorization header
    2. Validates signature, issuer, audience and expiry
    3. Raises NotAuthenticated (empty 401) if anything is missing or invalid

    Args:
        credentials: Parsed Authorization header (auto-extracted).
        settings: Application settings (auto-injected).

    Returns:
        TokenClaims: Claims of the validated token.

    Raises:
        NotAuthenticated: if authentication fails.
    """
    if credentials is None:
        raise NotAuthenticated()

    claims = decode_access_token(credentials.credentials, settings)
    if claims is None:
        raise NotAuthenticated()

    return claims
