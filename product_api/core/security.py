"""
Security Utilities

JWT issuing and validation for bearer authentication.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from product_api.core.config import Settings
from product_api.schemas.auth import TokenClaims


logger = logging.getLogger(__name__)

ADMIN_ROLE = "Admin"


def create_access_token(
    username: str,
    settings: Settings,
    role: str = ADMIN_ROLE,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed JWT access token.

    Args:
        username: Identity placed in the ``sub`` and ``name`` claims.
        settings: Signing key, issuer, audience and lifetime.
        role: Value of the ``role`` claim.
        expires_delta: Optional custom lifetime.

    Returns:
        str: Encoded JWT token.
    """
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": username,
        "name": username,
        "role": role,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "iat": now,
        "nbf": now,
        "exp": now + expires_delta,
    }

    return jwt.encode(
        to_encode,
        settings.JWT_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: Settings) -> Optional[TokenClaims]:
    """
    Decode and validate a JWT access token.

    Signature, issuer, audience and expiry are all checked.

    Args:
        token: JWT token string to decode.
        settings: Signing key, issuer and audience to validate against.

    Returns:
        TokenClaims if valid, None otherwise.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
        claims = TokenClaims.model_validate(payload)
    except (JWTError, ValueError) as exc:
        logger.warning(f"Token failed: {exc}")
        return None

    logger.info("Token validated successfully")
    return claims
