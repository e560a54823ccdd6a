"""
Auth Service

Checks the configured login credential and issues access tokens.
"""

import logging
import secrets

from product_api.core.config import Settings
from product_api.core.security import ADMIN_ROLE, create_access_token
from product_api.services.results import ErrorKind, ServiceResult


logger = logging.getLogger(__name__)


def _matches(supplied: str, expected: str) -> bool:
    return secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def authenticate(username: str, password: str, settings: Settings) -> ServiceResult[str]:
    """
    Validate a username/password pair and issue a token.

    Only the single pair configured in ``settings`` is accepted. Both
    comparisons always run so timing does not reveal which part was wrong.

    Args:
        username: Supplied account name.
        password: Supplied password.
        settings: Credential and JWT configuration.

    Returns:
        Result holding the encoded JWT, or UNAUTHORIZED.
    """
    username_ok = _matches(username, settings.ADMIN_USERNAME)
    password_ok = _matches(password, settings.ADMIN_PASSWORD)

    if not (username_ok and password_ok):
        logger.warning(f"Rejected login for {username!r}")
        return ServiceResult.failure(ErrorKind.UNAUTHORIZED, "Invalid credentials")

    logger.info(f"Issued token for {username!r}")
    return ServiceResult.success(create_access_token(username, settings, role=ADMIN_ROLE))
