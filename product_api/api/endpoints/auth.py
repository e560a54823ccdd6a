"""
Authentication Routes

Issues JWT access tokens for the configured credential.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from product_api.api.responses import error_response
from product_api.core.config import Settings, get_settings
from product_api.schemas.auth import LoginRequest, LoginResponse
from product_api.services import auth_service


router = APIRouter(tags=["Authentication"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
    responses={status.HTTP_401_UNAUTHORIZED: {"description": "Invalid credentials"}},
)
async def login(
    request: LoginRequest,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """
    Authenticate and return a JWT access token.

    The token carries the username and the ``Admin`` role and expires
    after ``ACCESS_TOKEN_EXPIRE_MINUTES`` (30 by default). Send it as
    ``Authorization: Bearer <token>`` on the product routes.

    Returns:
        LoginResponse: The encoded token.

    A wrong username or password yields 401 with an empty body.
    """
    result = auth_service.authenticate(request.username, request.password, settings)
    if not result.ok:
        return error_response(result, "Login failed.", settings)

    return LoginResponse(token=result.value)
