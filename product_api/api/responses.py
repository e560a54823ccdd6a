"""
Result Responses

Maps failed ``ServiceResult`` values to HTTP responses in one place.
"""

from fastapi import Response, status
from fastapi.responses import JSONResponse

from product_api.core.config import Settings
from product_api.schemas.common import MessageResponse, ProblemDetails
from product_api.services.results import ErrorKind, ServiceResult


GENERIC_ERROR_DETAIL = "An unexpected error occurred."

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def unauthorized_response() -> Response:
    """Empty 401 with a bearer challenge."""
    return Response(
        status_code=status.HTTP_401_UNAUTHORIZED,
        headers={"WWW-Authenticate": "Bearer"},
    )


def problem_response(title: str, detail: str | None, settings: Settings) -> JSONResponse:
    """Build a 500 problem-details response, hiding raw details unless enabled."""
    body = ProblemDetails(
        title=title,
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail if settings.EXPOSE_ERROR_DETAILS else GENERIC_ERROR_DETAIL,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(),
        media_type="application/problem+json",
    )


def error_response(result: ServiceResult, title: str, settings: Settings) -> Response:
    """
    Convert a failed result into a response.

    Args:
        result: A result with ``error`` set.
        title: Problem title used for INTERNAL failures.
        settings: Controls exposure of raw error text.

    Returns:
        Response with the status code matching the error kind.
    """
    if result.error == ErrorKind.INTERNAL:
        return problem_response(title, result.message, settings)

    if result.error == ErrorKind.UNAUTHORIZED:
        return unauthorized_response()

    return JSONResponse(
        status_code=STATUS_BY_KIND[result.error],
        content=MessageResponse(message=result.message or "").model_dump(),
    )
