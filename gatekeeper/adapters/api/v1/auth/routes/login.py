"""Login endpoint.

A thin HTTP adapter over `AuthenticationService`: it reads the Basic-style
``Authorization`` header, delegates, and maps the result onto a status code.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Header, status
from fastapi.responses import JSONResponse

from gatekeeper.adapters.api.v1.auth.schemas import ErrorResponse, TokenResponse
from gatekeeper.domain.services.authentication import AuthenticationService
from gatekeeper.domain.value_objects.auth_result import Failure
from gatekeeper.infrastructure.dependency_injection.auth_dependencies import (
    get_authentication_service,
)

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "/login",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Authenticate a user",
    description=(
        "Authenticates with an `Authorization: <scheme> <base64(email:password)>` header. "
        "Unverified accounts receive a fresh activation email and a 403."
    ),
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)
async def login_user(
    authorization: Optional[str] = Header(default=None),
    auth_service: AuthenticationService = Depends(get_authentication_service),
):
    """Exchange credentials for a session token.

    A missing header is handled like a malformed one.
    """
    result = await auth_service.authenticate(authorization or "")

    if isinstance(result, Failure):
        message, status_code = result.error.as_tuple()
        logger.info("Login rejected", status_code=status_code, reason=result.error.name)
        return JSONResponse(status_code=status_code, content={"detail": message})

    return TokenResponse(**result.value.to_dict())
