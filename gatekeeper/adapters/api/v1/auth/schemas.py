"""Request/response models for the auth endpoints."""

from pydantic import BaseModel, Field


class TokenResponse(BaseModel):
    """Signed session token returned on successful login."""

    token: str = Field(..., min_length=1)


class ErrorResponse(BaseModel):
    detail: str
