"""
Auth Schemas

Pydantic models for login and JWT token handling.
"""

from pydantic import AliasChoices, BaseModel, Field


class LoginRequest(BaseModel):
    """Schema for login request."""

    username: str = Field(
        ...,
        validation_alias=AliasChoices("username", "userName", "UserName"),
        description="Account name",
    )
    password: str = Field(
        ...,
        validation_alias=AliasChoices("password", "Password"),
        description="Account password",
    )


class LoginResponse(BaseModel):
    """Schema for login response."""

    token: str


class TokenClaims(BaseModel):
    """Schema for decoded token payload."""

    sub: str
    name: str
    role: str
    iss: str
    aud: str
    iat: int
    exp: int
