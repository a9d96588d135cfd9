"""Schemas for login, registration and tokens."""
from pydantic import Field
from vivida.schemas.common import CamelModel


class LoginRequest(CamelModel):
    """Request schema for /api/auth/login and /api/auth/register."""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class FirebaseLoginRequest(CamelModel):
    """Identity asserted by the client after the provider redirect flow."""
    firebase_uid: str = Field(..., min_length=1, description="User id issued by the identity provider")
    email: str = Field(..., min_length=1)


class AuthUser(CamelModel):
    id: str
    email: str


class AuthResponse(CamelModel):
    """Bearer token plus the user it was issued for."""
    token: str
    user: AuthUser
