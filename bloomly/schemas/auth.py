# bloomly/schemas/auth.py
from uuid import UUID

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    # missing credentials fail like wrong ones (401), not as validation errors
    email: str = ""
    password: str = ""


class TokenResponse(BaseModel):
    token: str


class AuthClaims(BaseModel):
    family_id: UUID
    email: str
