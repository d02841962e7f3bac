"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class VerifyRequest(BaseModel):
    """Admin credential check."""
    password: str = Field(..., min_length=1, max_length=256)


class TokenResponse(BaseModel):
    """Bearer token issued after a successful credential check."""
    success: bool = True
    token: str
    token_type: str = "bearer"
    expires_at: datetime


class AdminSession(BaseModel):
    """Decoded, verified bearer token. Never persisted."""
    role: str
    issued_at: datetime
    expires_at: datetime
