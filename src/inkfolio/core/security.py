"""Security utilities for authentication."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from pydantic import BaseModel


JWT_ALGORITHM = "HS256"
ADMIN_ROLE = "admin"
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


class TokenPayload(BaseModel):
    """JWT token payload."""
    role: str
    type: str  # always "access"
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp


def hash_password(password: str) -> str:
    """Hash password using bcrypt."""
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode('utf-8'),
            hashed_password.encode('utf-8')
        )
    except ValueError:
        # Malformed stored hash
        return False


def is_bcrypt_hash(value: str) -> bool:
    return value.startswith(BCRYPT_PREFIXES) and len(value) == 60


def create_jwt_token(
    secret: str,
    role: str = ADMIN_ROLE,
    expires_hours: int = 24,
    now: Optional[datetime] = None,
) -> str:
    """
    Create JWT token.

    Args:
        secret: HS256 signing secret
        role: Caller role, "admin" for every token issued today
        expires_hours: Token lifetime
        now: Issue time override, defaults to the current UTC time

    Returns:
        Encoded JWT token
    """
    issued_at = now or datetime.now(timezone.utc)
    exp = issued_at + timedelta(hours=expires_hours)

    payload = {
        "role": role,
        "type": "access",
        "exp": int(exp.timestamp()),
        "iat": int(issued_at.timestamp()),
    }

    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def decode_jwt_token(token: str, secret: str) -> TokenPayload:
    """
    Decode and verify JWT token.

    Raises:
        jwt.ExpiredSignatureError: Token expired
        jwt.InvalidTokenError: Token invalid
    """
    payload = jwt.decode(
        token,
        secret,
        algorithms=[JWT_ALGORITHM],
        options={"require": ["exp", "iat"]},
    )
    return TokenPayload(**payload)


def verify_jwt_token(token: str, secret: str, expected_role: str = ADMIN_ROLE) -> Optional[TokenPayload]:
    """
    Verify JWT token and return payload if valid.

    Returns:
        TokenPayload if valid, None if invalid, expired or of the wrong role
    """
    try:
        payload = decode_jwt_token(token, secret)
    except (jwt.InvalidTokenError, ValueError):
        # ExpiredSignatureError is an InvalidTokenError; ValueError covers
        # payloads that decode but do not fit TokenPayload
        return None
    if payload.type != "access" or payload.role != expected_role:
        return None
    return payload
