"""Admin authentication service.

One shared admin credential is exchanged for a signed, 24-hour bearer token.
Verification is stateless: there is no server-side session store, so logout
is a client-side token discard and issued tokens cannot be revoked early.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from loguru import logger

from ..config import DEFAULT_JWT_SECRET, Settings
from ..core.exceptions import InvalidCredentialError, InvalidOrExpiredTokenError
from ..core.security import (
    ADMIN_ROLE,
    create_jwt_token,
    hash_password,
    is_bcrypt_hash,
    verify_jwt_token,
    verify_password,
)
from ..schemas.auth import AdminSession, TokenResponse


class AuthService:
    """Credential check and token verification for the admin."""

    def __init__(
        self,
        admin_password: str,
        jwt_secret: str,
        token_ttl_hours: int = 24,
    ):
        self.jwt_secret = jwt_secret
        self.token_ttl_hours = token_ttl_hours
        self.credential_hash = self._prepare_credential(admin_password)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthService":
        if settings.JWT_SECRET == DEFAULT_JWT_SECRET:
            logger.warning("JWT_SECRET is the development default; set it in production")
        return cls(
            admin_password=settings.ADMIN_PASSWORD,
            jwt_secret=settings.JWT_SECRET,
            token_ttl_hours=settings.TOKEN_TTL_HOURS,
        )

    @staticmethod
    def _prepare_credential(admin_password: str) -> Optional[str]:
        """Return the bcrypt hash every login attempt is compared against."""
        if not admin_password:
            logger.warning("ADMIN_PASSWORD is not set; admin login is disabled")
            return None
        if is_bcrypt_hash(admin_password):
            return admin_password
        logger.warning(
            "ADMIN_PASSWORD is plaintext; hashing it for this process. "
            "Store a bcrypt hash instead (inkfolio hash-password)"
        )
        return hash_password(admin_password)

    def verify_credential(self, password: str, now: Optional[datetime] = None) -> TokenResponse:
        """Check the admin password and issue a bearer token.

        Raises:
            InvalidCredentialError: Password mismatch, or no credential configured
        """
        if self.credential_hash is None or not verify_password(password, self.credential_hash):
            logger.warning("Admin login rejected: invalid password")
            raise InvalidCredentialError()

        issued_at = now or datetime.now(timezone.utc)
        token = create_jwt_token(
            self.jwt_secret,
            role=ADMIN_ROLE,
            expires_hours=self.token_ttl_hours,
            now=issued_at,
        )
        logger.info("Admin token issued")
        return TokenResponse(
            token=token,
            expires_at=issued_at + timedelta(hours=self.token_ttl_hours),
        )

    def authorize(self, token: str) -> AdminSession:
        """Verify a bearer token and return the admin session it proves.

        Raises:
            InvalidOrExpiredTokenError: Bad signature, malformed, expired or wrong role
        """
        payload = verify_jwt_token(token, self.jwt_secret, expected_role=ADMIN_ROLE)
        if payload is None:
            logger.warning("Rejected bearer token: invalid or expired")
            raise InvalidOrExpiredTokenError()

        return AdminSession(
            role=payload.role,
            issued_at=datetime.fromtimestamp(payload.iat, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload.exp, tz=timezone.utc),
        )
