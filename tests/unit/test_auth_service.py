"""Unit tests for the admin auth service."""

from datetime import datetime, timedelta, timezone

import pytest

from inkfolio.config import Settings
from inkfolio.core.exceptions import InvalidCredentialError, InvalidOrExpiredTokenError
from inkfolio.core.security import create_jwt_token, verify_password
from inkfolio.services import AuthService


@pytest.fixture
def auth_service(admin_password_hash, jwt_secret):
    return AuthService(admin_password=admin_password_hash, jwt_secret=jwt_secret)


def test_verify_credential_issues_token(auth_service, admin_password):
    response = auth_service.verify_credential(admin_password)

    assert response.success is True
    assert response.token_type == "bearer"
    session = auth_service.authorize(response.token)
    assert session.role == "admin"
    assert session.expires_at - session.issued_at == timedelta(hours=24)
    assert response.expires_at.timestamp() == pytest.approx(session.expires_at.timestamp(), abs=1)


def test_verify_credential_rejects_wrong_password(auth_service):
    with pytest.raises(InvalidCredentialError):
        auth_service.verify_credential("not the password")


def test_token_accepted_until_expiry(auth_service, admin_password):
    now = datetime.now(timezone.utc)

    fresh = auth_service.verify_credential(admin_password, now=now - timedelta(hours=23))
    stale = auth_service.verify_credential(admin_password, now=now - timedelta(hours=25))

    assert auth_service.authorize(fresh.token).role == "admin"
    with pytest.raises(InvalidOrExpiredTokenError):
        auth_service.authorize(stale.token)


def test_authorize_rejects_foreign_token(auth_service):
    token = create_jwt_token("another-secret")

    with pytest.raises(InvalidOrExpiredTokenError):
        auth_service.authorize(token)


def test_authorize_rejects_garbage(auth_service):
    with pytest.raises(InvalidOrExpiredTokenError):
        auth_service.authorize("not-a-jwt")


def test_plaintext_credential_is_hashed(jwt_secret):
    service = AuthService(admin_password="hunter2", jwt_secret=jwt_secret)

    assert service.credential_hash != "hunter2"
    assert verify_password("hunter2", service.credential_hash)
    assert service.verify_credential("hunter2").token


def test_empty_credential_disables_login(jwt_secret):
    service = AuthService(admin_password="", jwt_secret=jwt_secret)

    assert service.credential_hash is None
    with pytest.raises(InvalidCredentialError):
        service.verify_credential("")
    with pytest.raises(InvalidCredentialError):
        service.verify_credential("anything")


def test_from_settings(admin_password, admin_password_hash, jwt_secret):
    settings = Settings(
        ADMIN_PASSWORD=admin_password_hash,
        JWT_SECRET=jwt_secret,
        TOKEN_TTL_HOURS=2,
    )

    service = AuthService.from_settings(settings)

    assert service.credential_hash == admin_password_hash
    session = service.authorize(service.verify_credential(admin_password).token)
    assert session.expires_at - session.issued_at == timedelta(hours=2)
