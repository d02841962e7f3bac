"""Admin authentication endpoints."""

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from ..dependencies import get_auth_service, require_admin
from ..schemas.auth import AdminSession, TokenResponse, VerifyRequest
from ..services import AuthService


router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/verify", response_model=TokenResponse)
async def verify(
    data: VerifyRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Exchange the admin password for a bearer token.

    The token is valid for 24 hours. There is no logout endpoint: clients
    discard the token.
    """
    # bcrypt is CPU-bound; keep it off the event loop
    return await run_in_threadpool(auth_service.verify_credential, data.password)


@router.get("/session", response_model=AdminSession)
async def get_session_info(
    session: AdminSession = Depends(require_admin),
):
    """Report the role and validity window of the caller's token."""
    return session
