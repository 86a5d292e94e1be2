"""
Admin endpoints.

There is a single administrator whose credential comes from settings.
A successful login returns a signed bearer token; the admin endpoints
only demand it when ``ADMIN_AUTH_REQUIRED`` is enabled.
"""

import logging

from fastapi import APIRouter

from mun_registration_api.app.core.exceptions import AuthenticationFailedError
from mun_registration_api.app.core.security import AdminCredentialVerifier, create_access_token
from mun_registration_api.app.schemas.admin import AdminLogin, LoginResponse


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/login", response_model=LoginResponse)
async def admin_login(credentials: AdminLogin) -> LoginResponse:
    """Check the admin credential and issue a token.

    Responds with 401 on any mismatch.
    """
    if not AdminCredentialVerifier().verify(credentials.username, credentials.password):
        logger.warning("Failed admin login attempt for '%s'", credentials.username)
        raise AuthenticationFailedError(credentials.username)
    token = create_access_token({"sub": credentials.username, "role": "admin"})
    logger.info("Admin '%s' logged in", credentials.username)
    return LoginResponse(access_token=token)
