"""
Security utilities and authentication
"""

from typing import Optional

import redis.asyncio as redis
from fastapi import Depends, Request
from fastapi.responses import Response

from suitehub.core.config import settings
from suitehub.core.errors import UnauthorizedError
from suitehub.services.auth_service import AuthService
from suitehub.services.store_client import get_store

def get_session_token(request: Request) -> Optional[str]:
    """Extract the admin session token from the request cookie"""
    return request.cookies.get(settings.SESSION_COOKIE_NAME)

def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_TTL_SECONDS,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.secure_cookies,
    )

def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.secure_cookies,
    )

async def is_admin(
    token: Optional[str] = Depends(get_session_token),
    store: Optional[redis.Redis] = Depends(get_store),
) -> bool:
    return await AuthService(store).validate(token)

async def require_admin(admin: bool = Depends(is_admin)) -> None:
    """Guard for every mutating event operation"""
    if not admin:
        raise UnauthorizedError()
