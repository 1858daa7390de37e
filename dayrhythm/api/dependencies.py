"""
FastAPI dependencies - service lookup and bearer authentication.

Handlers receive services from app.state rather than module globals, so
a test app can carry fakes.
"""
from typing import Optional

from fastapi import Depends, Header, Request

from dayrhythm.core.exceptions import AuthenticationError
from dayrhythm.database.auth import AuthenticatedUser
from dayrhythm.services.container import ServiceContainer

BEARER_PREFIX = "Bearer "


def get_services(request: Request) -> ServiceContainer:
    """The ServiceContainer built at startup."""
    return request.app.state.services


async def get_current_user(
    authorization: Optional[str] = Header(default=None),
    services: ServiceContainer = Depends(get_services),
) -> AuthenticatedUser:
    """
    Resolve `Authorization: Bearer <token>` to a user.

    Raises:
        AuthenticationError: header missing/malformed or token rejected
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthenticationError("Missing or invalid authorization header")

    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthenticationError("Missing or invalid authorization header")

    return await services.authenticator.verify(token)
