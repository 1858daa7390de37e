"""
Token verification against Supabase Auth.

Each request's bearer token is checked with the auth provider; validity
is never cached locally.
"""
from dataclasses import dataclass

from supabase import AsyncClient

from dayrhythm.core.exceptions import AuthenticationError
from dayrhythm.core.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
    """The caller identified by a verified token."""
    id: str
    email: str = ""


class SupabaseAuthenticator:
    """Resolves bearer tokens to users via `auth.get_user`."""

    def __init__(self, client: AsyncClient):
        self.client = client

    async def verify(self, token: str) -> AuthenticatedUser:
        """
        Verify a JWT and return its user.

        Raises:
            AuthenticationError: token rejected, or the provider call failed
        """
        try:
            response = await self.client.auth.get_user(token)
        except Exception as e:
            status = getattr(e, "status", None)
            if isinstance(status, int) and 400 <= status < 500:
                raise AuthenticationError("Invalid or expired token") from e
            logger.error(f"Token verification error: {e}")
            raise AuthenticationError("Token verification failed") from e

        user = getattr(response, "user", None)
        if user is None:
            raise AuthenticationError("Invalid or expired token")

        return AuthenticatedUser(id=str(user.id), email=user.email or "")
