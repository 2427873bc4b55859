"""JWT token domain service."""

import logfire

from dami.config import AuthSettings
from dami.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for admin session tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, email: str) -> str:
        """Create a session token for the admin.

        Args:
            email: Admin email

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token"):
            token = create_token(email, self.auth_settings)
            logfire.info("JWT token created", email=email)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_admin_from_token(self, token: str | None) -> str | None:
        """Extract the admin email from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Admin email if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token).sub
        except Exception as e:
            logfire.debug("Treating invalid admin token as anonymous", error=str(e))
            return None
