"""Admin authentication domain service."""

import hashlib
import secrets

import logfire

from dami.config import AuthSettings
from dami.domain.error import NotAuthorizedError

from .base import Service


def hash_password(password: str) -> str:
    """sha256 hex digest of a password, the form stored in configuration."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


class AdminAuthService(Service):
    """Domain service for checking admin credentials.

    There is a single admin account, configured through AuthSettings.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize admin auth service.

        Args:
            auth_settings: Authentication settings holding the admin credentials
        """
        self.auth_settings = auth_settings

    def authenticate(self, email: str, password: str) -> str:
        """Check admin credentials.

        Args:
            email: Submitted email (case-insensitive)
            password: Submitted password

        Returns:
            The configured admin email

        Raises:
            NotAuthorizedError: If the credentials do not match or no
                password hash is configured
        """
        with logfire.span("admin_auth_service.authenticate"):
            expected_email = self.auth_settings.admin_email.strip().lower()
            expected_hash = self.auth_settings.admin_password_hash.strip().lower()

            if not expected_hash:
                logfire.error("Admin login attempted with no password hash configured")
                raise NotAuthorizedError()

            # Compare both values so a wrong email costs the same as a wrong password
            email_ok = secrets.compare_digest(
                email.strip().lower().encode("utf-8"), expected_email.encode("utf-8")
            )
            password_ok = secrets.compare_digest(
                hash_password(password).encode("utf-8"), expected_hash.encode("utf-8")
            )
            if not (email_ok and password_ok):
                logfire.warn("Admin login rejected")
                raise NotAuthorizedError()

            logfire.info("Admin logged in", email=self.auth_settings.admin_email)
            return self.auth_settings.admin_email

    def is_admin(self, email: str) -> bool:
        """Whether an email is the configured admin account."""
        return (
            email.strip().lower() == self.auth_settings.admin_email.strip().lower()
        )
