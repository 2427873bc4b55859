"""Get current admin use case."""

from datetime import datetime

from pydantic import BaseModel

from dami.application.usecase.base import BaseUseCase
from dami.domain.error import NotAuthorizedError
from dami.domain.service import AdminAuthService, JWTService


class GetCurrentAdminRequest(BaseModel):
    token: str | None  # JWT from the admin cookie


class AdminResponse(BaseModel):
    email: str
    expires_at: datetime


class GetCurrentAdminUseCase(BaseUseCase):
    """Use case for resolving the admin session behind a token."""

    def __init__(
        self, jwt_service: JWTService, admin_auth_service: AdminAuthService
    ) -> None:
        self.jwt_service = jwt_service
        self.admin_auth_service = admin_auth_service

    async def execute(self, request: GetCurrentAdminRequest) -> AdminResponse:
        """Verify the token.

        Raises:
            NotAuthorizedError: If the token is missing or names another account
            JWTError: If the token is invalid or expired
        """
        if not request.token:
            raise NotAuthorizedError("Authentication required")

        payload = self.jwt_service.verify_token(request.token)
        # Tokens issued before the admin email changed are no longer valid
        if not self.admin_auth_service.is_admin(payload.sub):
            raise NotAuthorizedError("Authentication required")

        return AdminResponse(email=payload.sub, expires_at=payload.exp)
