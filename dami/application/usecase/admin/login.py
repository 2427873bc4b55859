"""Admin login use case."""

from pydantic import BaseModel

from dami.application.usecase.base import BaseUseCase
from dami.domain.service import AdminAuthService, JWTService


class AdminLoginRequest(BaseModel):
    """Admin login form."""

    email: str
    password: str


class AdminLoginResponse(BaseModel):
    """Admin login response. The token is set as a cookie by the route."""

    token: str
    email: str


class AdminLoginUseCase(BaseUseCase):
    """Use case for signing in to the admin panel."""

    def __init__(
        self, admin_auth_service: AdminAuthService, jwt_service: JWTService
    ) -> None:
        """Initialize admin login use case.

        Args:
            admin_auth_service: Admin credential checker
            jwt_service: JWT token domain service
        """
        self.admin_auth_service = admin_auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: AdminLoginRequest) -> AdminLoginResponse:
        """Check the credentials and issue a session token.

        Raises:
            NotAuthorizedError: If the credentials are wrong
        """
        email = self.admin_auth_service.authenticate(request.email, request.password)
        token = self.jwt_service.create_token(email)
        return AdminLoginResponse(token=token, email=email)
