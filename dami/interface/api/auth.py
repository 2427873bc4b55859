"""Admin session helpers shared by the admin routes."""

from fastapi import Request, Response

from dami.application.usecase.admin import (
    AdminResponse,
    GetCurrentAdminRequest,
    GetCurrentAdminUseCase,
)
from dami.config import Settings


async def require_admin(
    request: Request,
    get_current_admin_use_case: GetCurrentAdminUseCase,
    settings: Settings,
) -> AdminResponse:
    """Resolve the admin from the session cookie.

    Raises:
        NotAuthorizedError: If there is no session cookie
        JWTError: If the token is invalid or expired
    """
    token = request.cookies.get(settings.auth.cookie_name)
    return await get_current_admin_use_case.execute(
        GetCurrentAdminRequest(token=token)
    )


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the admin JWT as an HTTP-only cookie.

    Development runs frontend and API on different localhost ports, which
    counts as same-site, so lax is enough there. Production is cross-site
    and needs samesite=none with secure.
    """
    is_production = settings.environment == "production"
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Remove the admin session cookie."""
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
