"""Admin session and dashboard routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from dami.application.usecase.admin import (
    AdminLoginRequest,
    AdminLoginUseCase,
    AdminResponse,
    DashboardResponse,
    GetCurrentAdminUseCase,
    GetDashboardUseCase,
)
from dami.config import Settings
from dami.interface.api.auth import (
    clear_session_cookie,
    require_admin,
    set_session_cookie,
)

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class LoginAPIResponse(BaseModel):
    email: str


class LogoutResponse(BaseModel):
    success: bool


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: AdminLoginRequest,
    response: Response,
    admin_login_use_case: FromDishka[AdminLoginUseCase],
    settings: FromDishka[Settings],
) -> LoginAPIResponse:
    """Sign in to the admin panel.

    On success the session token is set as an HTTP-only cookie.

    Raises:
        NotAuthorizedError: "Invalid login credentials" (401)
    """
    result = await admin_login_use_case.execute(request)
    set_session_cookie(response, result.token, settings)
    return LoginAPIResponse(email=result.email)


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> LogoutResponse:
    """Sign out by clearing the session cookie."""
    clear_session_cookie(response, settings)
    return LogoutResponse(success=True)


@router.get("/me", response_model=AdminResponse)
async def me(
    request: Request,
    get_current_admin_use_case: FromDishka[GetCurrentAdminUseCase],
    settings: FromDishka[Settings],
) -> AdminResponse:
    """The signed-in admin; 401 without a valid session."""
    return await require_admin(request, get_current_admin_use_case, settings)


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    request: Request,
    get_dashboard_use_case: FromDishka[GetDashboardUseCase],
    get_current_admin_use_case: FromDishka[GetCurrentAdminUseCase],
    settings: FromDishka[Settings],
) -> DashboardResponse:
    """Article and video totals."""
    await require_admin(request, get_current_admin_use_case, settings)
    return await get_dashboard_use_case.execute()
