"""Admin use cases."""

from .get_current_admin import (
    AdminResponse,
    GetCurrentAdminRequest,
    GetCurrentAdminUseCase,
)
from .get_dashboard import DashboardResponse, GetDashboardUseCase
from .login import AdminLoginRequest, AdminLoginResponse, AdminLoginUseCase

__all__ = [
    "AdminLoginRequest",
    "AdminLoginResponse",
    "AdminLoginUseCase",
    "AdminResponse",
    "DashboardResponse",
    "GetCurrentAdminRequest",
    "GetCurrentAdminUseCase",
    "GetDashboardUseCase",
]
