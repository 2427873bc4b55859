"""Like use cases."""

from .get_like_status import GetLikeStatusUseCase, LikeRequest, LikeStatusResponse
from .toggle_like import ToggleLikeUseCase
from .unlike import UnlikeUseCase

__all__ = [
    "GetLikeStatusUseCase",
    "LikeRequest",
    "LikeStatusResponse",
    "ToggleLikeUseCase",
    "UnlikeUseCase",
]
