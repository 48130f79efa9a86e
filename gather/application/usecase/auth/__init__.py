"""Auth use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .sync_user import SyncUserRequest, SyncUserResponse, SyncUserUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "SyncUserRequest",
    "SyncUserResponse",
    "SyncUserUseCase",
]
