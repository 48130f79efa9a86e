"""Sync user use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from gather.domain.service import JWTService, UserService
from gather.domain.value import UserId

from .get_current_user import DEFAULT_DISPLAY_NAME


class SyncUserRequest(BaseModel):
    """Sync user request.

    Profile fields override the token claims when given.
    """

    token: str
    display_name: str | None = Field(default=None, min_length=1, max_length=120)
    photo_url: str | None = Field(default=None, max_length=2048)


class SyncUserResponse(BaseModel):
    """Stored profile after sync."""

    user_id: str
    email: str
    display_name: str
    photo_url: str | None
    created_at: datetime
    last_login_at: datetime


class SyncUserUseCase:
    """Use case for creating or refreshing the caller's profile after sign-in."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize sync user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: SyncUserRequest) -> SyncUserResponse:
        """Upsert the caller's profile from token claims.

        Args:
            request: Token plus optional profile overrides

        Returns:
            Saved profile

        Raises:
            JWTError: If token is invalid or expired
        """
        payload = self.jwt_service.verify_token(request.token)

        with logfire.span("sync_user.execute", user_id=payload.uid):
            profile = await self.user_service.upsert_profile(
                UserId(payload.uid),
                payload.email,
                request.display_name or payload.name or DEFAULT_DISPLAY_NAME,
                photo_url=request.photo_url or payload.picture,
            )

            return SyncUserResponse(
                user_id=profile.id,
                email=profile.email,
                display_name=profile.display_name,
                photo_url=profile.photo_url,
                created_at=profile.created_at,
                last_login_at=profile.last_login_at,
            )
