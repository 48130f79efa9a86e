"""Get current user use case."""

import logfire
from pydantic import BaseModel

from gather.config import AuthSettings
from gather.domain.model.user import UserContext
from gather.domain.service import JWTService, UserService
from gather.domain.value import UserId

DEFAULT_DISPLAY_NAME = "Attendee"


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user: UserContext


class GetCurrentUserUseCase:
    """Use case for resolving the caller from an identity token."""

    def __init__(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
            auth_settings: Authentication settings
        """
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.session_cookie_name = auth_settings.session_cookie_name

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load the caller's profile
        3. Create the profile on first sight, linking pending invitations

        Args:
            request: Request with JWT token

        Returns:
            Resolved caller

        Raises:
            JWTError: If token is invalid or expired
        """
        payload = self.jwt_service.verify_token(request.token)
        user_id = UserId(payload.uid)

        profile = await self.user_service.get_profile(user_id)
        if profile is None:
            logfire.info("First request from user, creating profile", user_id=user_id)
            profile = await self.user_service.upsert_profile(
                user_id,
                payload.email,
                payload.name or DEFAULT_DISPLAY_NAME,
                photo_url=payload.picture,
            )

        return GetCurrentUserResponse(user=UserContext.from_profile(profile))
