"""Authentication routes.

Sign-in happens at the identity provider; these routes only turn its token
into a stored profile.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel, Field

from gather.application.usecase.auth import (
    GetCurrentUserUseCase,
    SyncUserRequest,
    SyncUserResponse,
    SyncUserUseCase,
)
from gather.domain.model.user import UserContext
from gather.interface.api.auth import extract_token, require_viewer
from gather.interface.error import AuthenticationError
from gather.util.jwt import JWTError

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class SyncUserAPIRequest(BaseModel):
    """Optional profile overrides sent after sign-in."""

    display_name: str | None = Field(default=None, min_length=1, max_length=120)
    photo_url: str | None = Field(default=None, max_length=2048)


@router.post("/sync", response_model=SyncUserResponse)
async def sync_user(
    request: Request,
    sync_user_use_case: FromDishka[SyncUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    body: SyncUserAPIRequest | None = None,
) -> SyncUserResponse:
    """Create or refresh the caller's profile.

    Invitations already sent to the caller's email are linked to the account.

    Args:
        request: Incoming request carrying the identity token
        sync_user_use_case: Sync user use case from DI
        get_current_user_use_case: Supplies the session cookie name
        body: Optional profile overrides

    Returns:
        Stored profile

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    body = body or SyncUserAPIRequest()
    try:
        token = extract_token(request, get_current_user_use_case.session_cookie_name)
        return await sync_user_use_case.execute(
            SyncUserRequest(
                token=token,
                display_name=body.display_name,
                photo_url=body.photo_url,
            )
        )
    except (AuthenticationError, JWTError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


@router.get("/me", response_model=UserContext)
async def get_me(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> UserContext:
    """Get the current caller.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    return await require_viewer(request, get_current_user_use_case)
