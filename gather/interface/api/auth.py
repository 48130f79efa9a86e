"""Caller resolution for authenticated routes.

The identity token is read from the ``Authorization: Bearer`` header, or
from the session cookie when no header is sent.
"""

from fastapi import HTTPException, Request, status

from gather.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from gather.domain.model.user import UserContext
from gather.interface.error import AuthenticationError
from gather.util.jwt import JWTError


def extract_token(request: Request, cookie_name: str) -> str:
    """Get the identity token from the request.

    Raises:
        AuthenticationError: If neither header nor cookie carries a token
    """
    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()

    token = request.cookies.get(cookie_name)
    if token:
        return token

    raise AuthenticationError("Authentication required")


async def require_viewer(
    request: Request, get_current_user_use_case: GetCurrentUserUseCase
) -> UserContext:
    """Resolve the caller or fail with 401.

    Args:
        request: Incoming request
        get_current_user_use_case: Get current user use case from DI

    Returns:
        Current caller

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    try:
        token = extract_token(request, get_current_user_use_case.session_cookie_name)
        response = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except (AuthenticationError, JWTError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    return response.user
