"""JWT identity token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from gather.config import AuthSettings


class TokenPayload(BaseModel):
    """Identity token payload issued by the identity provider."""

    uid: str
    email: str = ""
    name: str | None = None
    picture: str | None = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    uid: str,
    email: str,
    settings: AuthSettings,
    name: str | None = None,
    picture: str | None = None,
) -> str:
    """Create a signed identity token.

    Used by local tooling and tests; production tokens come from the
    identity provider with the same claims.

    Args:
        uid: Account identifier
        email: Account email
        settings: Authentication settings
        name: Optional display name
        picture: Optional avatar URL

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "uid": uid,
        "email": email,
        "exp": expiry,
    }
    if name:
        payload["name"] = name
    if picture:
        payload["picture"] = picture

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode an identity token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except ValidationError:
        raise JWTError("Token is missing identity claims")
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
