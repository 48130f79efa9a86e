"""JWT token domain service."""

import logfire

from gather.config import AuthSettings
from gather.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for identity token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self,
        user_id: str,
        email: str,
        name: str | None = None,
        picture: str | None = None,
    ) -> str:
        """Create a signed identity token.

        Args:
            user_id: Account ID
            email: Account email
            name: Optional display name
            picture: Optional avatar URL

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(
                user_id, email, self.auth_settings, name=name, picture=picture
            )
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify an identity token and extract its claims.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.uid)
                return payload
            except Exception as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise
