"""User domain service."""

from datetime import datetime, timezone

import logfire

from gather.domain.model.user import UserProfile
from gather.domain.repository import InvitationRepository, UserRepository
from gather.domain.value import UserId, normalize_email

from .base import Service


class UserService(Service):
    """Domain service for user profiles."""

    def __init__(
        self,
        user_repository: UserRepository,
        invitation_repository: InvitationRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            invitation_repository: Used to link pending invitations
        """
        self.user_repository = user_repository
        self.invitation_repository = invitation_repository

    async def get_profile(self, user_id: UserId) -> UserProfile | None:
        """Get a profile by account ID.

        Args:
            user_id: Account ID

        Returns:
            Profile if found, None otherwise
        """
        with logfire.span("user_service.get_profile", user_id=user_id):
            return await self.user_repository.find_by_id(user_id)

    async def upsert_profile(
        self,
        user_id: UserId,
        email: str,
        display_name: str,
        photo_url: str | None = None,
    ) -> UserProfile:
        """Create or refresh a profile from identity claims.

        Invitations sent to the profile's email before the account existed
        are linked to it.

        Args:
            user_id: Account ID from the identity provider
            email: Account email
            display_name: Display name
            photo_url: Optional avatar URL

        Returns:
            Saved profile
        """
        with logfire.span("user_service.upsert_profile", user_id=user_id):
            now = datetime.now(timezone.utc)
            existing = await self.user_repository.find_by_id(user_id)

            fields = {
                "email": email,
                "normalized_email": normalize_email(email),
                "display_name": display_name,
                "photo_url": photo_url,
                "updated_at": now,
                "last_login_at": now,
            }
            if existing:
                profile = existing.model_copy(update=fields)
            else:
                profile = UserProfile(id=user_id, created_at=now, **fields)

            saved = await self.user_repository.save(profile)
            linked = await self.link_pending_invitations(saved)
            logfire.info(
                "User profile saved",
                user_id=user_id,
                created=existing is None,
                invitations_linked=linked,
            )
            return saved

    async def link_pending_invitations(self, profile: UserProfile) -> int:
        """Attach unlinked invitations addressed to the profile's email.

        Args:
            profile: Profile to link to

        Returns:
            Number of invitations linked
        """
        if not profile.normalized_email:
            return 0

        now = datetime.now(timezone.utc)
        linked = 0
        for invitation in await self.invitation_repository.find_by_normalized_email(
            profile.normalized_email
        ):
            if invitation.invitee_id:
                continue
            await self.invitation_repository.save(
                invitation.model_copy(
                    update={
                        "invitee_id": profile.id,
                        "invitee_name": profile.display_name,
                        "linked_at": now,
                        "updated_at": now,
                    }
                )
            )
            linked += 1
        return linked
