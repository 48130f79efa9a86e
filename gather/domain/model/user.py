"""User profile and caller identity."""

from datetime import datetime
from typing import Optional

from gather.domain.model.common import DomainModel
from gather.domain.value import UserId


class UserProfile(DomainModel):
    """Stored account profile, keyed by the identity provider's uid."""

    id: UserId
    email: str
    normalized_email: str
    display_name: str
    photo_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    last_login_at: datetime


class UserContext(DomainModel):
    """Resolved identity of the current caller."""

    uid: UserId
    email: str
    normalized_email: str
    display_name: str
    photo_url: Optional[str] = None

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "UserContext":
        return cls(
            uid=profile.id,
            email=profile.email,
            normalized_email=profile.normalized_email,
            display_name=profile.display_name,
            photo_url=profile.photo_url,
        )
