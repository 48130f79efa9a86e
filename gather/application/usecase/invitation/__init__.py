"""Invitation use cases."""

from .create_invitations import (
    CreateInvitationsRequest,
    CreateInvitationsResponse,
    CreateInvitationsUseCase,
)
from .list_invitations import (
    ListInvitationsRequest,
    ListInvitationsResponse,
    ListInvitationsUseCase,
)
from .update_rsvp import UpdateRsvpRequest, UpdateRsvpResponse, UpdateRsvpUseCase

__all__ = [
    "CreateInvitationsRequest",
    "CreateInvitationsResponse",
    "CreateInvitationsUseCase",
    "ListInvitationsRequest",
    "ListInvitationsResponse",
    "ListInvitationsUseCase",
    "UpdateRsvpRequest",
    "UpdateRsvpResponse",
    "UpdateRsvpUseCase",
]
