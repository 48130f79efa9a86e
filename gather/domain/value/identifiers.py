"""Typed identifiers for Gather domain entities.

Identifiers are strings: account ids come from the identity provider and
invitation ids are derived from the event id and invitee email.
"""

from typing import NewType

UserId = NewType("UserId", str)
EventId = NewType("EventId", str)
InvitationId = NewType("InvitationId", str)
ActivityId = NewType("ActivityId", str)
