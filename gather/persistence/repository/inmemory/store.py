"""Shared state behind the in-memory repositories."""

import asyncio
from dataclasses import dataclass, field

from gather.domain.model import ActivityLogEntry, Event, Invitation, UserProfile


@dataclass
class InMemoryStore:
    """Tables of the in-memory backend.

    One store is shared by every repository of a container so that writes
    made through one request are visible to the next.
    """

    users: dict[str, UserProfile] = field(default_factory=dict)
    events: dict[str, Event] = field(default_factory=dict)
    invitations: dict[str, Invitation] = field(default_factory=dict)
    activity: list[ActivityLogEntry] = field(default_factory=list)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def snapshot(self) -> tuple:
        return (
            dict(self.users),
            dict(self.events),
            dict(self.invitations),
            list(self.activity),
        )

    def restore(self, snapshot: tuple) -> None:
        users, events, invitations, activity = snapshot
        self.users = users
        self.events = events
        self.invitations = invitations
        self.activity = activity
