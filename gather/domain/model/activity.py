"""Activity log entry entity."""

from datetime import datetime
from typing import Any

from pydantic import Field

from gather.domain.model.common import DomainModel
from gather.domain.value import ActivityAction, ActivityId, EventId, UserId


class ActivityLogEntry(DomainModel):
    """Append-only record of one action against an event."""

    id: ActivityId
    event_id: EventId
    actor_id: UserId
    actor_name: str
    action: ActivityAction
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
