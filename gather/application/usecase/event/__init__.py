"""Event use cases."""

from .create_event import CreateEventRequest, CreateEventResponse, CreateEventUseCase
from .delete_event import DeleteEventRequest, DeleteEventResponse, DeleteEventUseCase
from .get_event import GetEventRequest, GetEventResponse, GetEventUseCase
from .list_events import ListEventsRequest, ListEventsResponse, ListEventsUseCase
from .update_event import UpdateEventRequest, UpdateEventResponse, UpdateEventUseCase

__all__ = [
    "CreateEventRequest",
    "CreateEventResponse",
    "CreateEventUseCase",
    "DeleteEventRequest",
    "DeleteEventResponse",
    "DeleteEventUseCase",
    "GetEventRequest",
    "GetEventResponse",
    "GetEventUseCase",
    "ListEventsRequest",
    "ListEventsResponse",
    "ListEventsUseCase",
    "UpdateEventRequest",
    "UpdateEventResponse",
    "UpdateEventUseCase",
]
