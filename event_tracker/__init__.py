from event_tracker.bootstrap import build_event_store, create_event_service
from event_tracker.config import Settings
from event_tracker.services import EventService

__all__ = [
    "EventService",
    "Settings",
    "build_event_store",
    "create_event_service",
]
