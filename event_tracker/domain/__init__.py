from event_tracker.domain.errors import (
    ConfigurationError,
    DomainError,
    ErrorCode,
    InvalidEventDateError,
    ListAfterCreateError,
    StoreError,
)
from event_tracker.domain.models import Event
from event_tracker.domain.value_objects import (
    EventDate,
    ReactionKind,
    create_sort_date,
    pad_date,
)

__all__ = [
    "Event",
    "EventDate",
    "ReactionKind",
    "pad_date",
    "create_sort_date",
    "DomainError",
    "ErrorCode",
    "StoreError",
    "ListAfterCreateError",
    "InvalidEventDateError",
    "ConfigurationError",
]
