"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. They raise their native
errors; the service layer wraps them.
"""

from abc import ABC, abstractmethod
from typing import Any

from event_tracker.domain import Event


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    async def list_by_sort_date_desc(self) -> list[Event]:
        """Return all events ordered by sortDate descending."""
        ...

    @abstractmethod
    async def add(self, document: dict[str, Any]) -> str:
        """Persist a new document and return its generated ID."""
        ...

    @abstractmethod
    async def get(self, event_id: str) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    async def find_by_title(self, title: str) -> list[Event]:
        """Return all events whose title matches exactly."""
        ...

    @abstractmethod
    async def update(self, event_id: str, fields: dict[str, Any]) -> None:
        """Merge fields into an existing document. Raises if it does not exist."""
        ...

    @abstractmethod
    async def delete(self, event_id: str) -> None:
        """Remove a document. Succeeds when the ID is unknown."""
        ...

    @abstractmethod
    async def increment(self, event_id: str, field: str, delta: int) -> None:
        """Atomically add delta to a numeric field, treating a missing field as 0."""
        ...
