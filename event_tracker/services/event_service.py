"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Normalize dates and keep sortDate in step with date
- Wrap store failures in StoreError with the operation name
- Return domain models or domain errors
"""

import logging
from datetime import date
from typing import Any, Callable, Mapping

from event_tracker.domain import (
    Event,
    EventDate,
    ListAfterCreateError,
    ReactionKind,
    StoreError,
)
from event_tracker.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

# Fields only the service itself may write through update.
PROTECTED_FIELDS = frozenset({"id", "sortDate", "likes", "dislikes"})


def _store_error(operation: str, exc: Exception) -> StoreError:
    logger.exception("%s failed", operation)
    return StoreError(operation, str(exc))


class EventService:
    """Service for event tracking operations."""

    def __init__(self, store: EventStore, clock: Callable[[], date] | None = None) -> None:
        self._store = store
        self._clock = clock or date.today

    async def list_all(self) -> list[Event]:
        """Return all events, newest sortDate first.

        Raises:
            StoreError: If the store query fails.
        """
        try:
            return await self._store.list_by_sort_date_desc()
        except Exception as exc:
            raise _store_error("list_all", exc) from exc

    async def create(
        self, event: Mapping[str, Any] | Event, return_all: bool = True
    ) -> list[Event] | Event:
        """Store a new event with zeroed reactions.

        A missing date defaults to today. Returns every event when return_all
        is set, otherwise the new event with its assigned ID.

        Raises:
            InvalidEventDateError: If the given date is malformed.
            StoreError: If the event could not be stored.
            ListAfterCreateError: If it was stored but listing afterwards failed.
        """
        if isinstance(event, Event):
            event = event.to_document()
        document = {k: v for k, v in event.items() if k != "id"}
        document["likes"] = 0
        document["dislikes"] = 0
        if document.get("date"):
            event_date = EventDate.parse(document["date"])
        else:
            event_date = EventDate.from_date(self._clock())
        document["date"] = event_date.value
        document["sortDate"] = event_date.sort_date

        try:
            event_id = await self._store.add(document)
        except Exception as exc:
            raise _store_error("create", exc) from exc
        logger.debug("Created event %s dated %s", event_id, event_date)

        if not return_all:
            return Event.from_document(event_id, document)
        try:
            return await self._store.list_by_sort_date_desc()
        except Exception as exc:
            logger.exception("create.list_all failed after storing %s", event_id)
            raise ListAfterCreateError(str(exc)) from exc

    async def get_by_id(self, event_id: str) -> Event | None:
        """Return an event by ID, or None if it does not exist."""
        try:
            return await self._store.get(event_id)
        except Exception as exc:
            raise _store_error("get_by_id", exc) from exc

    async def get_by_title(self, title: str) -> list[Event]:
        """Return events whose title matches exactly, in no particular order."""
        try:
            return await self._store.find_by_title(title)
        except Exception as exc:
            raise _store_error("get_by_title", exc) from exc

    async def update(
        self, event_id: str, patch: Mapping[str, Any], return_all: bool = True
    ) -> list[Event]:
        """Merge the given fields into an existing event.

        A date in the patch is normalized and sortDate recomputed; without one
        sortDate is left alone. Counters and sortDate cannot be patched directly.

        Raises:
            InvalidEventDateError: If the patched date is malformed.
            StoreError: If the event does not exist or the store fails.
        """
        fields = {k: v for k, v in patch.items() if k not in PROTECTED_FIELDS}
        if "date" in fields:
            event_date = EventDate.parse(fields["date"])
            fields["date"] = event_date.value
            fields["sortDate"] = event_date.sort_date

        try:
            if fields:
                await self._store.update(event_id, fields)
            elif await self._store.get(event_id) is None:
                raise LookupError(f"No document to update: {event_id}")
        except Exception as exc:
            raise _store_error("update", exc) from exc

        if return_all:
            return await self.list_all()
        return []

    async def delete(self, event_id: str) -> None:
        """Remove an event. Unknown IDs are not an error."""
        try:
            await self._store.delete(event_id)
        except Exception as exc:
            raise _store_error("delete", exc) from exc

    async def change_reaction(
        self, event_id: str, kind: str | ReactionKind, increment: bool = True
    ) -> list[Event]:
        """Add or remove one like or dislike, then return all events.

        Unknown kinds change nothing and just return the current list.

        Raises:
            StoreError: If the event does not exist or the store fails.
        """
        reaction = ReactionKind.lookup(kind)
        if reaction is None:
            logger.warning("Ignoring unknown reaction %r for event %s", kind, event_id)
            return await self.list_all()

        try:
            await self._store.increment(event_id, reaction.value, 1 if increment else -1)
        except Exception as exc:
            raise _store_error("change_reaction", exc) from exc
        return await self.list_all()

    async def increment_likes(self, event_id: str) -> list[Event]:
        """Add one like and return all events."""
        return await self.change_reaction(event_id, ReactionKind.LIKES)

    async def increment_dislikes(self, event_id: str) -> list[Event]:
        """Add one dislike and return all events."""
        return await self.change_reaction(event_id, ReactionKind.DISLIKES)
