"""In-memory implementation of the EventStore, used when TESTING is set."""

import copy
import logging
import uuid
from typing import Any

from event_tracker.domain import Event
from event_tracker.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class InMemoryEventStore(EventStore):
    """Dict-backed event store with the same semantics as the Firestore one."""

    def __init__(self) -> None:
        self._documents: dict[str, dict[str, Any]] = {}

    def _to_event(self, event_id: str) -> Event:
        return Event.from_document(event_id, copy.deepcopy(self._documents[event_id]))

    async def list_by_sort_date_desc(self) -> list[Event]:
        # Documents without the field are left out, as a Firestore order_by does.
        ordered = [i for i, doc in self._documents.items() if "sortDate" in doc]
        with_key = [i for i in ordered if self._documents[i]["sortDate"] is not None]
        without_key = [i for i in ordered if self._documents[i]["sortDate"] is None]
        with_key.sort(key=lambda i: self._documents[i]["sortDate"], reverse=True)
        return [self._to_event(i) for i in with_key + without_key]

    async def add(self, document: dict[str, Any]) -> str:
        event_id = uuid.uuid4().hex
        self._documents[event_id] = copy.deepcopy(document)
        logger.debug("Added event %s", event_id)
        return event_id

    async def get(self, event_id: str) -> Event | None:
        if event_id not in self._documents:
            return None
        return self._to_event(event_id)

    async def find_by_title(self, title: str) -> list[Event]:
        return [
            self._to_event(i)
            for i, doc in self._documents.items()
            if doc.get("title") == title
        ]

    async def update(self, event_id: str, fields: dict[str, Any]) -> None:
        if event_id not in self._documents:
            raise LookupError(f"No document to update: {event_id}")
        self._documents[event_id].update(copy.deepcopy(fields))

    async def delete(self, event_id: str) -> None:
        self._documents.pop(event_id, None)

    async def increment(self, event_id: str, field: str, delta: int) -> None:
        if event_id not in self._documents:
            raise LookupError(f"No document to update: {event_id}")
        document = self._documents[event_id]
        document[field] = (document.get(field) or 0) + delta
