"""Firestore implementation of the EventStore."""

import logging
from typing import Any

from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter
from google.cloud.firestore_v1.field_path import FieldPath

from event_tracker.domain import Event
from event_tracker.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION = "Events"


class FirestoreEventStore(EventStore):
    """Event store backed by a Firestore collection."""

    def __init__(
        self, client: firestore.AsyncClient, collection: str = DEFAULT_COLLECTION
    ) -> None:
        self.client = client
        self.collection_name = collection

    @property
    def collection(self) -> firestore.AsyncCollectionReference:
        return self.client.collection(self.collection_name)

    async def list_by_sort_date_desc(self) -> list[Event]:
        query = self.collection.order_by("sortDate", direction=firestore.Query.DESCENDING)
        snapshots = await query.get()
        return [Event.from_document(doc.id, doc.to_dict() or {}) for doc in snapshots]

    async def add(self, document: dict[str, Any]) -> str:
        _, doc_ref = await self.collection.add(document)
        logger.debug("Added event %s to %s", doc_ref.id, self.collection_name)
        return doc_ref.id

    async def get(self, event_id: str) -> Event | None:
        snapshot = await self.collection.document(event_id).get()
        if not snapshot.exists:
            return None
        return Event.from_document(snapshot.id, snapshot.to_dict() or {})

    async def find_by_title(self, title: str) -> list[Event]:
        query = self.collection.where(filter=FieldFilter("title", "==", title))
        snapshots = await query.get()
        return [Event.from_document(doc.id, doc.to_dict() or {}) for doc in snapshots]

    async def update(self, event_id: str, fields: dict[str, Any]) -> None:
        # Keys are literal top-level fields, as add() stores them, not dotted paths.
        quoted = {FieldPath(key).to_api_repr(): value for key, value in fields.items()}
        await self.collection.document(event_id).update(quoted)

    async def delete(self, event_id: str) -> None:
        await self.collection.document(event_id).delete()

    async def increment(self, event_id: str, field: str, delta: int) -> None:
        await self.collection.document(event_id).update({field: firestore.Increment(delta)})
