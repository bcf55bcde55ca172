from event_tracker.stores.firestore_store import FirestoreEventStore
from event_tracker.stores.interfaces import EventStore
from event_tracker.stores.memory_store import InMemoryEventStore

__all__ = [
    "EventStore",
    "FirestoreEventStore",
    "InMemoryEventStore",
]
