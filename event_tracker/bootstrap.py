"""Build the store and service once at process start.

Callers hold on to the returned service and pass it to whatever needs it.
"""

import logging
from datetime import date
from typing import Callable

from google.cloud import firestore
from google.oauth2 import service_account

from event_tracker.config import Settings
from event_tracker.domain import ConfigurationError
from event_tracker.services import EventService
from event_tracker.stores import EventStore, FirestoreEventStore, InMemoryEventStore

logger = logging.getLogger(__name__)


def get_firestore_client(settings: Settings) -> firestore.AsyncClient:
    if not settings.project_id:
        raise ConfigurationError("GOOGLE_CLOUD_PROJECT is required.")
    if settings.key_file:
        credentials = service_account.Credentials.from_service_account_file(
            settings.key_file
        )
        return firestore.AsyncClient(project=settings.project_id, credentials=credentials)
    return firestore.AsyncClient(project=settings.project_id)


def build_event_store(settings: Settings) -> EventStore:
    if settings.testing:
        logger.info("TESTING is set, using the in-memory event store")
        return InMemoryEventStore()
    logger.info(
        "Using Firestore collection %s in project %s",
        settings.collection,
        settings.project_id,
    )
    return FirestoreEventStore(get_firestore_client(settings), settings.collection)


def create_event_service(
    settings: Settings | None = None, clock: Callable[[], date] | None = None
) -> EventService:
    settings = settings or Settings.from_env()
    return EventService(build_event_store(settings), clock=clock)
