"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest

from event_tracker.services import EventService
from event_tracker.stores import InMemoryEventStore

TODAY = date(2024, 3, 4)


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def service(store: InMemoryEventStore) -> EventService:
    return EventService(store, clock=lambda: TODAY)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TESTING", "GOOGLE_CLOUD_PROJECT", "KEY_FILE_NAME", "EVENTS_COLLECTION"):
        monkeypatch.delenv(name, raising=False)
    yield
