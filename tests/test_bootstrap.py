"""Tests for settings and store selection.

Run with: pytest tests/test_bootstrap.py -v
"""

from datetime import date
from unittest.mock import MagicMock

import pytest

from event_tracker import bootstrap
from event_tracker.config import Settings
from event_tracker.domain import ConfigurationError
from event_tracker.stores import FirestoreEventStore, InMemoryEventStore


class TestSettings:
    """Tests for Settings.from_env."""

    def test_defaults(self):
        settings = Settings.from_env(env_file=None)
        assert settings == Settings()
        assert settings.collection == "Events"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TESTING", "1")
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "tracker-prod")
        monkeypatch.setenv("KEY_FILE_NAME", "/secrets/key.json")
        settings = Settings.from_env(env_file=None)
        assert settings.testing is True
        assert settings.project_id == "tracker-prod"
        assert settings.key_file == "/secrets/key.json"

    def test_loads_dotenv_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GOOGLE_CLOUD_PROJECT=from-file\nEVENTS_COLLECTION=Staging\n")
        settings = Settings.from_env(env_file=str(env_file))
        assert settings.project_id == "from-file"
        assert settings.collection == "Staging"


class TestBuildEventStore:
    """Tests for build_event_store."""

    def test_testing_flag_selects_memory_store(self):
        store = bootstrap.build_event_store(Settings(testing=True))
        assert isinstance(store, InMemoryEventStore)

    def test_missing_project_raises(self):
        with pytest.raises(ConfigurationError):
            bootstrap.build_event_store(Settings())

    def test_builds_firestore_store(self, monkeypatch):
        async_client = MagicMock()
        monkeypatch.setattr(bootstrap.firestore, "AsyncClient", async_client)
        store = bootstrap.build_event_store(Settings(project_id="tracker-prod", collection="Staging"))
        assert isinstance(store, FirestoreEventStore)
        assert store.collection_name == "Staging"
        async_client.assert_called_once_with(project="tracker-prod")

    def test_key_file_supplies_credentials(self, monkeypatch):
        async_client = MagicMock()
        from_file = MagicMock(return_value="creds")
        monkeypatch.setattr(bootstrap.firestore, "AsyncClient", async_client)
        monkeypatch.setattr(
            bootstrap.service_account.Credentials, "from_service_account_file", from_file
        )
        bootstrap.build_event_store(Settings(project_id="p", key_file="/secrets/key.json"))
        from_file.assert_called_once_with("/secrets/key.json")
        async_client.assert_called_once_with(project="p", credentials="creds")


class TestCreateEventService:
    """Tests for create_event_service."""

    @pytest.mark.asyncio
    async def test_wires_store_and_clock(self):
        service = bootstrap.create_event_service(
            Settings(testing=True), clock=lambda: date(2030, 1, 2)
        )
        event = await service.create({"title": "x"}, return_all=False)
        assert event.date == "01/02/2030"

    def test_reads_settings_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TESTING", "yes")
        service = bootstrap.create_event_service()
        assert isinstance(service._store, InMemoryEventStore)
