"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass
from typing import Self

from dotenv import load_dotenv

from event_tracker.stores.firestore_store import DEFAULT_COLLECTION


@dataclass(frozen=True)
class Settings:
    """Which store to use and how to reach it."""

    testing: bool = False
    project_id: str | None = None
    key_file: str | None = None
    collection: str = DEFAULT_COLLECTION

    @classmethod
    def from_env(cls, env_file: str | None = ".env") -> Self:
        if env_file:
            load_dotenv(env_file)
        return cls(
            testing=bool(os.getenv("TESTING")),
            project_id=os.getenv("GOOGLE_CLOUD_PROJECT") or None,
            key_file=os.getenv("KEY_FILE_NAME") or None,
            collection=os.getenv("EVENTS_COLLECTION") or DEFAULT_COLLECTION,
        )
