"""Domain models representing persisted state.

The backing store is schema-less: fields it does not know about are carried
in ``extra`` and written back verbatim.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Self

KNOWN_FIELDS = ("title", "date", "sortDate", "likes", "dislikes")


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: str | None
    title: str | None = None
    date: str | None = None
    sort_date: str | None = None
    likes: int = 0
    dislikes: int = 0
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_document(cls, event_id: str | None, document: Mapping[str, Any]) -> Self:
        """Build an Event from a stored document; absent counters read as 0."""
        return cls(
            id=event_id,
            title=document.get("title"),
            date=document.get("date"),
            sort_date=document.get("sortDate"),
            likes=document.get("likes") or 0,
            dislikes=document.get("dislikes") or 0,
            extra={k: v for k, v in document.items() if k not in KNOWN_FIELDS and k != "id"},
        )

    def to_document(self) -> dict[str, Any]:
        """Return the stored form of the event, without its id."""
        document = dict(self.extra)
        document.update(
            title=self.title,
            date=self.date,
            sortDate=self.sort_date,
            likes=self.likes,
            dislikes=self.dislikes,
        )
        return document

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.to_document()}
