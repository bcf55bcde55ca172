"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Self

from event_tracker.domain.errors import InvalidEventDateError


def pad_date(value: str) -> str:
    """Zero-pad the month and day of a ``M/D/YYYY`` string."""
    parts = value.split("/")
    return f"{parts[0].zfill(2)}/{parts[1].zfill(2)}/{parts[2]}"


def create_sort_date(padded_date: str) -> str:
    """Turn a padded ``MM/DD/YYYY`` date into a ``YYYY-MM-DD`` sort key."""
    parts = padded_date.split("/")
    return f"{parts[2]}-{parts[0].zfill(2)}-{parts[1].zfill(2)}"


@dataclass(frozen=True)
class EventDate:
    """A calendar date in padded ``MM/DD/YYYY`` form."""

    value: str

    @classmethod
    def parse(cls, value: str) -> Self:
        """Validate a ``M/D/YYYY`` or ``MM/DD/YYYY`` string and pad it.

        Raises:
            InvalidEventDateError: If the string is not a real date in that shape.
        """
        if not isinstance(value, str):
            raise InvalidEventDateError(repr(value))
        parts = value.split("/")
        if len(parts) != 3 or not all(part.isdigit() for part in parts):
            raise InvalidEventDateError(value)
        month, day, year = parts
        if len(month) > 2 or len(day) > 2 or len(year) != 4:
            raise InvalidEventDateError(value)
        try:
            date(int(year), int(month), int(day))
        except ValueError as exc:
            raise InvalidEventDateError(value) from exc
        return cls(value=pad_date(value))

    @classmethod
    def from_date(cls, value: date) -> Self:
        return cls(value=pad_date(f"{value.month}/{value.day}/{value.year}"))

    @property
    def sort_date(self) -> str:
        return create_sort_date(self.value)

    def __str__(self) -> str:
        return self.value


class ReactionKind(Enum):
    """Counter fields that the reaction operation may touch."""

    LIKES = "likes"
    DISLIKES = "dislikes"

    @classmethod
    def lookup(cls, value: "str | ReactionKind") -> "ReactionKind | None":
        """Return the matching kind, or None for anything unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None
