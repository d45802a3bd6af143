"""Entry store: durable load and save of the entry collection."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from meal_tracker.domain.entries import FoodEntry
from meal_tracker.errors import EntryReadError, EntryWriteError

_logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for the full entry collection."""

    def read(self) -> list[FoodEntry]:
        """Return all stored entries; empty when nothing is stored.

        Raises EntryReadError when stored data cannot be decoded.
        """

    def write(self, entries: list[FoodEntry]) -> None:
        """Replace all stored entries.

        Raises EntryWriteError when the collection cannot be written.
        """


class DecodePolicy(Enum):
    """What load_all does with undecodable stored data."""

    FAIL_OPEN = "fail_open"
    FAIL_CLOSED = "fail_closed"


@dataclass
class EntryStore:
    """Sole owner of the durable entry collection."""

    repository: EntryRepository
    decode_policy: DecodePolicy = DecodePolicy.FAIL_OPEN

    def load_all(self) -> list[FoodEntry]:
        """Return all stored entries.

        Under FAIL_OPEN an unreadable store is logged and treated as empty;
        under FAIL_CLOSED the EntryReadError propagates.
        """
        try:
            entries = self.repository.read()
        except EntryReadError as exc:
            if self.decode_policy is DecodePolicy.FAIL_CLOSED:
                raise
            _logger.error("Ignoring unreadable entries: %s", exc)
            return []
        _logger.info("Loaded entries: count=%s", len(entries))
        return entries

    def save_all(self, entries: Sequence[FoodEntry]) -> None:
        """Persist the whole collection, replacing what was stored."""
        _ensure_unique_ids(entries)
        try:
            self.repository.write(list(entries))
        except EntryWriteError:
            _logger.exception("Failed to save entries: count=%s", len(entries))
            raise
        _logger.info("Saved entries: count=%s", len(entries))


def _ensure_unique_ids(entries: Sequence[FoodEntry]) -> None:
    seen = set()
    for entry in entries:
        if entry.id in seen:
            raise ValueError(f"Duplicate entry id: {entry.id}")
        seen.add(entry.id)
