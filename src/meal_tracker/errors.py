"""Errors raised by the entry store and mutation helpers."""

from pathlib import Path
from uuid import UUID


class EntryReadError(Exception):
    """Backing file exists but could not be decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read entries from {path}: {reason}")
        self.path = path
        self.reason = reason


class EntryWriteError(Exception):
    """Entries could not be written to the backing file."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to save entries to {path}: {reason}")
        self.path = path
        self.reason = reason


class EntryValidationError(ValueError):
    """Raw form input could not be turned into an entry."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class EntryNotFoundError(LookupError):
    """No entry with the requested id exists in the collection."""

    def __init__(self, entry_id: UUID) -> None:
        super().__init__(f"Entry not found: {entry_id}")
        self.entry_id = entry_id
