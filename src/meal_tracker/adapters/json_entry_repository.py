"""JSON file repository for food entries."""

from dataclasses import dataclass
from pathlib import Path
from uuid import UUID

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    TypeAdapter,
    ValidationError,
)

from meal_tracker.adapters.atomic_file import write_atomic
from meal_tracker.domain.entries import FoodEntry, MealType
from meal_tracker.errors import EntryReadError, EntryWriteError
from meal_tracker.services.entries import EntryRepository


class FoodEntryRecord(BaseModel):
    """On-disk shape of a food entry."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: UUID
    name: str = Field(min_length=1)
    calories: StrictInt = Field(ge=0)
    protein: StrictInt = Field(ge=0)
    meal_type: MealType = Field(alias="mealType")
    date: AwareDatetime = Field(strict=True)

    @classmethod
    def from_entry(cls, entry: FoodEntry) -> "FoodEntryRecord":
        return cls(
            id=entry.id,
            name=entry.name,
            calories=entry.calories,
            protein=entry.protein,
            meal_type=entry.meal_type,
            date=entry.date,
        )

    def to_entry(self) -> FoodEntry:
        return FoodEntry(
            id=self.id,
            name=self.name,
            calories=self.calories,
            protein=self.protein,
            meal_type=self.meal_type,
            date=self.date,
        )


_RECORDS = TypeAdapter(list[FoodEntryRecord])


def encode_entries(entries: list[FoodEntry]) -> bytes:
    """Serialize entries to the JSON array stored on disk."""
    records = [FoodEntryRecord.from_entry(entry) for entry in entries]
    return _RECORDS.dump_json(records, by_alias=True, indent=2)


def decode_entries(raw: bytes) -> list[FoodEntry]:
    """Parse the on-disk JSON array; raises ValueError when invalid."""
    records = _RECORDS.validate_json(raw)
    entries = [record.to_entry() for record in records]
    seen: set[UUID] = set()
    for entry in entries:
        if entry.id in seen:
            raise ValueError(f"duplicate entry id {entry.id}")
        seen.add(entry.id)
    return entries


@dataclass
class JsonEntryRepository(EntryRepository):
    """Stores the whole entry collection as one JSON file."""

    path: Path

    def read(self) -> list[FoodEntry]:
        """Return stored entries, or an empty list if the file is absent."""
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise EntryReadError(self.path, str(exc)) from exc
        try:
            return decode_entries(raw)
        except ValidationError as exc:
            raise EntryReadError(
                self.path, f"{exc.error_count()} validation error(s)"
            ) from exc
        except ValueError as exc:
            raise EntryReadError(self.path, str(exc)) from exc

    def write(self, entries: list[FoodEntry]) -> None:
        """Replace the file with the given entries."""
        try:
            data = encode_entries(entries)
        except ValidationError as exc:
            raise EntryWriteError(self.path, "entry failed validation") from exc
        try:
            write_atomic(self.path, data)
        except OSError as exc:
            raise EntryWriteError(self.path, str(exc)) from exc
