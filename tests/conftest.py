"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from uuid import uuid4
from zoneinfo import ZoneInfo

import pytest

from meal_tracker.config import Settings
from meal_tracker.containers import AppContainer
from meal_tracker.domain.entries import FoodEntry, MealType
from meal_tracker.errors import EntryReadError, EntryWriteError
from meal_tracker.services.entries import EntryRepository, EntryStore
from meal_tracker.services.goals import GoalsRepository, GoalsService
from meal_tracker.services.journal import EntryLog

NEW_YORK = ZoneInfo("America/New_York")


def make_entry(  # noqa: PLR0913
    name: str = "Oatmeal",
    calories: int = 300,
    protein: int = 10,
    meal_type: MealType = MealType.BREAKFAST,
    date: datetime | None = None,
) -> FoodEntry:
    return FoodEntry(
        id=uuid4(),
        name=name,
        calories=calories,
        protein=protein,
        meal_type=meal_type,
        date=date or datetime(2025, 12, 5, 8, 30, tzinfo=NEW_YORK),
    )


@dataclass
class InMemoryEntryRepository(EntryRepository):
    """In-memory entry repository for tests."""

    stored: list[FoodEntry] = field(default_factory=list)
    writes: list[list[FoodEntry]] = field(default_factory=list)

    def read(self) -> list[FoodEntry]:
        return list(self.stored)

    def write(self, entries: list[FoodEntry]) -> None:
        self.stored = list(entries)
        self.writes.append(list(entries))


@dataclass
class CorruptEntryRepository(EntryRepository):
    """Repository whose stored data can never be decoded."""

    path: Path = Path("food_log.json")

    def read(self) -> list[FoodEntry]:
        raise EntryReadError(self.path, "invalid JSON")

    def write(self, entries: list[FoodEntry]) -> None:
        raise AssertionError("write should not be called")


@dataclass
class FailingEntryRepository(InMemoryEntryRepository):
    """Repository that rejects every write."""

    path: Path = Path("food_log.json")
    attempts: int = 0

    def write(self, entries: list[FoodEntry]) -> None:
        self.attempts += 1
        raise EntryWriteError(self.path, "No space left on device")


@dataclass
class InMemoryGoalsRepository(GoalsRepository):
    """In-memory goals repository for tests."""

    values: dict[str, int] = field(default_factory=dict)

    def get_int(self, key: str) -> int | None:
        return self.values.get(key)

    def set_int(self, key: str, value: int) -> None:
        self.values[key] = value


@dataclass
class FixedClock:
    """Clock that returns a settable instant."""

    now: datetime

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture(autouse=True)
def reset_app_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("meal_tracker")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path / "data", timezone="America/New_York")


@pytest.fixture
def entry_repository() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2025, 12, 5, 12, 0, tzinfo=NEW_YORK))


@pytest.fixture
def container(
    settings: Settings,
    entry_repository: InMemoryEntryRepository,
    clock: FixedClock,
) -> AppContainer:
    entry_store = EntryStore(entry_repository)
    return AppContainer(
        settings=settings,
        entry_store=entry_store,
        entry_log=EntryLog(store=entry_store, tz=NEW_YORK, clock=clock),
        goals_service=GoalsService(InMemoryGoalsRepository()),
    )
