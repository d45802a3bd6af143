"""Session-scoped working set of entries with explicit persistence."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from uuid import UUID

from meal_tracker.domain.entries import (
    DayGroup,
    DaySummary,
    EntryForm,
    FoodEntry,
    NutritionTotals,
)
from meal_tracker.domain.goals import Goals
from meal_tracker.errors import EntryWriteError
from meal_tracker.services import aggregation
from meal_tracker.services.entries import EntryStore
from meal_tracker.services.mutations import (
    add_entry,
    create_entry,
    delete_entry,
    edit_entry,
)

_logger = logging.getLogger(__name__)


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class SaveResult:
    """Outcome of persisting the working set."""

    saved: bool
    error: EntryWriteError | None = None


@dataclass(frozen=True)
class TodayView:
    """Today's entries with totals and goal progress."""

    entries: list[FoodEntry]
    totals: NutritionTotals
    calorie_progress: float
    protein_progress: float


@dataclass
class EntryLog:
    """Working set of entries for one session.

    Every mutation replaces the working set with a new collection and then
    persists it. A failed save keeps the working set and is reported through
    the returned SaveResult.
    """

    store: EntryStore
    tz: tzinfo | None = None
    clock: Callable[[], datetime] = _local_now
    _entries: tuple[FoodEntry, ...] = field(default=(), init=False)

    @property
    def entries(self) -> tuple[FoodEntry, ...]:
        return self._entries

    def load(self) -> tuple[FoodEntry, ...]:
        """Replace the working set with the stored collection."""
        self._entries = tuple(self.store.load_all())
        return self._entries

    def add(self, form: EntryForm) -> tuple[FoodEntry, SaveResult]:
        """Create an entry stamped with the current time and persist."""
        entry = create_entry(form, now=self.clock())
        self._entries = add_entry(self._entries, entry)
        return entry, self.persist()

    def edit(self, entry_id: UUID, form: EntryForm) -> SaveResult:
        """Replace an entry's fields, keeping its id and timestamp."""
        self._entries = edit_entry(self._entries, entry_id, form)
        return self.persist()

    def delete(self, entry_id: UUID) -> SaveResult:
        """Remove an entry permanently."""
        self._entries = delete_entry(self._entries, entry_id)
        return self.persist()

    def persist(self) -> SaveResult:
        """Write the working set; failures are reported, not raised."""
        try:
            self.store.save_all(self._entries)
        except EntryWriteError as exc:
            _logger.warning(
                "Working set kept in memory after failed save: count=%s",
                len(self._entries),
            )
            return SaveResult(saved=False, error=exc)
        return SaveResult(saved=True)

    def today(self, goals: Goals) -> TodayView:
        """Return today's entries, totals and goal progress."""
        day = aggregation.local_day(self.clock(), self.tz)
        entries = sorted(
            aggregation.filter_by_day(self._entries, day, self.tz),
            key=lambda entry: entry.date,
        )
        day_total = aggregation.totals(entries)
        return TodayView(
            entries=entries,
            totals=day_total,
            calorie_progress=aggregation.progress(day_total.calories, goals.calories),
            protein_progress=aggregation.progress(day_total.protein, goals.protein),
        )

    def week(self, goals: Goals) -> list[DaySummary]:
        """Return the seven-day goal summary ending today."""
        return aggregation.weekly_summary(
            self._entries,
            goals.calories,
            goals.protein,
            aggregation.local_day(self.clock(), self.tz),
            self.tz,
        )

    def history(self) -> list[DayGroup]:
        """Return entries grouped by day, most recent first."""
        return aggregation.group_by_day(self._entries, self.tz)
