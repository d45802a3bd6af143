"""Pure day and week aggregations over food entries.

Day boundaries follow the given timezone, or the system local zone when
``tz`` is None.
"""

from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta, tzinfo

from meal_tracker.domain.entries import (
    DayGroup,
    DaySummary,
    FoodEntry,
    NutritionTotals,
)

WEEK_DAYS = 7


def local_day(moment: datetime, tz: tzinfo | None = None) -> date:
    """Return the calendar day of moment in tz."""
    return moment.astimezone(tz).date()


def filter_by_day(
    entries: Iterable[FoodEntry], day: date, tz: tzinfo | None = None
) -> list[FoodEntry]:
    """Return entries logged on the given calendar day."""
    target = _as_day(day, tz)
    return [entry for entry in entries if local_day(entry.date, tz) == target]


def totals(entries: Iterable[FoodEntry]) -> NutritionTotals:
    """Return summed calories and protein."""
    calories = 0
    protein = 0
    for entry in entries:
        calories += entry.calories
        protein += entry.protein
    return NutritionTotals(calories=calories, protein=protein)


def day_totals(
    entries: Iterable[FoodEntry], day: date, tz: tzinfo | None = None
) -> NutritionTotals:
    """Return totals for a single calendar day."""
    return totals(filter_by_day(entries, day, tz))


def progress(total: int, goal: int) -> float:
    """Return goal progress clamped to [0, 1]."""
    if goal <= 0:
        return 0.0
    return max(0.0, min(total / goal, 1.0))


def weekly_summary(
    entries: Sequence[FoodEntry],
    goal_calories: int,
    goal_protein: int,
    reference_day: date,
    tz: tzinfo | None = None,
) -> list[DaySummary]:
    """Return goal outcomes for the seven days ending at reference_day.

    Days are ordered oldest first. A day meets its goal only when both the
    calorie and the protein totals reach their targets.
    """
    end = _as_day(reference_day, tz)
    by_day = _bucket(entries, tz)
    summaries = []
    for offset in range(WEEK_DAYS - 1, -1, -1):
        day = end - timedelta(days=offset)
        day_total = totals(by_day.get(day, []))
        summaries.append(
            DaySummary(
                day=day,
                met_goal=day_total.calories >= goal_calories
                and day_total.protein >= goal_protein,
                totals=day_total,
            )
        )
    return summaries


def group_by_day(
    entries: Iterable[FoodEntry], tz: tzinfo | None = None
) -> list[DayGroup]:
    """Partition entries by day, most recent day first."""
    groups = []
    for day, day_entries in sorted(_bucket(entries, tz).items(), reverse=True):
        ordered = sorted(day_entries, key=lambda entry: entry.date, reverse=True)
        groups.append(
            DayGroup(day=day, entries=tuple(ordered), totals=totals(ordered))
        )
    return groups


def _bucket(
    entries: Iterable[FoodEntry], tz: tzinfo | None
) -> dict[date, list[FoodEntry]]:
    buckets: dict[date, list[FoodEntry]] = {}
    for entry in entries:
        buckets.setdefault(local_day(entry.date, tz), []).append(entry)
    return buckets


def _as_day(value: date, tz: tzinfo | None) -> date:
    if isinstance(value, datetime):
        return value.astimezone(tz).date()
    return value
