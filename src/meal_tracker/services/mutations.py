"""Pure transforms over the entry collection and input validation."""

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime
from uuid import UUID, uuid4

from meal_tracker.domain.entries import EntryForm, FoodEntry, MealType
from meal_tracker.errors import EntryNotFoundError, EntryValidationError


def parse_entry_form(
    name: str | None,
    calories: object,
    protein: object,
    meal_type: MealType | str = MealType.BREAKFAST,
) -> EntryForm:
    """Validate raw form input; raises EntryValidationError on bad input."""
    cleaned_name = (name or "").strip()
    if not cleaned_name:
        raise EntryValidationError("name", "must not be empty")
    return EntryForm(
        name=cleaned_name,
        calories=_parse_amount("calories", calories),
        protein=_parse_amount("protein", protein),
        meal_type=_parse_meal_type(meal_type),
    )


def create_entry(form: EntryForm, *, now: datetime | None = None) -> FoodEntry:
    """Build a new entry with a fresh id stamped with the current time."""
    logged_at = now or datetime.now().astimezone()
    if logged_at.tzinfo is None:
        raise ValueError("Entry timestamp must be timezone-aware")
    return FoodEntry(
        id=uuid4(),
        name=form.name,
        calories=form.calories,
        protein=form.protein,
        meal_type=form.meal_type,
        date=logged_at,
    )


def add_entry(
    entries: Sequence[FoodEntry], entry: FoodEntry
) -> tuple[FoodEntry, ...]:
    """Return a new collection with entry appended."""
    if any(existing.id == entry.id for existing in entries):
        raise ValueError(f"Entry already exists: {entry.id}")
    return (*entries, entry)


def edit_entry(
    entries: Sequence[FoodEntry], entry_id: UUID, form: EntryForm
) -> tuple[FoodEntry, ...]:
    """Return a new collection with one entry's fields replaced.

    The entry keeps its id and original timestamp.
    """
    _require(entries, entry_id)
    return tuple(
        replace(
            entry,
            name=form.name,
            calories=form.calories,
            protein=form.protein,
            meal_type=form.meal_type,
        )
        if entry.id == entry_id
        else entry
        for entry in entries
    )


def delete_entry(
    entries: Sequence[FoodEntry], entry_id: UUID
) -> tuple[FoodEntry, ...]:
    """Return a new collection without the entry with entry_id."""
    _require(entries, entry_id)
    return tuple(entry for entry in entries if entry.id != entry_id)


def find_entry(entries: Sequence[FoodEntry], entry_id: UUID) -> FoodEntry | None:
    for entry in entries:
        if entry.id == entry_id:
            return entry
    return None


def _require(entries: Sequence[FoodEntry], entry_id: UUID) -> None:
    if find_entry(entries, entry_id) is None:
        raise EntryNotFoundError(entry_id)


def _parse_amount(field: str, value: object) -> int:
    if value is None or isinstance(value, bool):
        raise EntryValidationError(field, "is required")
    if isinstance(value, int):
        amount = value
    elif isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            raise EntryValidationError(field, "is required")
        try:
            amount = int(cleaned)
        except ValueError as exc:
            raise EntryValidationError(field, "must be a whole number") from exc
    else:
        raise EntryValidationError(field, "must be a whole number")
    if amount < 0:
        raise EntryValidationError(field, "must not be negative")
    return amount


def _parse_meal_type(value: MealType | str) -> MealType:
    if isinstance(value, MealType):
        return value
    choices = ", ".join(meal.value for meal in MealType)
    if not isinstance(value, str):
        raise EntryValidationError("meal_type", f"must be one of {choices}")
    try:
        return MealType(value.strip().lower())
    except ValueError as exc:
        raise EntryValidationError(
            "meal_type", f"must be one of {choices}"
        ) from exc
