"""Tests for entry validation and collection transforms."""

from datetime import datetime
from uuid import uuid4

import pytest

from meal_tracker.domain.entries import EntryForm, MealType
from meal_tracker.errors import EntryNotFoundError, EntryValidationError
from meal_tracker.services.mutations import (
    add_entry,
    create_entry,
    delete_entry,
    edit_entry,
    parse_entry_form,
)
from tests.conftest import NEW_YORK, make_entry

EGGS = EntryForm(name="Eggs", calories=210, protein=18, meal_type=MealType.BREAKFAST)


def test_parse_entry_form_accepts_numeric_strings() -> None:
    form = parse_entry_form("  Chicken wrap ", "520", " 38 ", "Lunch")

    assert form == EntryForm(
        name="Chicken wrap", calories=520, protein=38, meal_type=MealType.LUNCH
    )


@pytest.mark.parametrize(
    ("name", "calories", "protein", "meal_type", "field"),
    [
        ("", "100", "5", "snack", "name"),
        ("   ", "100", "5", "snack", "name"),
        (None, "100", "5", "snack", "name"),
        ("Toast", "", "5", "snack", "calories"),
        ("Toast", None, "5", "snack", "calories"),
        ("Toast", "1O0", "5", "snack", "calories"),
        ("Toast", "12.5", "5", "snack", "calories"),
        ("Toast", "-1", "5", "snack", "calories"),
        ("Toast", "100", "abc", "snack", "protein"),
        ("Toast", "100", True, "snack", "protein"),
        ("Toast", "100", "5", "brunch", "meal_type"),
    ],
)
def test_parse_entry_form_rejects_bad_input(
    name: str | None,
    calories: object,
    protein: object,
    meal_type: str,
    field: str,
) -> None:
    with pytest.raises(EntryValidationError) as excinfo:
        parse_entry_form(name, calories, protein, meal_type)

    assert excinfo.value.field == field


def test_create_entry_assigns_id_and_timestamp() -> None:
    now = datetime(2025, 12, 5, 7, 45, tzinfo=NEW_YORK)
    first = create_entry(EGGS, now=now)
    second = create_entry(EGGS, now=now)

    assert first.date == now
    assert first.id != second.id
    assert first.name == "Eggs"


def test_create_entry_defaults_to_aware_now() -> None:
    assert create_entry(EGGS).date.tzinfo is not None


def test_create_entry_rejects_naive_timestamp() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        create_entry(EGGS, now=datetime(2025, 12, 5, 7, 45))


def test_add_entry_returns_new_collection() -> None:
    existing = (make_entry(),)
    entry = make_entry(name="Banana")

    updated = add_entry(existing, entry)

    assert updated == (existing[0], entry)
    assert existing == (existing[0],)


def test_add_entry_rejects_existing_id() -> None:
    entry = make_entry()

    with pytest.raises(ValueError, match="already exists"):
        add_entry([entry], entry)


def test_edit_preserves_id_date_and_size() -> None:
    target = make_entry(name="Rice", calories=200, protein=4)
    others = [make_entry(name="Soup"), make_entry(name="Bread")]
    entries = [others[0], target, others[1]]
    form = EntryForm(
        name="Brown rice", calories=220, protein=5, meal_type=MealType.DINNER
    )

    updated = edit_entry(entries, target.id, form)

    assert len(updated) == len(entries)
    edited = updated[1]
    assert edited.id == target.id
    assert edited.date == target.date
    assert (edited.name, edited.calories, edited.protein, edited.meal_type) == (
        "Brown rice",
        220,
        5,
        MealType.DINNER,
    )
    assert [updated[0], updated[2]] == others


def test_delete_removes_exactly_one_among_duplicates() -> None:
    twins = [make_entry(name="Coffee") for _ in range(3)]

    updated = delete_entry(twins, twins[1].id)

    assert len(updated) == 2
    assert list(updated) == [twins[0], twins[2]]


def test_edit_and_delete_unknown_id_raise() -> None:
    entries = [make_entry()]
    form = EntryForm(name="Tea", calories=0, protein=0, meal_type=MealType.SNACK)
    missing = uuid4()

    with pytest.raises(EntryNotFoundError):
        edit_entry(entries, missing, form)
    with pytest.raises(EntryNotFoundError):
        delete_entry(entries, missing)
