"""Domain models for logged food entries."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class MealType(Enum):
    """Meal slot an entry was logged under."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @property
    def display_name(self) -> str:
        """Return the label shown to the user."""
        return self.value.capitalize()


@dataclass(frozen=True)
class FoodEntry:
    """A single logged meal."""

    id: UUID
    name: str
    calories: int
    protein: int
    meal_type: MealType
    date: datetime


@dataclass(frozen=True)
class EntryForm:
    """Validated user input for creating or editing an entry."""

    name: str
    calories: int
    protein: int
    meal_type: MealType


@dataclass(frozen=True)
class NutritionTotals:
    """Summed calories and protein."""

    calories: int
    protein: int


@dataclass(frozen=True)
class DaySummary:
    """Goal outcome for one calendar day."""

    day: date
    met_goal: bool
    totals: NutritionTotals


@dataclass(frozen=True)
class DayGroup:
    """Entries logged on one calendar day."""

    day: date
    entries: tuple[FoodEntry, ...]
    totals: NutritionTotals
