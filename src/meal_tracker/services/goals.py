"""Goal settings service."""

from dataclasses import dataclass
from typing import Protocol

from meal_tracker.domain.goals import (
    CALORIE_GOAL_RANGE,
    DEFAULT_CALORIE_GOAL,
    DEFAULT_PROTEIN_GOAL,
    PROTEIN_GOAL_RANGE,
    Goals,
)

CALORIE_GOAL_KEY = "calorieGoal"
PROTEIN_GOAL_KEY = "proteinGoal"


class GoalsRepository(Protocol):
    """Key-value persistence for integer settings."""

    def get_int(self, key: str) -> int | None:
        """Return the stored value for key, if any."""

    def set_int(self, key: str, value: int) -> None:
        """Store value under key."""


@dataclass
class GoalsService:
    """Service for reading and adjusting daily goals."""

    repository: GoalsRepository

    def get_goals(self) -> Goals:
        """Return current goals, falling back to defaults for unset values."""
        calories = self.repository.get_int(CALORIE_GOAL_KEY)
        protein = self.repository.get_int(PROTEIN_GOAL_KEY)
        return Goals(
            calories=DEFAULT_CALORIE_GOAL if calories is None else calories,
            protein=DEFAULT_PROTEIN_GOAL if protein is None else protein,
        )

    def set_calorie_goal(self, value: int) -> int:
        """Persist a calorie goal clamped to its range and return it."""
        clamped = CALORIE_GOAL_RANGE.clamp(value)
        self.repository.set_int(CALORIE_GOAL_KEY, clamped)
        return clamped

    def set_protein_goal(self, value: int) -> int:
        """Persist a protein goal clamped to its range and return it."""
        clamped = PROTEIN_GOAL_RANGE.clamp(value)
        self.repository.set_int(PROTEIN_GOAL_KEY, clamped)
        return clamped

    def step_calorie_goal(self, direction: int) -> int:
        current = self.get_goals().calories
        return self.set_calorie_goal(CALORIE_GOAL_RANGE.step_from(current, direction))

    def step_protein_goal(self, direction: int) -> int:
        current = self.get_goals().protein
        return self.set_protein_goal(PROTEIN_GOAL_RANGE.step_from(current, direction))
