"""Domain models for daily goals."""

from dataclasses import dataclass

DEFAULT_CALORIE_GOAL = 2300
DEFAULT_PROTEIN_GOAL = 150


@dataclass(frozen=True)
class GoalRange:
    """Valid range and stepper granularity for a goal."""

    minimum: int
    maximum: int
    step: int

    def clamp(self, value: int) -> int:
        """Return value limited to the range."""
        return max(self.minimum, min(value, self.maximum))

    def step_from(self, value: int, direction: int) -> int:
        """Move value one step up (direction > 0) or down and clamp."""
        if direction == 0:
            return self.clamp(value)
        delta = self.step if direction > 0 else -self.step
        return self.clamp(value + delta)


CALORIE_GOAL_RANGE = GoalRange(minimum=0, maximum=10000, step=50)
PROTEIN_GOAL_RANGE = GoalRange(minimum=0, maximum=400, step=5)


@dataclass(frozen=True)
class Goals:
    """Daily calorie and protein targets."""

    calories: int = DEFAULT_CALORIE_GOAL
    protein: int = DEFAULT_PROTEIN_GOAL
