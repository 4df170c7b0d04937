"""Domain models for the user profile."""

from dataclasses import dataclass, field
from typing import Literal

Goal = Literal["reduce_weight", "build_muscle", "maintain"]

GOALS: tuple[Goal, ...] = ("reduce_weight", "build_muscle", "maintain")


@dataclass(frozen=True)
class NutritionTargets:
    """Daily calorie and macro targets."""

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class UserProfile:
    """Body metrics, goal and preferences for the single local user.

    ``targets`` is either absent or fully populated; the four values are
    always computed together when the profile is saved.
    """

    age: int
    weight_kg: float
    height_cm: float
    goal: Goal
    allergies: list[str] = field(default_factory=list)
    dietary_preference: str = ""
    targets: NutritionTargets | None = None
