"""Domain models for meal logging."""

from dataclasses import dataclass
from typing import Literal

MealType = Literal["breakfast", "lunch", "dinner", "snack"]

MEAL_TYPES: tuple[MealType, ...] = ("breakfast", "lunch", "dinner", "snack")


@dataclass(frozen=True)
class MealEntry:
    """A single logged meal on a calendar day (``YYYY-MM-DD``)."""

    id: str
    date: str
    meal_type: MealType
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    notes: str | None = None
