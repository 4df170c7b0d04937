"""Meal logging service."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import uuid4

from nutrition_insights.domain.meals import MEAL_TYPES, MealEntry

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for logged meals."""

    def list_meals(self) -> list[MealEntry]:
        """Return all meals in insertion order."""

    def add_meal(self, meal: MealEntry) -> None:
        """Append a meal."""

    def update_meal(self, meal_id: str, meal: MealEntry) -> bool:
        """Replace the meal with ``meal_id``; return False when it is missing."""

    def delete_meal(self, meal_id: str) -> None:
        """Remove meals with ``meal_id``."""


@dataclass
class MealService:
    """Service for adding, editing and removing logged meals."""

    repository: MealRepository

    def add_meal(self, meal: MealEntry) -> MealEntry:
        """Store a new meal, generating an id when it has none."""
        _check_meal(meal)
        created = meal if meal.id else replace(meal, id=str(uuid4()))
        self.repository.add_meal(created)
        _logger.info("Meal added: id=%s date=%s", created.id, created.date)
        return created

    def update_meal(self, meal: MealEntry) -> MealEntry | None:
        """Replace the stored meal with the same id.

        Returns None and stores nothing when no meal has that id.
        """
        _check_meal(meal)
        if not self.repository.update_meal(meal.id, meal):
            return None
        _logger.info("Meal updated: id=%s", meal.id)
        return meal

    def delete_meal(self, meal_id: str) -> None:
        """Delete a meal by id."""
        self.repository.delete_meal(meal_id)
        _logger.info("Meal deleted: id=%s", meal_id)

    def list_meals(self, day: str | None = None) -> list[MealEntry]:
        """Return all meals, or only those logged on ``day``."""
        meals = self.repository.list_meals()
        if day is None:
            return meals
        return [meal for meal in meals if meal.date == day]


def _check_meal(meal: MealEntry) -> None:
    if not meal.name.strip():
        raise ValueError("Meal name is required")
    if not meal.date:
        raise ValueError("Meal date is required")
    if meal.meal_type not in MEAL_TYPES:
        raise ValueError(f"Unknown meal type: {meal.meal_type}")
    for label, value in (
        ("calories", meal.calories),
        ("protein", meal.protein_g),
        ("carbs", meal.carbs_g),
        ("fat", meal.fat_g),
    ):
        if value < 0:
            raise ValueError(f"{label.capitalize()} must not be negative")
