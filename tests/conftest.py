"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

import pytest

from nutrition_insights.config import Settings
from nutrition_insights.containers import AppContainer, build_container
from nutrition_insights.domain.meals import MealEntry
from nutrition_insights.domain.models import NutritionTargets, UserProfile
from nutrition_insights.services.meals import MealRepository
from nutrition_insights.services.profiles import ProfileRepository

TODAY = date(2024, 1, 7)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profile: UserProfile | None = None

    def get_profile(self) -> UserProfile | None:
        return self.profile

    def set_profile(self, profile: UserProfile) -> None:
        self.profile = profile


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: list[MealEntry] = field(default_factory=list)

    def list_meals(self) -> list[MealEntry]:
        return list(self.meals)

    def add_meal(self, meal: MealEntry) -> None:
        self.meals.append(meal)

    def update_meal(self, meal_id: str, meal: MealEntry) -> bool:
        for index, existing in enumerate(self.meals):
            if existing.id == meal_id:
                self.meals[index] = meal
                return True
        return False

    def delete_meal(self, meal_id: str) -> None:
        self.meals = [meal for meal in self.meals if meal.id != meal_id]


def make_meal(  # noqa: PLR0913
    day: str,
    calories: float = 0,
    protein_g: float = 0,
    carbs_g: float = 0,
    fat_g: float = 0,
    *,
    meal_id: str = "meal-1",
    meal_type: str = "lunch",
    name: str = "Chicken salad",
) -> MealEntry:
    return MealEntry(
        id=meal_id,
        date=day,
        meal_type=meal_type,
        name=name,
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
    )


def make_profile(
    goal: str = "maintain", targets: NutritionTargets | None = None
) -> UserProfile:
    return UserProfile(
        age=25,
        weight_kg=70,
        height_cm=170,
        goal=goal,
        allergies=["peanuts"],
        dietary_preference="none",
        targets=targets,
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_path=str(tmp_path / "store.json"), timezone="UTC")


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    built = build_container(settings)
    built.stats_service.today = lambda: TODAY
    return built
