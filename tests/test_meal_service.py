"""Tests for meal service."""

from dataclasses import replace

import pytest

from nutrition_insights.services.meals import MealService
from tests.conftest import InMemoryMealRepository, make_meal


def test_add_meal_generates_id_when_missing(
    meal_repository: InMemoryMealRepository,
) -> None:
    service = MealService(meal_repository)

    created = service.add_meal(make_meal("2024-01-01", 400, meal_id=""))

    assert created.id
    assert meal_repository.meals == [created]


def test_add_meal_keeps_caller_id(meal_repository: InMemoryMealRepository) -> None:
    service = MealService(meal_repository)

    created = service.add_meal(make_meal("2024-01-01", 400, meal_id="abc"))

    assert created.id == "abc"


def test_update_meal_replaces_whole_record(
    meal_repository: InMemoryMealRepository,
) -> None:
    service = MealService(meal_repository)
    original = service.add_meal(make_meal("2024-01-01", 400))

    updated = service.update_meal(
        replace(original, name="Tuna salad", calories=350, date="2024-01-02")
    )

    assert updated is not None
    assert meal_repository.meals[0].name == "Tuna salad"
    assert meal_repository.meals[0].date == "2024-01-02"


def test_update_unknown_meal_is_noop(meal_repository: InMemoryMealRepository) -> None:
    service = MealService(meal_repository)
    service.add_meal(make_meal("2024-01-01", 400))

    result = service.update_meal(make_meal("2024-01-01", 999, meal_id="missing"))

    assert result is None
    assert meal_repository.meals[0].calories == 400


def test_delete_and_list_by_day(meal_repository: InMemoryMealRepository) -> None:
    service = MealService(meal_repository)
    service.add_meal(make_meal("2024-01-01", 400, meal_id="a"))
    service.add_meal(make_meal("2024-01-01", 200, meal_id="b"))
    service.add_meal(make_meal("2024-01-02", 300, meal_id="c"))

    service.delete_meal("a")

    assert [meal.id for meal in service.list_meals("2024-01-01")] == ["b"]
    assert len(service.list_meals()) == 2


@pytest.mark.parametrize(
    ("changes", "message"),
    [
        ({"name": "  "}, "name is required"),
        ({"calories": -1}, "Calories must not be negative"),
        ({"fat_g": -0.5}, "Fat must not be negative"),
        ({"meal_type": "brunch"}, "Unknown meal type"),
    ],
)
def test_add_meal_presence_checks(
    meal_repository: InMemoryMealRepository, changes: dict, message: str
) -> None:
    service = MealService(meal_repository)

    with pytest.raises(ValueError, match=message):
        service.add_meal(replace(make_meal("2024-01-01", 100), **changes))

    assert meal_repository.meals == []
