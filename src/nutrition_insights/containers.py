"""Dependency container wiring for the application."""

from dataclasses import dataclass
from functools import partial
from pathlib import Path

from nutrition_insights.adapters.json_store import JsonFileStore
from nutrition_insights.config import Settings
from nutrition_insights.services.meals import MealService
from nutrition_insights.services.profiles import ProfileService
from nutrition_insights.services.stats import StatsService, local_today


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: JsonFileStore
    profile_service: ProfileService
    meal_service: MealService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = JsonFileStore(Path(resolved_settings.data_path))
    stats_service = StatsService(
        meal_repository=store,
        profile_repository=store,
        today=partial(local_today, resolved_settings.timezone),
    )
    return AppContainer(
        settings=resolved_settings,
        store=store,
        profile_service=ProfileService(store),
        meal_service=MealService(store),
        stats_service=stats_service,
    )
