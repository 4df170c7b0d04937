"""Tests for container wiring."""

from pathlib import Path

from nutrition_insights.config import Settings
from nutrition_insights.containers import build_container


def test_build_container_shares_store(settings: Settings) -> None:
    container = build_container(settings)

    assert container.store.path == Path(settings.data_path)
    assert container.meal_service.repository is container.store
    assert container.stats_service.profile_repository is container.store
    assert container.stats_service.today() is not None
