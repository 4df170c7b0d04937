"""Tests for recommendation rules."""

from nutrition_insights.domain.stats import PeriodAnalytics
from nutrition_insights.services.recommendations import (
    MAX_RECOMMENDATIONS,
    generate_recommendations,
)
from tests.conftest import make_profile


def _analytics(calories: int, protein_g: int, carbs_g: int) -> PeriodAnalytics:
    return PeriodAnalytics(
        daily=[],
        average_calories=calories,
        average_protein_g=protein_g,
        average_carbs_g=carbs_g,
        average_fat_g=0,
        trend="on_target",
    )


def test_no_profile_returns_empty_list() -> None:
    assert generate_recommendations(_analytics(0, 0, 0), None) == []


def test_on_target_intake_only_gets_general_tips() -> None:
    recommendations = generate_recommendations(
        _analytics(2464, 185, 246), make_profile()
    )

    assert [item.id for item in recommendations] == ["5", "6"]
    assert [item.category for item in recommendations] == ["timing", "hydration"]


def test_low_intake_flags_calories_and_protein() -> None:
    recommendations = generate_recommendations(_analytics(0, 0, 0), make_profile())

    assert [item.id for item in recommendations] == ["1", "3", "5", "6"]
    assert "2464 fewer calories" in recommendations[0].description
    assert recommendations[0].priority == "high"
    assert "Aim for 185g of protein" in recommendations[1].description


def test_surplus_and_carbs_rules() -> None:
    recommendations = generate_recommendations(
        _analytics(3000, 200, 400), make_profile()
    )

    assert [item.id for item in recommendations] == ["2", "4", "5", "6"]
    assert "536 more calories" in recommendations[0].description
    assert recommendations[1].priority == "medium"


def test_targets_come_from_profile_metrics_not_stored_values() -> None:
    recommendations = generate_recommendations(
        _analytics(1500, 150, 200), make_profile("reduce_weight")
    )

    assert "464 fewer calories" in recommendations[0].description


def test_result_is_capped_in_construction_order() -> None:
    recommendations = generate_recommendations(
        _analytics(0, 0, 400), make_profile()
    )

    assert len(recommendations) == MAX_RECOMMENDATIONS
    assert [item.id for item in recommendations] == ["1", "3", "4", "5", "6"]
