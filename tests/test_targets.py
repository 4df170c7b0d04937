"""Tests for target calculation."""

from nutrition_insights.domain.models import NutritionTargets, UserProfile
from nutrition_insights.services.targets import (
    basal_metabolic_rate,
    compute_targets,
    round_half_up,
)
from tests.conftest import make_profile


def test_maintain_targets_match_reference_values() -> None:
    profile = make_profile("maintain")

    assert basal_metabolic_rate(profile) == 1642.5
    assert compute_targets(profile) == NutritionTargets(
        calories=2464, protein_g=185, carbs_g=246, fat_g=82
    )


def test_reduce_weight_subtracts_deficit() -> None:
    targets = compute_targets(make_profile("reduce_weight"))

    assert targets == NutritionTargets(
        calories=1964, protein_g=147, carbs_g=196, fat_g=65
    )


def test_build_muscle_adds_surplus() -> None:
    targets = compute_targets(make_profile("build_muscle"))

    assert targets == NutritionTargets(
        calories=2764, protein_g=207, carbs_g=276, fat_g=92
    )


def test_compute_targets_is_deterministic() -> None:
    profile = make_profile("build_muscle")

    assert compute_targets(profile) == compute_targets(profile)


def test_compute_targets_ignores_stored_targets() -> None:
    stale = NutritionTargets(calories=1, protein_g=1, carbs_g=1, fat_g=1)

    assert compute_targets(make_profile(targets=stale)).calories == 2464


def test_nonsensical_metrics_do_not_raise() -> None:
    profile = UserProfile(age=0, weight_kg=0, height_cm=0, goal="reduce_weight")

    targets = compute_targets(profile)

    assert targets.calories == -492


def test_round_half_up_rounds_halves_upward() -> None:
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(-0.5) == 0
