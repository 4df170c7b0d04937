"""Daily calorie and macro target calculation."""

import math

from nutrition_insights.domain.models import NutritionTargets, UserProfile

ACTIVITY_MULTIPLIER = 1.5

_GOAL_ADJUSTMENTS = {
    "reduce_weight": -500.0,
    "build_muscle": 300.0,
    "maintain": 0.0,
}

# share of calories, kcal per gram
_PROTEIN_SPLIT = (0.30, 4)
_CARBS_SPLIT = (0.40, 4)
_FAT_SPLIT = (0.30, 9)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def basal_metabolic_rate(profile: UserProfile) -> float:
    """Return the Mifflin-St Jeor estimate for the profile."""
    return (
        10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age + 5
    )


def compute_targets(profile: UserProfile) -> NutritionTargets:
    """Return daily targets for a profile.

    Inputs are not validated: non-positive metrics produce a meaningless but
    well-formed result. Macro grams are derived from the unrounded calorie
    value and rounded independently, so they need not reconcile exactly with
    the rounded calorie total.
    """
    calories = basal_metabolic_rate(profile) * ACTIVITY_MULTIPLIER
    calories += _GOAL_ADJUSTMENTS.get(profile.goal, 0.0)
    return NutritionTargets(
        calories=round_half_up(calories),
        protein_g=_macro_grams(calories, _PROTEIN_SPLIT),
        carbs_g=_macro_grams(calories, _CARBS_SPLIT),
        fat_g=_macro_grams(calories, _FAT_SPLIT),
    )


def _macro_grams(calories: float, split: tuple[float, int]) -> int:
    share, kcal_per_gram = split
    return round_half_up(calories * share / kcal_per_gram)
