"""Rule-based nutrition recommendations."""

from nutrition_insights.domain.models import UserProfile
from nutrition_insights.domain.recommendations import Recommendation
from nutrition_insights.domain.stats import PeriodAnalytics
from nutrition_insights.services.targets import compute_targets, round_half_up

MAX_RECOMMENDATIONS = 5

CALORIE_DEFICIT_RATIO = 0.85
CALORIE_SURPLUS_RATIO = 1.15
PROTEIN_DEFICIT_RATIO = 0.8
CARBS_SURPLUS_RATIO = 1.3

MEAL_TIMING_TIP = Recommendation(
    id="5",
    title="Optimize Meal Timing",
    description=(
        "Try to eat at consistent times each day. Include protein with breakfast "
        "to stabilize blood sugar and reduce cravings throughout the day."
    ),
    category="timing",
    priority="medium",
)

HYDRATION_TIP = Recommendation(
    id="6",
    title="Stay Hydrated",
    description=(
        "Drink at least 8 glasses of water daily. Proper hydration supports "
        "metabolism, digestion, and helps control appetite."
    ),
    category="hydration",
    priority="medium",
)


def generate_recommendations(
    analytics: PeriodAnalytics, profile: UserProfile | None
) -> list[Recommendation]:
    """Return up to five recommendations in priority order.

    Targets are recomputed from the profile rather than read from its stored
    values. The timing and hydration tips always come last, so they drop out
    of the capped list when enough data-driven rules fire.
    """
    if profile is None:
        return []

    targets = compute_targets(profile)
    recommendations: list[Recommendation] = []

    if analytics.average_calories < targets.calories * CALORIE_DEFICIT_RATIO:
        shortfall = round_half_up(targets.calories - analytics.average_calories)
        recommendations.append(
            Recommendation(
                id="1",
                title="Increase Your Caloric Intake",
                description=(
                    f"You're consuming {shortfall} fewer calories than your "
                    "target. Consider adding nutrient-dense snacks like nuts, "
                    "avocados, or protein shakes."
                ),
                category="nutrition",
                priority="high",
            )
        )
    elif analytics.average_calories > targets.calories * CALORIE_SURPLUS_RATIO:
        excess = round_half_up(analytics.average_calories - targets.calories)
        recommendations.append(
            Recommendation(
                id="2",
                title="Reduce Caloric Surplus",
                description=(
                    f"You're consuming {excess} more calories than your target. "
                    "Try smaller portions or replace high-calorie snacks with "
                    "fruits and vegetables."
                ),
                category="nutrition",
                priority="high",
            )
        )

    if analytics.average_protein_g < targets.protein_g * PROTEIN_DEFICIT_RATIO:
        recommendations.append(
            Recommendation(
                id="3",
                title="Boost Your Protein Intake",
                description=(
                    f"Aim for {targets.protein_g}g of protein daily. Add lean "
                    "meats, fish, eggs, legumes, or protein powder to your meals, "
                    "especially at lunch and dinner."
                ),
                category="balance",
                priority="high",
            )
        )

    if analytics.average_carbs_g > targets.carbs_g * CARBS_SURPLUS_RATIO:
        recommendations.append(
            Recommendation(
                id="4",
                title="Balance Your Carbohydrate Intake",
                description=(
                    "Consider reducing refined carbs and sugary foods. Focus on "
                    "complex carbohydrates like whole grains, vegetables, and "
                    "legumes for sustained energy."
                ),
                category="balance",
                priority="medium",
            )
        )

    recommendations.append(MEAL_TIMING_TIP)
    recommendations.append(HYDRATION_TIP)
    return recommendations[:MAX_RECOMMENDATIONS]
