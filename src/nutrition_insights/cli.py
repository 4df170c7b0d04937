"""
Command line interface for the nutrition tracker.

Usage:
    nutrition-insights profile set --age 25 --weight 70 --height 170 --goal maintain
    nutrition-insights profile show
    nutrition-insights meal add --date 2024-01-01 --type lunch --name Salad ...
    nutrition-insights meal update <id> --date 2024-01-01 --type lunch ...
    nutrition-insights meal delete <id>
    nutrition-insights day [--date 2024-01-01]
    nutrition-insights analytics [--period 7days]
    nutrition-insights recommendations
    nutrition-insights clear
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from nutrition_insights.app_logging import configure_logging
from nutrition_insights.containers import AppContainer, build_container
from nutrition_insights.domain.meals import MEAL_TYPES, MealEntry
from nutrition_insights.domain.models import GOALS, UserProfile
from nutrition_insights.domain.stats import PERIODS
from nutrition_insights.services.profiles import parse_allergies
from nutrition_insights.services.stats import chart_points

if TYPE_CHECKING:
    from collections.abc import Sequence

_logger = logging.getLogger(__name__)

_TREND_LABELS = {
    "above": "above target",
    "below": "below target",
    "on_target": "on target",
}


def cmd_profile_set(args: argparse.Namespace, container: AppContainer) -> int:
    """Save the profile and print the computed targets."""
    profile = container.profile_service.save_profile(
        UserProfile(
            age=args.age,
            weight_kg=args.weight,
            height_cm=args.height,
            goal=args.goal,
            allergies=parse_allergies(args.allergies),
            dietary_preference=args.diet or "",
        )
    )
    print("Profile saved.")
    _print_profile(profile)
    return 0


def cmd_profile_show(args: argparse.Namespace, container: AppContainer) -> int:
    """Print the stored profile."""
    profile = container.profile_service.get_profile()
    if profile is None:
        print("No profile yet. Run 'profile set' first.")
        return 1
    _print_profile(profile)
    return 0


def cmd_meal_add(args: argparse.Namespace, container: AppContainer) -> int:
    """Log a meal."""
    meal = container.meal_service.add_meal(_meal_from_args(args, meal_id=""))
    print(f"Added {meal.name} ({meal.id})")
    return 0


def cmd_meal_update(args: argparse.Namespace, container: AppContainer) -> int:
    """Replace a logged meal."""
    meal = container.meal_service.update_meal(_meal_from_args(args, meal_id=args.id))
    if meal is None:
        print(f"Meal not found: {args.id}")
        return 1
    print(f"Updated {meal.name} ({meal.id})")
    return 0


def cmd_meal_delete(args: argparse.Namespace, container: AppContainer) -> int:
    """Delete a logged meal."""
    container.meal_service.delete_meal(args.id)
    print(f"Deleted {args.id}")
    return 0


def cmd_day(args: argparse.Namespace, container: AppContainer) -> int:
    """Print meals and totals for a day."""
    view = container.stats_service.get_day(args.date)
    profile = container.profile_service.get_profile()

    print(f"Meals for {view.day}")
    if not view.meals:
        print("  No meals logged.")
    for meal in view.meals:
        print(
            f"  [{meal.meal_type}] {meal.name}: {meal.calories:g} kcal, "
            f"P {meal.protein_g:g}g, C {meal.carbs_g:g}g, F {meal.fat_g:g}g"
            f"  ({meal.id})"
        )

    totals = view.totals
    targets = profile.targets if profile else None
    rows = (
        ("Calories", totals.total_calories, targets.calories if targets else None),
        ("Protein", totals.total_protein_g, targets.protein_g if targets else None),
        ("Carbs", totals.total_carbs_g, targets.carbs_g if targets else None),
        ("Fat", totals.total_fat_g, targets.fat_g if targets else None),
    )
    print("Totals")
    for label, value, target in rows:
        print(f"  {label}: {_progress(value, target)}")

    print("Week")
    for entry in view.week:
        print(f"  {entry.date}: {entry.total_calories:g} kcal")
    return 0


def cmd_analytics(args: argparse.Namespace, container: AppContainer) -> int:
    """Print averages, trend and the calorie series for a period."""
    analytics = container.stats_service.get_period(args.period)
    profile = container.profile_service.get_profile()
    targets = profile.targets if profile else None

    print(f"Averages ({args.period})")
    print(f"  Calories: {analytics.average_calories}")
    print(f"  Protein:  {analytics.average_protein_g}g")
    print(f"  Carbs:    {analytics.average_carbs_g}g")
    print(f"  Fat:      {analytics.average_fat_g}g")
    if targets:
        print(
            f"  Target: {targets.calories} kcal, "
            f"{_TREND_LABELS[analytics.trend]}"
        )

    points = chart_points(analytics, args.period)
    print("Calories")
    if not points:
        print("  No data for this period.")
    for label, calories in points:
        print(f"  {label}: {calories:g}")
    return 0


def cmd_recommendations(args: argparse.Namespace, container: AppContainer) -> int:
    """Print recommendations for the last 7 days."""
    recommendations = container.stats_service.get_recommendations()
    if not recommendations:
        print("Set up your profile to get personalized recommendations.")
        return 0
    for recommendation in recommendations:
        print(f"[{recommendation.priority}] {recommendation.title}")
        print(f"  {recommendation.description}")
    return 0


def cmd_clear(args: argparse.Namespace, container: AppContainer) -> int:
    """Remove all stored data."""
    container.store.clear_all()
    _logger.info("All data cleared")
    print("All data cleared.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="nutrition-insights",
        description="Track meals and review nutrition trends",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    profile = commands.add_parser("profile", help="Manage your profile")
    profile_commands = profile.add_subparsers(dest="profile_command", required=True)
    profile_set = profile_commands.add_parser("set", help="Save profile and targets")
    profile_set.add_argument("--age", type=int, required=True)
    profile_set.add_argument("--weight", type=float, required=True, help="kg")
    profile_set.add_argument("--height", type=float, required=True, help="cm")
    profile_set.add_argument("--goal", choices=GOALS, default="maintain")
    profile_set.add_argument("--allergies", help="Comma-separated list")
    profile_set.add_argument("--diet", help="Dietary preference")
    profile_set.set_defaults(handler=cmd_profile_set)
    profile_show = profile_commands.add_parser("show", help="Show profile")
    profile_show.set_defaults(handler=cmd_profile_show)

    meal = commands.add_parser("meal", help="Log and edit meals")
    meal_commands = meal.add_subparsers(dest="meal_command", required=True)
    meal_add = meal_commands.add_parser("add", help="Log a meal")
    _add_meal_arguments(meal_add)
    meal_add.set_defaults(handler=cmd_meal_add)
    meal_update = meal_commands.add_parser("update", help="Replace a meal")
    meal_update.add_argument("id")
    _add_meal_arguments(meal_update)
    meal_update.set_defaults(handler=cmd_meal_update)
    meal_delete = meal_commands.add_parser("delete", help="Delete a meal")
    meal_delete.add_argument("id")
    meal_delete.set_defaults(handler=cmd_meal_delete)

    day = commands.add_parser("day", help="Show a day's meals and totals")
    day.add_argument("--date", help="YYYY-MM-DD, defaults to today")
    day.set_defaults(handler=cmd_day)

    analytics = commands.add_parser("analytics", help="Show period analytics")
    analytics.add_argument("--period", choices=PERIODS, default="7days")
    analytics.set_defaults(handler=cmd_analytics)

    recommendations = commands.add_parser(
        "recommendations", help="Show recommendations"
    )
    recommendations.set_defaults(handler=cmd_recommendations)

    clear = commands.add_parser("clear", help="Delete all stored data")
    clear.set_defaults(handler=cmd_clear)
    return parser


def main(
    argv: Sequence[str] | None = None, container: AppContainer | None = None
) -> int:
    """Run the CLI and return an exit status."""
    args = build_parser().parse_args(argv)
    resolved = container or build_container()
    configure_logging(resolved.settings.log_level)
    try:
        return args.handler(args, resolved)
    except (ValueError, RuntimeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def _add_meal_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--date", required=True, help="YYYY-MM-DD")
    parser.add_argument("--type", dest="meal_type", choices=MEAL_TYPES, required=True)
    parser.add_argument("--name", required=True)
    parser.add_argument("--calories", type=float, default=0.0)
    parser.add_argument("--protein", type=float, default=0.0)
    parser.add_argument("--carbs", type=float, default=0.0)
    parser.add_argument("--fat", type=float, default=0.0)
    parser.add_argument("--notes")


def _meal_from_args(args: argparse.Namespace, meal_id: str) -> MealEntry:
    return MealEntry(
        id=meal_id,
        date=args.date,
        meal_type=args.meal_type,
        name=args.name,
        calories=args.calories,
        protein_g=args.protein,
        carbs_g=args.carbs,
        fat_g=args.fat,
        notes=args.notes,
    )


def _print_profile(profile: UserProfile) -> None:
    print(f"  Age: {profile.age}")
    print(f"  Weight: {profile.weight_kg:g} kg")
    print(f"  Height: {profile.height_cm:g} cm")
    print(f"  Goal: {profile.goal}")
    if profile.allergies:
        print(f"  Allergies: {', '.join(profile.allergies)}")
    if profile.dietary_preference:
        print(f"  Diet: {profile.dietary_preference}")
    if profile.targets:
        targets = profile.targets
        print(
            f"  Daily targets: {targets.calories} kcal, P {targets.protein_g}g, "
            f"C {targets.carbs_g}g, F {targets.fat_g}g"
        )


def _progress(value: float, target: int | None) -> str:
    if not target:
        return f"{value:g}"
    percent = min(100, round(value / target * 100))
    return f"{value:g} / {target} ({percent}%)"


if __name__ == "__main__":
    sys.exit(main())
