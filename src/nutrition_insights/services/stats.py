"""Statistics over logged meals: daily totals, period analytics, trends."""

import logging
from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from nutrition_insights.domain.meals import MealEntry
from nutrition_insights.domain.models import UserProfile
from nutrition_insights.domain.recommendations import Recommendation
from nutrition_insights.domain.stats import DailyStats, PeriodAnalytics, Trend
from nutrition_insights.services.meals import MealRepository
from nutrition_insights.services.profiles import ProfileRepository
from nutrition_insights.services.recommendations import generate_recommendations
from nutrition_insights.services.targets import round_half_up

_PERIOD_DAYS = {
    "7days": 7,
    "1month": 30,
    "6months": 180,
    "1year": 365,
}

TREND_TOLERANCE = 0.10

_logger = logging.getLogger(__name__)


def period_days(period: str) -> int:
    """Return the fixed day count of a period selector."""
    try:
        return _PERIOD_DAYS[period]
    except KeyError:
        raise ValueError(f"Unknown period: {period}") from None


def window_dates(days: int, today: date) -> list[str]:
    """Return ISO dates for the ``days`` days ending on ``today``, oldest first."""
    return [
        (today - timedelta(days=offset)).isoformat()
        for offset in range(days - 1, -1, -1)
    ]


def daily_stats(meals: Iterable[MealEntry], day: str) -> DailyStats:
    """Sum macros of the meals whose date is exactly ``day``."""
    total = DailyStats(
        date=day,
        total_calories=0,
        total_protein_g=0,
        total_carbs_g=0,
        total_fat_g=0,
    )
    for meal in meals:
        if meal.date != day:
            continue
        total = DailyStats(
            date=day,
            total_calories=total.total_calories + meal.calories,
            total_protein_g=total.total_protein_g + meal.protein_g,
            total_carbs_g=total.total_carbs_g + meal.carbs_g,
            total_fat_g=total.total_fat_g + meal.fat_g,
        )
    return total


def period_analytics(
    meals: Iterable[MealEntry],
    profile: UserProfile | None,
    period: str,
    today: date,
) -> PeriodAnalytics:
    """Aggregate meals over the window of ``period`` ending on ``today``.

    Every day of the window is present in ``daily``, zero-filled when nothing
    was logged, and the averages divide by the full window length.
    """
    days = period_days(period)
    by_date: dict[str, list[MealEntry]] = defaultdict(list)
    for meal in meals:
        by_date[meal.date].append(meal)

    daily = [
        daily_stats(by_date.get(day, []), day) for day in window_dates(days, today)
    ]

    avg_calories = sum(entry.total_calories for entry in daily) / days
    avg_protein = sum(entry.total_protein_g for entry in daily) / days
    avg_carbs = sum(entry.total_carbs_g for entry in daily) / days
    avg_fat = sum(entry.total_fat_g for entry in daily) / days
    _logger.debug(
        "Period analytics: period=%s days=%s avg_calories=%.1f",
        period,
        days,
        avg_calories,
    )

    return PeriodAnalytics(
        daily=daily,
        average_calories=round_half_up(avg_calories),
        average_protein_g=round_half_up(avg_protein),
        average_carbs_g=round_half_up(avg_carbs),
        average_fat_g=round_half_up(avg_fat),
        trend=classify_trend(avg_calories, profile),
    )


def weekly_analytics(
    meals: Iterable[MealEntry], profile: UserProfile | None, today: date
) -> PeriodAnalytics:
    """Return analytics for the last 7 days."""
    return period_analytics(meals, profile, "7days", today)


def classify_trend(average_calories: float, profile: UserProfile | None) -> Trend:
    """Compare average intake against the stored calorie target.

    A missing profile, missing targets or a zero target read as ``on_target``.
    """
    if profile is None or profile.targets is None or not profile.targets.calories:
        return "on_target"
    target = profile.targets.calories
    if average_calories > target * (1 + TREND_TOLERANCE):
        return "above"
    if average_calories < target * (1 - TREND_TOLERANCE):
        return "below"
    return "on_target"


def chart_points(analytics: PeriodAnalytics, period: str) -> list[tuple[str, float]]:
    """Return ``(label, calories)`` pairs for days with logged calories."""
    short_window = period_days(period) <= _PERIOD_DAYS["1month"]
    points = []
    for entry in analytics.daily:
        if entry.total_calories <= 0:
            continue
        day = date.fromisoformat(entry.date)
        label = f"{day:%b} {day.day}" if short_window else f"{day:%b %Y}"
        points.append((label, entry.total_calories))
    return points


def local_today(timezone_name: str) -> date:
    """Return the current calendar date in a timezone."""
    return datetime.now(tz=ZoneInfo(timezone_name)).date()


@dataclass
class DayView:
    """Meals and totals for one day, with the surrounding week."""

    day: str
    meals: list[MealEntry]
    totals: DailyStats
    week: list[DailyStats]


@dataclass
class StatsService:
    """Service that reads stored data and runs the analytics over it."""

    meal_repository: MealRepository
    profile_repository: ProfileRepository
    today: Callable[[], date]

    def get_day(self, day: str | None = None) -> DayView:
        """Return meals and totals for a day (today by default)."""
        resolved_day = day or self.today().isoformat()
        meals = self.meal_repository.list_meals()
        day_meals = [meal for meal in meals if meal.date == resolved_day]
        week = [
            daily_stats(meals, week_day)
            for week_day in window_dates(7, date.fromisoformat(resolved_day))
        ]
        return DayView(
            day=resolved_day,
            meals=day_meals,
            totals=daily_stats(day_meals, resolved_day),
            week=week,
        )

    def get_period(self, period: str = "7days") -> PeriodAnalytics:
        """Return analytics for a period ending today."""
        return period_analytics(
            self.meal_repository.list_meals(),
            self.profile_repository.get_profile(),
            period,
            self.today(),
        )

    def get_recommendations(self) -> list[Recommendation]:
        """Return recommendations based on the last 7 days."""
        profile = self.profile_repository.get_profile()
        analytics = weekly_analytics(
            self.meal_repository.list_meals(), profile, self.today()
        )
        return generate_recommendations(analytics, profile)
