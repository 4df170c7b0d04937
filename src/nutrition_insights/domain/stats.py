"""Domain models for statistics."""

from dataclasses import dataclass
from typing import Literal

Period = Literal["7days", "1month", "6months", "1year"]
Trend = Literal["above", "below", "on_target"]

PERIODS: tuple[Period, ...] = ("7days", "1month", "6months", "1year")


@dataclass(frozen=True)
class DailyStats:
    """Daily total macros."""

    date: str
    total_calories: float
    total_protein_g: float
    total_carbs_g: float
    total_fat_g: float


@dataclass(frozen=True)
class PeriodAnalytics:
    """Zero-filled daily totals for a window with rounded averages."""

    daily: list[DailyStats]
    average_calories: int
    average_protein_g: int
    average_carbs_g: int
    average_fat_g: int
    trend: Trend
