"""Domain models for recommendations."""

from dataclasses import dataclass
from typing import Literal

Category = Literal["nutrition", "balance", "timing", "hydration"]
Priority = Literal["high", "medium", "low"]


@dataclass(frozen=True)
class Recommendation:
    """A canned piece of advice derived from analytics."""

    id: str
    title: str
    description: str
    category: Category
    priority: Priority
