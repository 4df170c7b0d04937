"""Profile intake and lookup."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from nutrition_insights.domain.models import GOALS, UserProfile
from nutrition_insights.services.targets import compute_targets

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for the user profile."""

    def get_profile(self) -> UserProfile | None:
        """Return the stored profile, if any."""

    def set_profile(self, profile: UserProfile) -> None:
        """Store the profile, replacing any previous one."""


@dataclass
class ProfileService:
    """Service for the profile intake flow."""

    repository: ProfileRepository

    def get_profile(self) -> UserProfile | None:
        """Return the stored profile."""
        return self.repository.get_profile()

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Compute targets for the profile and store it wholesale."""
        _check_profile(profile)
        saved = replace(
            profile,
            allergies=[item.strip() for item in profile.allergies if item.strip()],
            targets=compute_targets(profile),
        )
        self.repository.set_profile(saved)
        _logger.info(
            "Profile saved: goal=%s target_calories=%s",
            saved.goal,
            saved.targets.calories if saved.targets else None,
        )
        return saved


def parse_allergies(raw: str | None) -> list[str]:
    """Split a comma-separated allergy list, dropping blank items."""
    if not raw:
        return []
    return [chunk.strip() for chunk in raw.split(",") if chunk.strip()]


def _check_profile(profile: UserProfile) -> None:
    if profile.age <= 0:
        raise ValueError("Age must be positive")
    if profile.weight_kg <= 0:
        raise ValueError("Weight must be positive")
    if profile.height_cm <= 0:
        raise ValueError("Height must be positive")
    if profile.goal not in GOALS:
        raise ValueError(f"Unknown goal: {profile.goal}")
