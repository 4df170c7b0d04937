"""JSON file store for the profile and meal log."""

import os
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from nutrition_insights.adapters.store_models import (
    StoreDocument,
    StoredMeal,
    StoredProfile,
)
from nutrition_insights.domain.meals import MealEntry
from nutrition_insights.domain.models import UserProfile
from nutrition_insights.services.meals import MealRepository
from nutrition_insights.services.profiles import ProfileRepository


@dataclass
class JsonFileStore(ProfileRepository, MealRepository):
    """Single-file implementation of the profile and meal repositories.

    Every call reads the whole document and every write rewrites it; there is
    no locking between processes.
    """

    path: Path

    def get_profile(self) -> UserProfile | None:
        """Return the stored profile."""
        stored = self._read().profile
        return stored.to_domain() if stored else None

    def set_profile(self, profile: UserProfile) -> None:
        """Replace the stored profile."""
        document = self._read()
        document.profile = StoredProfile.from_domain(profile)
        self._write(document)

    def list_meals(self) -> list[MealEntry]:
        """Return stored meals in insertion order."""
        return [meal.to_domain() for meal in self._read().meals]

    def add_meal(self, meal: MealEntry) -> None:
        """Append a meal."""
        document = self._read()
        document.meals.append(StoredMeal.from_domain(meal))
        self._write(document)

    def update_meal(self, meal_id: str, meal: MealEntry) -> bool:
        """Replace the first meal with a matching id."""
        document = self._read()
        for index, stored in enumerate(document.meals):
            if stored.id == meal_id:
                document.meals[index] = StoredMeal.from_domain(meal)
                self._write(document)
                return True
        return False

    def delete_meal(self, meal_id: str) -> None:
        """Remove all meals with a matching id."""
        document = self._read()
        document.meals = [meal for meal in document.meals if meal.id != meal_id]
        self._write(document)

    def clear_all(self) -> None:
        """Remove the profile and all meals."""
        if self.path.exists():
            self.path.unlink()

    def _read(self) -> StoreDocument:
        if not self.path.exists():
            return StoreDocument()
        try:
            return StoreDocument.model_validate_json(self.path.read_text("utf-8"))
        except ValidationError as exc:
            raise RuntimeError(f"Failed to read store at {self.path}") from exc

    def _write(self, document: StoreDocument) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = document.model_dump_json(by_alias=True, exclude_none=True, indent=2)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        tmp_path.write_text(payload, "utf-8")
        os.replace(tmp_path, self.path)
