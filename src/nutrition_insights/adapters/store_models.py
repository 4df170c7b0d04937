"""Pydantic models for records kept in the local JSON store."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from nutrition_insights.domain.meals import MealEntry, MealType
from nutrition_insights.domain.models import Goal, NutritionTargets, UserProfile


class StoredProfile(BaseModel):
    """Stored user profile payload."""

    model_config = ConfigDict(populate_by_name=True)

    age: int
    weight: float
    height: float
    allergies: list[str] = Field(default_factory=list)
    goal: Goal
    dietary_preference: str = Field(default="", alias="dietaryPreference")
    target_calories: int | None = Field(default=None, alias="targetCalories")
    target_protein: int | None = Field(default=None, alias="targetProtein")
    target_carbs: int | None = Field(default=None, alias="targetCarbs")
    target_fat: int | None = Field(default=None, alias="targetFat")

    @model_validator(mode="after")
    def _targets_all_or_none(self) -> "StoredProfile":
        values = (
            self.target_calories,
            self.target_protein,
            self.target_carbs,
            self.target_fat,
        )
        present = [value is not None for value in values]
        if any(present) and not all(present):
            raise ValueError("Profile targets must be stored together")
        return self

    @classmethod
    def from_domain(cls, profile: UserProfile) -> "StoredProfile":
        targets = profile.targets
        return cls(
            age=profile.age,
            weight=profile.weight_kg,
            height=profile.height_cm,
            allergies=list(profile.allergies),
            goal=profile.goal,
            dietary_preference=profile.dietary_preference,
            target_calories=targets.calories if targets else None,
            target_protein=targets.protein_g if targets else None,
            target_carbs=targets.carbs_g if targets else None,
            target_fat=targets.fat_g if targets else None,
        )

    def to_domain(self) -> UserProfile:
        targets = None
        if self.target_calories is not None:
            targets = NutritionTargets(
                calories=self.target_calories,
                protein_g=self.target_protein or 0,
                carbs_g=self.target_carbs or 0,
                fat_g=self.target_fat or 0,
            )
        return UserProfile(
            age=self.age,
            weight_kg=self.weight,
            height_cm=self.height,
            goal=self.goal,
            allergies=list(self.allergies),
            dietary_preference=self.dietary_preference,
            targets=targets,
        )


class StoredMeal(BaseModel):
    """Stored meal entry payload."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    date: str
    meal_type: MealType = Field(alias="mealType")
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    notes: str | None = None

    @classmethod
    def from_domain(cls, meal: MealEntry) -> "StoredMeal":
        return cls(
            id=meal.id,
            date=meal.date,
            meal_type=meal.meal_type,
            name=meal.name,
            calories=meal.calories,
            protein=meal.protein_g,
            carbs=meal.carbs_g,
            fat=meal.fat_g,
            notes=meal.notes,
        )

    def to_domain(self) -> MealEntry:
        return MealEntry(
            id=self.id,
            date=self.date,
            meal_type=self.meal_type,
            name=self.name,
            calories=self.calories,
            protein_g=self.protein,
            carbs_g=self.carbs,
            fat_g=self.fat,
            notes=self.notes,
        )


class StoreDocument(BaseModel):
    """Whole store: the profile and meal list under their fixed keys."""

    model_config = ConfigDict(populate_by_name=True)

    profile: StoredProfile | None = Field(
        default=None, alias="nutrition_user_profile"
    )
    meals: list[StoredMeal] = Field(default_factory=list, alias="nutrition_meals")
