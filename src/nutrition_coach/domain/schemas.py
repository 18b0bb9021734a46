"""Pydantic input models validated before reaching the calculations."""

import math
from datetime import date

from pydantic import BaseModel, Field

from nutrition_coach.domain.meals import MealType
from nutrition_coach.domain.metrics import DailyMetrics, TrainingType
from nutrition_coach.domain.nutrition import (
    ActivityLevel,
    Gender,
    Goal,
    GoalType,
    Profile,
    SportLevel,
    SportType,
)

_DAYS_PER_YEAR = 365.25
MIN_AGE = 16
MAX_AGE = 100


class ProfileInput(BaseModel):
    """Profile form payload."""

    first_name: str | None = Field(default=None, min_length=2, max_length=50)
    last_name: str | None = Field(default=None, min_length=2, max_length=50)
    birth_date: date | None = None
    gender: Gender
    height_cm: float = Field(ge=100, le=250)
    weight_kg: float = Field(ge=30, le=300)
    body_fat_percent: float | None = Field(default=None, ge=3, le=60)
    sport_type: SportType
    sport_level: SportLevel
    training_frequency: int = Field(ge=0, le=14)
    activity_level: ActivityLevel
    allergies: list[str] = Field(default_factory=list)
    intolerances: list[str] = Field(default_factory=list)
    medical_conditions: list[str] = Field(default_factory=list)
    dietary_restrictions: list[str] = Field(default_factory=list)

    def to_profile(self, today: date, default_age: int = 30) -> Profile:
        """Build the calculation profile, deriving age from the birth date.

        Raises ValueError when the resulting age is outside [MIN_AGE, MAX_AGE].
        """
        age = default_age
        if self.birth_date is not None:
            age = math.floor((today - self.birth_date).days / _DAYS_PER_YEAR)
        if not MIN_AGE <= age <= MAX_AGE:
            raise ValueError(f"Age {age} is outside {MIN_AGE}-{MAX_AGE} years")
        return Profile(
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            age=age,
            gender=self.gender,
            sport_type=self.sport_type,
            sport_level=self.sport_level,
            training_frequency=self.training_frequency,
            activity_level=self.activity_level,
            body_fat_percent=self.body_fat_percent,
            allergies=tuple(self.allergies),
            intolerances=tuple(self.intolerances),
            medical_conditions=tuple(self.medical_conditions),
            dietary_restrictions=tuple(self.dietary_restrictions),
        )


class GoalInput(BaseModel):
    """Goal form payload."""

    type: GoalType
    target_weight_kg: float | None = Field(default=None, ge=30, le=300)
    weekly_rate: float | None = Field(default=None, ge=0.1, le=1.5)

    def to_goal(self) -> Goal:
        return Goal(
            type=self.type,
            weekly_rate=self.weekly_rate,
            target_weight_kg=self.target_weight_kg,
        )


class MealItemInput(BaseModel):
    """A food reference with the eaten quantity in grams."""

    food_id: str
    quantity_g: float = Field(gt=0)


class MealCreateInput(BaseModel):
    """Meal logging payload."""

    day: date
    meal_type: MealType
    foods: list[MealItemInput] = Field(min_length=1)
    notes: str | None = Field(default=None, max_length=500)


class DailyMetricsInput(BaseModel):
    """Daily metrics payload."""

    day: date
    weight_kg: float | None = Field(default=None, ge=30, le=300)
    body_fat_percent: float | None = Field(default=None, ge=3, le=60)
    energy_level: int | None = Field(default=None, ge=1, le=10)
    hunger_level: int | None = Field(default=None, ge=1, le=10)
    stress_level: int | None = Field(default=None, ge=1, le=10)
    sleep_quality: int | None = Field(default=None, ge=1, le=10)
    sleep_hours: float | None = Field(default=None, ge=0, le=24)
    water_ml: int | None = Field(default=None, ge=0, le=10000)
    training_completed: bool = False
    training_intensity: int | None = Field(default=None, ge=1, le=10)
    training_duration_min: int | None = Field(default=None, ge=0, le=480)
    training_type: TrainingType | None = None
    notes: str | None = Field(default=None, max_length=1000)

    def to_metrics(self) -> DailyMetrics:
        return DailyMetrics(**self.model_dump())
