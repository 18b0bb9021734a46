"""Nutrition domain models."""

from dataclasses import dataclass, field
from enum import StrEnum


class Gender(StrEnum):
    """Biological sex used by the BMR equation."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(StrEnum):
    """Everyday activity outside of training."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class SportType(StrEnum):
    """Main sport practised by the user."""

    RUNNING = "running"
    CYCLING = "cycling"
    SWIMMING = "swimming"
    WEIGHTLIFTING = "weightlifting"
    CROSSFIT = "crossfit"
    TEAM_SPORTS = "team_sports"
    COMBAT = "combat"
    OTHER = "other"


class SportLevel(StrEnum):
    """Self-reported training level."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ELITE = "elite"


class GoalType(StrEnum):
    """Body composition or performance goal."""

    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    PERFORMANCE = "performance"
    MAINTENANCE = "maintenance"


@dataclass(frozen=True)
class Profile:
    """Physiological and training snapshot used for one calculation.

    ``sport_type`` and ``activity_level`` accept plain strings so that values
    added later by the profile store still flow through the calculations.
    """

    height_cm: float
    weight_kg: float
    age: int
    gender: Gender
    sport_type: SportType | str = SportType.OTHER
    sport_level: SportLevel = SportLevel.BEGINNER
    training_frequency: int = 0
    activity_level: ActivityLevel | str = ActivityLevel.MODERATE
    body_fat_percent: float | None = None
    allergies: tuple[str, ...] = field(default_factory=tuple)
    intolerances: tuple[str, ...] = field(default_factory=tuple)
    medical_conditions: tuple[str, ...] = field(default_factory=tuple)
    dietary_restrictions: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Goal:
    """User goal; ``weekly_rate`` is in kg/week and only used for weight loss."""

    type: GoalType | str
    weekly_rate: float | None = None
    target_weight_kg: float | None = None


@dataclass(frozen=True)
class NutritionNeeds:
    """Daily energy and macro totals in kcal and grams."""

    daily_calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    fiber_g: int | None = None


@dataclass(frozen=True)
class MacroDistribution:
    """Macro grams with their share of the calorie target.

    Percents are rounded independently and may not add up to exactly 100.
    """

    protein_g: int
    carbs_g: int
    fat_g: int
    protein_percent: int
    carbs_percent: int
    fat_percent: int


@dataclass(frozen=True)
class NutritionPlan:
    """Complete output of the needs pipeline."""

    bmr: int
    tdee: int
    daily_calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    protein_percent: int
    carbs_percent: int
    fat_percent: int

    @property
    def needs(self) -> NutritionNeeds:
        return NutritionNeeds(
            daily_calories=self.daily_calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fat_g=self.fat_g,
        )

    @property
    def macros(self) -> MacroDistribution:
        return MacroDistribution(
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fat_g=self.fat_g,
            protein_percent=self.protein_percent,
            carbs_percent=self.carbs_percent,
            fat_percent=self.fat_percent,
        )


@dataclass(frozen=True)
class ValidationResult:
    """Advisory warnings for a plan, in check order."""

    warnings: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.warnings


@dataclass(frozen=True)
class PlanAssessment:
    """A computed plan together with its safety validation."""

    plan: NutritionPlan
    validation: ValidationResult


@dataclass(frozen=True)
class FoodRecord:
    """Nutrient values of a food, all per 100 grams."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float | None = None
    id: str | None = None
    name: str | None = None
