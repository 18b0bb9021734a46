"""Daily nutrition needs for a profile and goal."""

from nutrition_coach.domain.nutrition import (
    ActivityLevel,
    GoalType,
    NutritionPlan,
    Profile,
)
from nutrition_coach.services.energy import adjust_for_goal, calculate_bmr, calculate_tdee
from nutrition_coach.services.macros import calculate_macros
from nutrition_coach.services.rounding import round_half_up

_WATER_ML_PER_KG = 33
_WATER_ML_PER_KG_ACTIVE = 40
_TRAINING_DAY_EXTRA_WATER_ML = 500


def compute_nutrition_needs(
    profile: Profile, goal_type: GoalType | str, weekly_rate: float | None = None
) -> NutritionPlan:
    """Run BMR, TDEE, goal adjustment and macro allocation in order.

    Every stage consumes the rounded output of the previous one.
    """
    bmr = calculate_bmr(
        weight_kg=profile.weight_kg,
        height_cm=profile.height_cm,
        age=profile.age,
        gender=profile.gender,
    )
    tdee = calculate_tdee(
        bmr=bmr,
        activity_level=profile.activity_level,
        sport_type=profile.sport_type,
    )
    daily_calories = adjust_for_goal(
        tdee=tdee, goal_type=goal_type, weekly_rate=weekly_rate
    )
    macros = calculate_macros(
        daily_calories=daily_calories,
        weight_kg=profile.weight_kg,
        sport_type=profile.sport_type,
        goal_type=goal_type,
    )
    return NutritionPlan(
        bmr=bmr,
        tdee=tdee,
        daily_calories=daily_calories,
        protein_g=macros.protein_g,
        carbs_g=macros.carbs_g,
        fat_g=macros.fat_g,
        protein_percent=macros.protein_percent,
        carbs_percent=macros.carbs_percent,
        fat_percent=macros.fat_percent,
    )


def calculate_water_needs(
    *, weight_kg: float, activity_level: ActivityLevel | str, is_training_day: bool
) -> int:
    """Recommended water intake in ml for the day."""
    ml_per_kg = _WATER_ML_PER_KG
    if activity_level in (ActivityLevel.ACTIVE, ActivityLevel.VERY_ACTIVE):
        ml_per_kg = _WATER_ML_PER_KG_ACTIVE
    water_ml = weight_kg * ml_per_kg
    if is_training_day:
        water_ml += _TRAINING_DAY_EXTRA_WATER_ML
    return round_half_up(water_ml)
