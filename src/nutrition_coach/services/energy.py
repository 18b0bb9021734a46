"""Energy expenditure estimates: BMR, TDEE and goal-adjusted calories."""

from nutrition_coach.domain.nutrition import ActivityLevel, Gender, GoalType, SportType
from nutrition_coach.services.rounding import round_half_up

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

SPORT_MULTIPLIERS: dict[str, float] = {
    SportType.RUNNING: 1.15,
    SportType.CYCLING: 1.15,
    SportType.SWIMMING: 1.12,
    SportType.WEIGHTLIFTING: 1.1,
    SportType.CROSSFIT: 1.12,
    SportType.TEAM_SPORTS: 1.12,
    SportType.COMBAT: 1.13,
    SportType.OTHER: 1.0,
}

KCAL_PER_KG_FAT = 7700
DEFAULT_WEEKLY_RATE_KG = 0.5
MUSCLE_GAIN_SURPLUS_KCAL = 300
MIN_DAILY_CALORIES = 1200


def calculate_bmr(
    *, weight_kg: float, height_cm: float, age: int, gender: Gender | str
) -> int:
    """Basal metabolic rate in kcal/day (Mifflin-St Jeor)."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if gender == Gender.MALE:
        return round_half_up(base + 5)
    return round_half_up(base - 161)


def calculate_tdee(
    *, bmr: int, activity_level: ActivityLevel | str, sport_type: SportType | str
) -> int:
    """Total daily energy expenditure from BMR, activity and sport."""
    activity_multiplier = ACTIVITY_MULTIPLIERS.get(
        activity_level, ACTIVITY_MULTIPLIERS[ActivityLevel.SEDENTARY]
    )
    sport_multiplier = SPORT_MULTIPLIERS.get(sport_type, 1.0)
    return round_half_up(bmr * activity_multiplier * sport_multiplier)


def adjust_for_goal(
    *, tdee: int, goal_type: GoalType | str, weekly_rate: float | None = None
) -> int:
    """Daily calorie target for the goal.

    Weight loss never goes below ``MIN_DAILY_CALORIES``. Unknown goals keep
    the TDEE like maintenance does.
    """
    if goal_type == GoalType.WEIGHT_LOSS:
        daily_deficit = (weekly_rate or DEFAULT_WEEKLY_RATE_KG) * KCAL_PER_KG_FAT / 7
        return max(round_half_up(tdee - daily_deficit), MIN_DAILY_CALORIES)
    if goal_type == GoalType.MUSCLE_GAIN:
        return round_half_up(tdee + MUSCLE_GAIN_SURPLUS_KCAL)
    return tdee
