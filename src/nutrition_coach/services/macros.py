"""Macronutrient allocation for a calorie target."""

from nutrition_coach.domain.nutrition import GoalType, MacroDistribution, SportType
from nutrition_coach.services.rounding import round_half_up

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

_PROTEIN_PER_KG_BY_GOAL: dict[str, float] = {
    GoalType.MUSCLE_GAIN: 2.2,
    GoalType.WEIGHT_LOSS: 2.0,
}
_DEFAULT_PROTEIN_PER_KG = 1.8

_FAT_SHARE_BY_SPORT: dict[str, float] = {
    SportType.RUNNING: 0.25,
    SportType.CYCLING: 0.25,
    SportType.WEIGHTLIFTING: 0.3,
}
_DEFAULT_FAT_SHARE = 0.25


def protein_per_kg(goal_type: GoalType | str) -> float:
    """Protein target in g/kg of body weight; the goal decides."""
    return _PROTEIN_PER_KG_BY_GOAL.get(goal_type, _DEFAULT_PROTEIN_PER_KG)


def fat_share(sport_type: SportType | str) -> float:
    """Fraction of daily calories coming from fat; the sport decides."""
    return _FAT_SHARE_BY_SPORT.get(sport_type, _DEFAULT_FAT_SHARE)


def calculate_macros(
    *,
    daily_calories: int,
    weight_kg: float,
    sport_type: SportType | str,
    goal_type: GoalType | str,
) -> MacroDistribution:
    """Split a calorie target into protein, fat and carbs.

    Protein is set from body weight, fat from a share of calories and carbs
    take the remainder. Carbs are not clamped and can be negative when the
    target is very low.
    """
    protein_g = round_half_up(weight_kg * protein_per_kg(goal_type))
    protein_calories = protein_g * KCAL_PER_G_PROTEIN

    fat_calories = daily_calories * fat_share(sport_type)
    fat_g = round_half_up(fat_calories / KCAL_PER_G_FAT)

    carb_calories = daily_calories - protein_calories - fat_calories
    carbs_g = round_half_up(carb_calories / KCAL_PER_G_CARBS)

    return MacroDistribution(
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
        protein_percent=_percent_of(protein_g * KCAL_PER_G_PROTEIN, daily_calories),
        carbs_percent=_percent_of(carbs_g * KCAL_PER_G_CARBS, daily_calories),
        fat_percent=_percent_of(fat_g * KCAL_PER_G_FAT, daily_calories),
    )


def _percent_of(calories: float, daily_calories: int) -> int:
    if daily_calories <= 0:
        return 0
    return round_half_up(calories / daily_calories * 100)
