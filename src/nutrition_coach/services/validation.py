"""Safety checks over a computed nutrition plan."""

from nutrition_coach.domain.nutrition import Goal, GoalType, ValidationResult
from nutrition_coach.services.energy import DEFAULT_WEEKLY_RATE_KG, MIN_DAILY_CALORIES

MAX_DAILY_CALORIES = 5000
MAX_PROTEIN_PER_KG = 3.0
MIN_PROTEIN_PER_KG = 1.2
MAX_WEEKLY_LOSS_KG = 1.0

CALORIES_TOO_LOW = "Daily calories too low (<1200 kcal), health risk."
CALORIES_TOO_HIGH = "Daily calories too high (>5000 kcal), check goal."
PROTEIN_EXCESSIVE = "Protein excessive (>3 g/kg), adjust intake."
PROTEIN_INSUFFICIENT = "Protein insufficient (<1.2 g/kg), increase intake."
RATE_TOO_FAST = "Weight loss rate too fast (>1 kg/week), risks muscle loss."


def validate_nutrition_plan(
    *,
    daily_calories: int,
    protein_g: float,
    weight_kg: float,
    weekly_weight_change: float | None = None,
) -> ValidationResult:
    """Return advisory warnings; thresholds themselves do not warn."""
    warnings: list[str] = []

    if daily_calories < MIN_DAILY_CALORIES:
        warnings.append(CALORIES_TOO_LOW)
    if daily_calories > MAX_DAILY_CALORIES:
        warnings.append(CALORIES_TOO_HIGH)

    protein_ratio = protein_g / weight_kg
    if protein_ratio > MAX_PROTEIN_PER_KG:
        warnings.append(PROTEIN_EXCESSIVE)
    if protein_ratio < MIN_PROTEIN_PER_KG:
        warnings.append(PROTEIN_INSUFFICIENT)

    if weekly_weight_change is not None and weekly_weight_change < -MAX_WEEKLY_LOSS_KG:
        warnings.append(RATE_TOO_FAST)

    return ValidationResult(warnings=tuple(warnings))


def weekly_weight_change_for_goal(goal: Goal) -> float:
    """Expected weekly weight change in kg implied by the goal."""
    if goal.type == GoalType.WEIGHT_LOSS:
        return -(goal.weekly_rate or DEFAULT_WEEKLY_RATE_KG)
    return 0.0
