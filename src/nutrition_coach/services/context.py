"""Plain-text nutrition facts for LLM prompts."""

from nutrition_coach.domain.nutrition import (
    Goal,
    GoalType,
    NutritionNeeds,
    PlanAssessment,
    Profile,
)


def build_targets_context(
    profile: Profile,
    goal: Goal,
    assessment: PlanAssessment,
    today_totals: NutritionNeeds | None = None,
) -> str:
    """Render profile, targets, progress and warnings as prompt lines."""
    plan = assessment.plan
    goal_line = f"- Goal: {goal.type}"
    if goal.type == GoalType.WEIGHT_LOSS and goal.weekly_rate:
        goal_line += f" ({goal.weekly_rate} kg/week)"

    lines = [
        "USER PROFILE:",
        f"- Sport: {profile.sport_type} (level {profile.sport_level})",
        f"- {profile.age} years, {profile.gender}",
        f"- Weight: {profile.weight_kg} kg, Height: {profile.height_cm} cm",
        goal_line,
    ]
    restrictions = (
        *profile.allergies,
        *profile.intolerances,
        *profile.dietary_restrictions,
    )
    if restrictions:
        lines.append(f"- Avoid: {', '.join(restrictions)}")

    lines += [
        "",
        "DAILY TARGETS:",
        f"- Calories: {plan.daily_calories} kcal",
        f"- Protein: {plan.protein_g} g",
        f"- Carbs: {plan.carbs_g} g",
        f"- Fat: {plan.fat_g} g",
        "",
    ]

    if today_totals is None:
        lines.append("No meals logged today yet.")
    else:
        lines += [
            "TODAY'S PROGRESS:",
            f"- Calories: {today_totals.daily_calories} / {plan.daily_calories} kcal",
            f"- Protein: {today_totals.protein_g} / {plan.protein_g} g",
            f"- Carbs: {today_totals.carbs_g} / {plan.carbs_g} g",
            f"- Fat: {today_totals.fat_g} / {plan.fat_g} g",
        ]

    if assessment.validation.warnings:
        lines += ["", "PLAN WARNINGS:"]
        lines += [f"- {warning}" for warning in assessment.validation.warnings]

    return "\n".join(lines)
