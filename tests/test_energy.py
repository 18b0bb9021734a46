"""Tests for BMR, TDEE and goal adjustment."""

from nutrition_coach.domain.nutrition import ActivityLevel, Gender, GoalType, SportType
from nutrition_coach.services.energy import (
    adjust_for_goal,
    calculate_bmr,
    calculate_tdee,
)


def test_calculate_bmr_male_and_female() -> None:
    male = calculate_bmr(weight_kg=75, height_cm=175, age=30, gender=Gender.MALE)
    female = calculate_bmr(weight_kg=75, height_cm=175, age=30, gender=Gender.FEMALE)

    assert male == 1699
    assert female == 1533


def test_calculate_bmr_accepts_boundary_values() -> None:
    bmr = calculate_bmr(weight_kg=300, height_cm=250, age=100, gender="male")

    # 4067.5 rounds half up
    assert bmr == 4068


def test_calculate_tdee_applies_activity_and_sport() -> None:
    tdee = calculate_tdee(
        bmr=1699,
        activity_level=ActivityLevel.MODERATE,
        sport_type=SportType.WEIGHTLIFTING,
    )

    assert tdee == 2897


def test_calculate_tdee_unknown_sport_defaults_to_neutral() -> None:
    known = calculate_tdee(bmr=1500, activity_level="sedentary", sport_type="other")
    unknown = calculate_tdee(bmr=1500, activity_level="sedentary", sport_type="parkour")

    assert known == 1800
    assert unknown == 1800


def test_adjust_for_goal_weight_loss_uses_default_rate() -> None:
    assert adjust_for_goal(tdee=2500, goal_type=GoalType.WEIGHT_LOSS) == 1950
    assert (
        adjust_for_goal(tdee=2500, goal_type=GoalType.WEIGHT_LOSS, weekly_rate=1.0)
        == 1400
    )


def test_adjust_for_goal_weight_loss_never_below_floor() -> None:
    assert (
        adjust_for_goal(tdee=1500, goal_type=GoalType.WEIGHT_LOSS, weekly_rate=1.5)
        == 1200
    )
    assert adjust_for_goal(tdee=1000, goal_type=GoalType.WEIGHT_LOSS) == 1200


def test_adjust_for_goal_muscle_gain_ignores_weekly_rate() -> None:
    assert adjust_for_goal(tdee=2895, goal_type=GoalType.MUSCLE_GAIN) == 3195
    assert (
        adjust_for_goal(tdee=2895, goal_type=GoalType.MUSCLE_GAIN, weekly_rate=1.0)
        == 3195
    )


def test_adjust_for_goal_keeps_tdee_for_other_goals() -> None:
    assert adjust_for_goal(tdee=2600, goal_type=GoalType.MAINTENANCE) == 2600
    assert adjust_for_goal(tdee=2600, goal_type=GoalType.PERFORMANCE) == 2600
    assert adjust_for_goal(tdee=2600, goal_type="bulk", weekly_rate=1.0) == 2600
