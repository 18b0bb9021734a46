"""Domain models for daily body and training metrics."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class TrainingType(StrEnum):
    CARDIO = "cardio"
    STRENGTH = "strength"
    MIXED = "mixed"


@dataclass(frozen=True)
class DailyMetrics:
    """Self-reported metrics for one day; levels are on a 1-10 scale."""

    day: date
    training_completed: bool = False
    weight_kg: float | None = None
    body_fat_percent: float | None = None
    energy_level: int | None = None
    hunger_level: int | None = None
    stress_level: int | None = None
    sleep_quality: int | None = None
    sleep_hours: float | None = None
    water_ml: int | None = None
    training_intensity: int | None = None
    training_duration_min: int | None = None
    training_type: TrainingType | None = None
    notes: str | None = None


@dataclass(frozen=True)
class WeightPoint:
    day: date
    weight_kg: float


@dataclass(frozen=True)
class WeightProgress:
    """Weigh-ins over a window with the change from first to last."""

    data: list[WeightPoint]
    start_weight_kg: float | None
    current_weight_kg: float | None
    change_kg: float
    change_percent: float


@dataclass(frozen=True)
class WeeklySummary:
    """Averages over the metrics tracked in the last week."""

    days_tracked: int
    training_days: int
    avg_energy: float
    avg_sleep_hours: float
    avg_water_ml: int


@dataclass(frozen=True)
class HydrationStatus:
    """Water drunk on a day against the recommended amount."""

    day: date
    target_ml: int
    actual_ml: int
    adherence: int
