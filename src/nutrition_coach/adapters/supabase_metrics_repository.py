"""Supabase repository for daily metrics."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from nutrition_coach.domain.metrics import DailyMetrics, TrainingType
from nutrition_coach.services.metrics import MetricsRepository

_COLUMNS = (
    "day, training_completed, weight_kg, body_fat_percent, energy_level, "
    "hunger_level, stress_level, sleep_quality, sleep_hours, water_ml, "
    "training_intensity, training_duration_min, training_type, notes"
)


@dataclass
class SupabaseMetricsRepository(MetricsRepository):
    """Supabase implementation for daily metrics, one row per user and day."""

    client: Client

    def save_metrics(self, user_id: UUID, metrics: DailyMetrics) -> None:
        """Upsert the metrics row for a user and day."""
        self.client.table("daily_metrics").upsert(
            {
                "user_id": str(user_id),
                "day": metrics.day.isoformat(),
                "training_completed": metrics.training_completed,
                "weight_kg": metrics.weight_kg,
                "body_fat_percent": metrics.body_fat_percent,
                "energy_level": metrics.energy_level,
                "hunger_level": metrics.hunger_level,
                "stress_level": metrics.stress_level,
                "sleep_quality": metrics.sleep_quality,
                "sleep_hours": metrics.sleep_hours,
                "water_ml": metrics.water_ml,
                "training_intensity": metrics.training_intensity,
                "training_duration_min": metrics.training_duration_min,
                "training_type": (
                    str(metrics.training_type) if metrics.training_type else None
                ),
                "notes": metrics.notes,
            },
            on_conflict="user_id,day",
        ).execute()

    def get_metrics(self, user_id: UUID, day: date) -> DailyMetrics | None:
        """Return the metrics row for a day, if present."""
        response = (
            self.client.table("daily_metrics")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("day", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_metrics(self, user_id: UUID, start: date, end: date) -> list[DailyMetrics]:
        """Return metrics rows between two days inclusive."""
        response = (
            self.client.table("daily_metrics")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("day", start.isoformat())
            .lte("day", end.isoformat())
            .order("day", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> DailyMetrics:
    training_type = row.get("training_type")
    return DailyMetrics(
        day=date.fromisoformat(row["day"]),
        training_completed=bool(row.get("training_completed")),
        weight_kg=_optional_float(row.get("weight_kg")),
        body_fat_percent=_optional_float(row.get("body_fat_percent")),
        energy_level=row.get("energy_level"),
        hunger_level=row.get("hunger_level"),
        stress_level=row.get("stress_level"),
        sleep_quality=row.get("sleep_quality"),
        sleep_hours=_optional_float(row.get("sleep_hours")),
        water_ml=row.get("water_ml"),
        training_intensity=row.get("training_intensity"),
        training_duration_min=row.get("training_duration_min"),
        training_type=TrainingType(training_type) if training_type else None,
        notes=row.get("notes"),
    )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
