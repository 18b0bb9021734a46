"""Supabase repository for per-100g food records."""

from dataclasses import dataclass

from supabase import Client

from nutrition_coach.domain.nutrition import FoodRecord
from nutrition_coach.services.meals import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for food lookups by id."""

    client: Client

    def get_food(self, food_id: str) -> FoodRecord | None:
        """Return the food record for an id, if present."""
        response = (
            self.client.table("foods")
            .select("id, name, calories, protein_g, carbs_g, fat_g, fiber_g")
            .eq("id", food_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food_row(response.data[0])


def parse_food_row(row: dict[str, object]) -> FoodRecord:
    fiber = row.get("fiber_g")
    return FoodRecord(
        id=str(row["id"]) if row.get("id") is not None else None,
        name=row.get("name"),
        calories=float(row.get("calories", 0.0)),
        protein_g=float(row.get("protein_g", 0.0)),
        carbs_g=float(row.get("carbs_g", 0.0)),
        fat_g=float(row.get("fat_g", 0.0)),
        fiber_g=float(fiber) if fiber is not None else None,
    )
