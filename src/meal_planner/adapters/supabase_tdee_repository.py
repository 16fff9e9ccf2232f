"""Supabase repository for user TDEE baselines."""

from dataclasses import dataclass

from supabase import Client

from meal_planner.domain.recipes import UserTDEE
from meal_planner.services.meal_plans import TdeeRepository


@dataclass
class SupabaseTdeeRepository(TdeeRepository):
    """Supabase implementation for TDEE lookups."""

    client: Client
    table_name: str = "user_tdee"

    def get_by_user(self, user_id: str) -> UserTDEE | None:
        """Return the stored TDEE for a user, if present."""
        response = (
            self.client.table(self.table_name)
            .select("user_id, calculated_tdee")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        raw_tdee = row.get("calculated_tdee")
        if raw_tdee is None:
            raise RuntimeError("TDEE record is missing calculated_tdee")
        return UserTDEE(
            user_id=str(row.get("user_id", user_id)),
            calculated_tdee=float(raw_tdee),
        )
