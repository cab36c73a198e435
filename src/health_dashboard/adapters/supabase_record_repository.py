"""Supabase-backed health record repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from health_dashboard.domain.records import Row
from health_dashboard.services.fetcher import RecordRepository

PROFILE_COLUMNS = {
    "sender": "identifier",
    "name": "name",
    "groesse": "height",
    "kcal_bedarf": "calorie_goal",
    "protein_main": "protein_goal",
    "carbs_main": "carbs_goal",
    "fat_main": "fat_goal",
}
WEIGHT_COLUMNS = {"weight": "weight", "created_at": "created_at"}
MEAL_COLUMNS = {
    "id": "id",
    "time": "time_label",
    "meal_title": "title",
    "kcal": "calories",
    "protein": "protein",
    "carbs": "carbs",
    "fat": "fat",
    "created_at": "created_at",
}
WORKOUT_COLUMNS = {
    "id": "id",
    "kcal_verbrauch": "calories_burned",
    "workout_type": "workout_type",
    "duration": "duration",
    "created_at": "created_at",
}
HYDRATION_COLUMNS = {"hydration": "amount", "created_at": "created_at"}
SLEEP_COLUMNS = {"sleep": "duration", "created_at": "created_at"}
STEPS_COLUMNS = {"steps": "count", "created_at": "created_at"}


@dataclass
class SupabaseRecordRepository(RecordRepository):
    """Supabase implementation for dashboard reads."""

    client: Client

    def get_profile(self, user_id: str) -> Row | None:
        """Return the profile row for a sender, if present."""
        response = (
            self.client.table("stammdaten")
            .select(_select(PROFILE_COLUMNS))
            .eq("sender", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _rename(response.data[0], PROFILE_COLUMNS)

    def get_latest_weight(self, user_id: str) -> Row | None:
        """Return the newest weight sample for a sender."""
        response = (
            self.client.table("user_weights")
            .select(_select(WEIGHT_COLUMNS))
            .eq("sender", user_id)
            .order("created_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _rename(response.data[0], WEIGHT_COLUMNS)

    def list_meals(self, user_id: str, start: datetime, end: datetime) -> list[Row]:
        """Return meals logged in the range."""
        return self._list_range("mahlzeiten", MEAL_COLUMNS, user_id, start, end)

    def list_workouts(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[Row]:
        """Return workouts logged in the range."""
        return self._list_range("kcal", WORKOUT_COLUMNS, user_id, start, end)

    def list_hydration(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[Row]:
        """Return hydration entries logged in the range."""
        return self._list_range(
            "hydration_table", HYDRATION_COLUMNS, user_id, start, end
        )

    def list_sleep(self, user_id: str, start: datetime, end: datetime) -> list[Row]:
        """Return sleep entries logged in the range."""
        return self._list_range("sleep_table", SLEEP_COLUMNS, user_id, start, end)

    def list_steps(self, user_id: str, start: datetime, end: datetime) -> list[Row]:
        """Return step entries logged in the range."""
        return self._list_range("steps_table", STEPS_COLUMNS, user_id, start, end)

    def _list_range(  # noqa: PLR0913
        self,
        table: str,
        columns: dict[str, str],
        user_id: str,
        start: datetime,
        end: datetime,
    ) -> list[Row]:
        response = (
            self.client.table(table)
            .select(_select(columns))
            .eq("sender", user_id)
            .gte("created_at", start.astimezone(UTC).isoformat())
            .lt("created_at", end.astimezone(UTC).isoformat())
            .execute()
        )
        return [_rename(row, columns) for row in response.data or []]


def _select(columns: dict[str, str]) -> str:
    return ", ".join(columns)


def _rename(row: dict[str, object], columns: dict[str, str]) -> Row:
    """Map store column names to canonical field names, dropping absent ones."""
    return {
        canonical: row[column] for column, canonical in columns.items() if column in row
    }
