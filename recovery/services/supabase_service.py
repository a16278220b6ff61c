"""
Supabase database service for profiles, measurements and recovery logs.
"""

import logging
from datetime import date
from functools import lru_cache
from typing import Annotated, Any

from fastapi import Depends
from supabase import create_client, Client

from recovery.core.config import settings
from recovery.core.errors import PersistenceError
from recovery.models.schemas import (
    ExerciseLogEntry,
    Measurement,
    Profile,
    Supplement,
)

logger = logging.getLogger(__name__)


class SupabaseService:
    """Service for interacting with Supabase database."""

    def __init__(self, client: Client | None = None) -> None:
        """Initialize Supabase client."""
        self.client: Client = client or create_client(
            settings.supabase_url, settings.supabase_service_role_key
        )

    def _execute(self, query: Any, action: str) -> list[dict[str, Any]]:
        """Run a query and normalize failures into PersistenceError."""
        try:
            response = query.execute()
        except Exception as e:
            logger.error(f"Failed to {action}: {e}")
            raise PersistenceError(f"Failed to {action}: {e}") from e

        return response.data or []

    # ------------------------------------------------------------------
    # Generic row operations
    # ------------------------------------------------------------------

    async def find_rows(
        self,
        table: str,
        filters: dict[str, Any],
        order_by: str | None = None,
        desc: bool = False,
        limit: int | None = None,
        since: tuple[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        """Select rows matching every equality filter (and since, as >=)."""
        query = self.client.table(table).select("*")
        for column, value in filters.items():
            query = query.eq(column, value)
        if since:
            query = query.gte(since[0], since[1])
        if order_by:
            query = query.order(order_by, desc=desc)
        if limit:
            query = query.limit(limit)

        return self._execute(query, f"read {table}")

    async def insert_row(self, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a row and return it as stored."""
        rows = self._execute(self.client.table(table).insert(data), f"insert into {table}")
        if not rows:
            raise PersistenceError(f"Failed to insert into {table}: no row returned")
        return rows[0]

    async def update_row(self, table: str, row_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Update a row by id and return it as stored."""
        rows = self._execute(
            self.client.table(table).update(data).eq("id", row_id), f"update {table}"
        )
        if not rows:
            raise PersistenceError(f"Failed to update {table}: row {row_id} not found")
        return rows[0]

    async def delete_rows(self, table: str, row_ids: list[str]) -> None:
        """Delete rows by id."""
        if not row_ids:
            return
        self._execute(self.client.table(table).delete().in_("id", row_ids), f"delete from {table}")

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------

    async def get_profile(self, user_id: str) -> Profile | None:
        """Get profile by user ID."""
        rows = await self.find_rows("profiles", {"id": user_id})
        if not rows:
            return None
        return Profile(**rows[0])

    async def create_profile(self, user_id: str, data: dict[str, Any]) -> Profile:
        """Create the profile row for a user."""
        row = await self.insert_row("profiles", {"id": user_id, **data})
        return Profile(**row)

    async def update_profile(self, user_id: str, data: dict[str, Any]) -> Profile:
        """Update the profile row for a user."""
        row = await self.update_row("profiles", user_id, data)
        return Profile(**row)

    # ------------------------------------------------------------------
    # Measurements
    # ------------------------------------------------------------------

    async def list_measurements(self, user_id: str) -> list[Measurement]:
        """Get all measurements, oldest first."""
        rows = await self.find_rows("measurements", {"user_id": user_id}, order_by="date")
        return [Measurement(**row) for row in rows]

    async def add_measurement(
        self,
        user_id: str,
        measurement_date: date,
        weight: float | None,
        waist_size: float | None,
        hip_size: float | None,
        bust_size: float | None,
    ) -> list[Measurement]:
        """Insert a measurement (canonical units) and return the refreshed list."""
        await self.insert_row(
            "measurements",
            {
                "user_id": user_id,
                "date": measurement_date.isoformat(),
                "weight": weight,
                "waist_size": waist_size,
                "hip_size": hip_size,
                "bust_size": bust_size,
            },
        )
        return await self.list_measurements(user_id)

    # ------------------------------------------------------------------
    # Exercise log
    # ------------------------------------------------------------------

    async def list_exercise_logs(self, user_id: str) -> list[ExerciseLogEntry]:
        """Get exercise history, newest first."""
        rows = await self.find_rows(
            "exercise_logs", {"user_id": user_id}, order_by="date", desc=True
        )
        return [ExerciseLogEntry(**row) for row in rows]

    async def add_exercise_log(
        self,
        user_id: str,
        log_date: date,
        exercise_type: str,
        duration_minutes: int,
        notes: str | None = None,
    ) -> list[ExerciseLogEntry]:
        """Insert an exercise session and return the refreshed history."""
        await self.insert_row(
            "exercise_logs",
            {
                "user_id": user_id,
                "date": log_date.isoformat(),
                "exercise_type": exercise_type,
                "duration_minutes": duration_minutes,
                "notes": notes,
            },
        )
        return await self.list_exercise_logs(user_id)

    # ------------------------------------------------------------------
    # Supplements
    # ------------------------------------------------------------------

    async def list_supplements(self, user_id: str) -> list[Supplement]:
        """Get the user's supplements ordered by name."""
        rows = await self.find_rows("supplements", {"user_id": user_id}, order_by="name")
        return [Supplement(**row) for row in rows]

    async def get_supplement(self, user_id: str, supplement_id: str) -> Supplement | None:
        """Get one of the user's supplements."""
        rows = await self.find_rows("supplements", {"user_id": user_id, "id": supplement_id})
        if not rows:
            return None
        return Supplement(**rows[0])

    async def add_supplement(self, user_id: str, data: dict[str, Any]) -> list[Supplement]:
        """Insert a supplement and return the refreshed list."""
        await self.insert_row("supplements", {"user_id": user_id, **data})
        return await self.list_supplements(user_id)


@lru_cache
def get_supabase_service() -> SupabaseService:
    """Shared service instance for request handlers."""
    return SupabaseService()


SupabaseDep = Annotated[SupabaseService, Depends(get_supabase_service)]
