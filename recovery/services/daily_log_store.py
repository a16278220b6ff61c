"""
Daily logs: records kept at most once per user per calendar day.

Supplement adherence, mood journal and hydration all follow the same
pattern: look up today's row for the key, update it in place when it
exists, insert it stamped with today's date otherwise. DailyLogStore
implements that once; subclasses only decide how a payload merges into
the stored row.
"""

import asyncio
import logging
import weakref
from datetime import date, datetime, timezone
from typing import Any, Callable

from recovery.core.config import settings
from recovery.core.errors import PersistenceError
from recovery.models.schemas import (
    HydrationLogEntry,
    MoodLogEntry,
    MoodLogRequest,
    Supplement,
    SupplementLogEntry,
)
from recovery.services.supabase_service import SupabaseService

logger = logging.getLogger(__name__)

Row = dict[str, Any]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DailyLogStore:
    """
    Keyed upsert over one table.

    Rows are keyed by (user_id, date) plus any sub-key columns the caller
    passes (supplement_id for supplement logs). Writes to the same key are
    serialized in-process; after an insert the key is re-read and any
    duplicate written by another process is removed.
    """

    table: str = ""

    # Shared by every instance so that per-request stores still serialize
    _locks: "weakref.WeakValueDictionary[tuple, asyncio.Lock]" = weakref.WeakValueDictionary()

    def __init__(
        self,
        db: SupabaseService,
        today: Callable[[], date] = date.today,
        now: Callable[[], datetime] = utc_now,
    ) -> None:
        self.db = db
        self.today = today
        self.now = now

    def _key_filters(self, user_id: str, day: date, sub_key: Row | None) -> Row:
        return {"user_id": user_id, "date": day.isoformat(), **(sub_key or {})}

    def _lock_for(self, filters: Row) -> asyncio.Lock:
        key = (self.table, *sorted(filters.items()))
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    async def merge(self, user_id: str, existing: Row | None, payload: Row) -> Row:
        """Values to write for this payload. Default: overwrite wholesale."""
        return dict(payload)

    async def find_today(self, user_id: str, sub_key: Row | None = None) -> Row | None:
        """Today's stored row for the key, or None."""
        filters = self._key_filters(user_id, self.today(), sub_key)
        rows = await self.db.find_rows(self.table, filters)
        return rows[0] if rows else None

    async def upsert_today(self, user_id: str, payload: Row, sub_key: Row | None = None) -> Row:
        """Create or update today's row for the key and return it as stored."""
        filters = self._key_filters(user_id, self.today(), sub_key)

        async with self._lock_for(filters):
            rows = await self.db.find_rows(self.table, filters)
            existing = rows[0] if rows else None
            values = await self.merge(user_id, existing, payload)

            if existing:
                return await self.db.update_row(self.table, existing["id"], values)

            row = await self.db.insert_row(self.table, {**filters, **values})
            try:
                survivor = await self._drop_duplicates(filters)
            except PersistenceError as e:
                logger.error(f"Duplicate check on {self.table} failed after insert: {str(e)}")
                return row

            if survivor is None or survivor["id"] == row["id"]:
                return row

            # Another writer's row won; fold this payload into it
            values = await self.merge(user_id, survivor, payload)
            return await self.db.update_row(self.table, survivor["id"], values)

    async def _drop_duplicates(self, filters: Row) -> Row | None:
        """
        Keep the earliest row for the key and delete the rest.

        Every writer picks the same survivor: oldest created_at, then id.
        """
        rows = await self.db.find_rows(self.table, filters)
        if not rows:
            return None

        rows.sort(key=lambda r: (str(r.get("created_at") or ""), str(r["id"])))
        survivor, extra = rows[0], rows[1:]
        if extra:
            logger.warning(
                f"Removing {len(extra)} duplicate {self.table} row(s) for {filters}"
            )
            await self.db.delete_rows(self.table, [r["id"] for r in extra])
        return survivor


class SupplementAdherenceLog(DailyLogStore):
    """Taken / not taken, once per supplement per day."""

    table = "supplement_logs"

    async def merge(self, user_id: str, existing: Row | None, payload: Row) -> Row:
        taken = bool(payload["taken"])
        values: Row = {
            "taken": taken,
            "taken_at": self.now().isoformat() if taken else None,
        }
        if existing is None:
            values["supplement_name"] = payload["supplement_name"]
        return values

    async def log(self, user_id: str, supplement: Supplement, taken: bool) -> SupplementLogEntry:
        """Mark a supplement taken or not taken for today."""
        row = await self.upsert_today(
            user_id,
            {"taken": taken, "supplement_name": supplement.name},
            sub_key={"supplement_id": supplement.id},
        )
        logger.info(f"Supplement {supplement.id} marked taken={taken} for user {user_id}")
        return SupplementLogEntry(**row)

    async def fetch_today(self, user_id: str, supplement_id: str) -> SupplementLogEntry | None:
        row = await self.find_today(user_id, {"supplement_id": supplement_id})
        return SupplementLogEntry(**row) if row else None

    async def today_logs(self, user_id: str) -> list[SupplementLogEntry]:
        """All of today's supplement logs."""
        rows = await self.db.find_rows(
            self.table,
            {"user_id": user_id},
            order_by="date",
            since=("date", self.today().isoformat()),
        )
        return [SupplementLogEntry(**row) for row in rows]

    async def history(self, user_id: str, limit: int | None = None) -> list[SupplementLogEntry]:
        """Most recent supplement logs, newest first."""
        rows = await self.db.find_rows(
            self.table,
            {"user_id": user_id},
            order_by="date",
            desc=True,
            limit=limit or settings.supplement_history_limit,
        )
        return [SupplementLogEntry(**row) for row in rows]


class MoodJournal(DailyLogStore):
    """One mood entry per day, replaced wholesale on every submit."""

    table = "mood_logs"

    async def submit(self, user_id: str, entry: MoodLogRequest) -> MoodLogEntry:
        row = await self.upsert_today(user_id, entry.model_dump())
        return MoodLogEntry(**row)

    async def fetch_today(self, user_id: str) -> MoodLogEntry | None:
        row = await self.find_today(user_id)
        return MoodLogEntry(**row) if row else None


class HydrationTracker(DailyLogStore):
    """Cumulative water intake per day. Intake never goes below zero."""

    table = "hydration_logs"

    async def latest_target(self, user_id: str) -> int:
        """Most recently stored target, or the configured default."""
        rows = await self.db.find_rows(
            self.table, {"user_id": user_id}, order_by="date", desc=True, limit=1
        )
        if rows and rows[0].get("target_amount"):
            return int(rows[0]["target_amount"])
        return settings.default_hydration_target_ml

    async def merge(self, user_id: str, existing: Row | None, payload: Row) -> Row:
        existing = existing or {}
        target = existing.get("target_amount")
        if target is None:
            target = await self.latest_target(user_id)

        values: Row = {
            "water_intake_ml": int(existing.get("water_intake_ml") or 0),
            "target_amount": int(target),
        }
        if "delta_ml" in payload:
            values["water_intake_ml"] = max(0, values["water_intake_ml"] + int(payload["delta_ml"]))
        if "target_amount" in payload:
            values["target_amount"] = int(payload["target_amount"])
        return values

    async def add_water(self, user_id: str, delta_ml: int) -> HydrationLogEntry:
        """Add (or with a negative delta, remove) water from today's intake."""
        row = await self.upsert_today(user_id, {"delta_ml": delta_ml})
        return HydrationLogEntry(**row)

    async def set_target(self, user_id: str, target_ml: int) -> HydrationLogEntry:
        row = await self.upsert_today(user_id, {"target_amount": target_ml})
        return HydrationLogEntry(**row)

    async def fetch_today(self, user_id: str) -> HydrationLogEntry:
        row = await self.find_today(user_id)
        if row and row.get("target_amount") is not None:
            return HydrationLogEntry(**row)
        if row:
            return HydrationLogEntry(**{**row, "target_amount": await self.latest_target(user_id)})
        return HydrationLogEntry(water_intake_ml=0, target_amount=await self.latest_target(user_id))
