"""
Mood journal endpoints.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException

from recovery.core.auth import CurrentUserId
from recovery.core.errors import PersistenceError
from recovery.models.schemas import MoodLogEntry, MoodLogRequest
from recovery.services import MoodJournal, SupabaseDep

router = APIRouter(prefix="/mood", tags=["mood"])


@router.get("/today", response_model=Optional[MoodLogEntry])
async def get_today_mood(user_id: CurrentUserId, db: SupabaseDep) -> Optional[MoodLogEntry]:
    """Today's entry, or null if nothing was submitted yet."""
    try:
        return await MoodJournal(db).fetch_today(user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch mood entry: {str(e)}")


@router.post("", response_model=MoodLogEntry)
async def submit_mood(
    request: MoodLogRequest,
    user_id: CurrentUserId,
    db: SupabaseDep,
) -> MoodLogEntry:
    """Save today's mood entry, replacing any earlier one from today."""
    try:
        return await MoodJournal(db).submit(user_id, request)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to save mood entry: {str(e)}")
