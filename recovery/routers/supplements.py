"""
Supplement regimen and daily adherence endpoints.
"""

from fastapi import APIRouter, HTTPException, Query

from recovery.core.auth import CurrentUserId
from recovery.core.errors import PersistenceError
from recovery.models.schemas import (
    Supplement,
    SupplementLogEntry,
    SupplementLogRequest,
    SupplementRequest,
)
from recovery.services import SupabaseDep, SupplementAdherenceLog

router = APIRouter(prefix="/supplements", tags=["supplements"])


@router.get("", response_model=list[Supplement])
async def list_supplements(user_id: CurrentUserId, db: SupabaseDep) -> list[Supplement]:
    """Get the caller's supplements ordered by name."""
    try:
        return await db.list_supplements(user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch supplements: {str(e)}")


@router.post("", response_model=list[Supplement])
async def add_supplement(
    request: SupplementRequest,
    user_id: CurrentUserId,
    db: SupabaseDep,
) -> list[Supplement]:
    """Add a supplement and return the updated list."""
    try:
        return await db.add_supplement(user_id, request.model_dump())
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to add supplement: {str(e)}")


@router.post("/{supplement_id}/log", response_model=SupplementLogEntry)
async def log_supplement(
    supplement_id: str,
    request: SupplementLogRequest,
    user_id: CurrentUserId,
    db: SupabaseDep,
) -> SupplementLogEntry:
    """Mark a supplement taken or not taken today."""
    try:
        supplement = await db.get_supplement(user_id, supplement_id)
        if not supplement:
            raise HTTPException(status_code=404, detail="Supplement not found")

        return await SupplementAdherenceLog(db).log(user_id, supplement, request.taken)

    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to log supplement: {str(e)}")


@router.get("/logs/today", response_model=list[SupplementLogEntry])
async def get_today_logs(user_id: CurrentUserId, db: SupabaseDep) -> list[SupplementLogEntry]:
    """Today's adherence. Supplements without a log have not been marked yet."""
    try:
        return await SupplementAdherenceLog(db).today_logs(user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch supplement logs: {str(e)}")


@router.get("/logs", response_model=list[SupplementLogEntry])
async def get_log_history(
    user_id: CurrentUserId,
    db: SupabaseDep,
    limit: int | None = Query(default=None, ge=1, le=500),
) -> list[SupplementLogEntry]:
    """Recent adherence history, newest first."""
    try:
        return await SupplementAdherenceLog(db).history(user_id, limit)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch supplement logs: {str(e)}")
