"""
Hydration tracking endpoints.
"""

from fastapi import APIRouter, HTTPException

from recovery.core.auth import CurrentUserId
from recovery.core.errors import PersistenceError
from recovery.models.schemas import HydrationLogEntry, HydrationTargetRequest, WaterIntakeRequest
from recovery.services import HydrationTracker, SupabaseDep

router = APIRouter(prefix="/hydration", tags=["hydration"])


@router.get("/today", response_model=HydrationLogEntry)
async def get_today_hydration(user_id: CurrentUserId, db: SupabaseDep) -> HydrationLogEntry:
    """Today's intake. Zero with the current target when nothing is logged."""
    try:
        return await HydrationTracker(db).fetch_today(user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch hydration: {str(e)}")


@router.post("/water", response_model=HydrationLogEntry)
async def add_water(
    request: WaterIntakeRequest,
    user_id: CurrentUserId,
    db: SupabaseDep,
) -> HydrationLogEntry:
    """Add water to today's intake. A negative amount undoes, down to zero."""
    try:
        return await HydrationTracker(db).add_water(user_id, request.amount_ml)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to update hydration: {str(e)}")


@router.put("/target", response_model=HydrationLogEntry)
async def set_target(
    request: HydrationTargetRequest,
    user_id: CurrentUserId,
    db: SupabaseDep,
) -> HydrationLogEntry:
    """Change the daily water target."""
    try:
        return await HydrationTracker(db).set_target(user_id, request.target_amount)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to update hydration target: {str(e)}")
