"""
Exercise log and recommendation endpoints.
"""

from fastapi import APIRouter, HTTPException

from recovery.core.auth import CurrentUserId
from recovery.core.errors import PersistenceError
from recovery.models.schemas import ExerciseLogEntry, ExerciseLogRequest, RecommendationResponse
from recovery.routers.profile import load_profile
from recovery.services import SupabaseDep, postpartum_clock, recommendation_engine

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("", response_model=list[ExerciseLogEntry])
async def list_exercise_logs(user_id: CurrentUserId, db: SupabaseDep) -> list[ExerciseLogEntry]:
    """Get exercise history, newest first."""
    try:
        return await db.list_exercise_logs(user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch exercise log: {str(e)}")


@router.post("", response_model=list[ExerciseLogEntry])
async def log_exercise(
    request: ExerciseLogRequest,
    user_id: CurrentUserId,
    db: SupabaseDep,
) -> list[ExerciseLogEntry]:
    """Log an exercise session and return the updated history."""
    try:
        return await db.add_exercise_log(
            user_id,
            log_date=request.date,
            exercise_type=request.exercise_type,
            duration_minutes=request.duration_minutes,
            notes=request.notes,
        )
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to log exercise: {str(e)}")


@router.get("/recommendations", response_model=RecommendationResponse)
async def get_recommendations(user_id: CurrentUserId, db: SupabaseDep) -> RecommendationResponse:
    """
    Recommended exercises for the caller's current postpartum week.

    Derived from delivery date and delivery type on every call.
    """
    profile = await load_profile(db, user_id)
    week = postpartum_clock.compute_week(profile.delivery_date)

    return RecommendationResponse(
        postpartum_week=week,
        delivery_type=profile.delivery_type,
        suggestions=recommendation_engine.suggest(week, profile.delivery_type),
        guidelines=recommendation_engine.GENERAL_GUIDELINES,
    )
