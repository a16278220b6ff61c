"""
Recovery progress endpoints: dashboard overview and chart series.
"""

from fastapi import APIRouter, HTTPException, Query

from recovery.core.auth import CurrentUserId
from recovery.core.errors import PersistenceError
from recovery.models.schemas import ChartData, LengthUnit, ProgressOverview
from recovery.routers.profile import load_profile
from recovery.services import ProgressService, SupabaseDep

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("/overview", response_model=ProgressOverview)
async def get_overview(
    user_id: CurrentUserId,
    db: SupabaseDep,
    length_unit: LengthUnit = Query(default="cm"),
) -> ProgressOverview:
    """
    Dashboard summary.

    Returns:
    - Postpartum week and days since delivery
    - Latest weight and waist in display units
    - Weight change against pre-pregnancy weight
    """
    profile = await load_profile(db, user_id)

    try:
        measurements = await db.list_measurements(user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to build overview: {str(e)}")

    return ProgressService(length_unit).overview(profile, measurements)


@router.get("/chart", response_model=ChartData)
async def get_chart(
    user_id: CurrentUserId,
    db: SupabaseDep,
    length_unit: LengthUnit = Query(default="cm"),
) -> ChartData:
    """Measurement series for the progress chart, oldest first."""
    profile = await load_profile(db, user_id)

    try:
        measurements = await db.list_measurements(user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to build chart: {str(e)}")

    return ProgressService(length_unit).chart(measurements, profile.weight_unit)
