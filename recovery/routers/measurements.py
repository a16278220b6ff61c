"""
Body measurement endpoints.
"""

from fastapi import APIRouter, HTTPException, Query

from recovery.core.auth import CurrentUserId
from recovery.core.errors import PersistenceError
from recovery.models.schemas import LengthUnit, MeasurementRequest, MeasurementsResponse
from recovery.routers.profile import load_profile
from recovery.services import ProgressService, SupabaseDep
from recovery.services.units import to_canonical_length, to_canonical_weight

router = APIRouter(prefix="/measurements", tags=["measurements"])


@router.get("", response_model=MeasurementsResponse)
async def list_measurements(
    user_id: CurrentUserId,
    db: SupabaseDep,
    length_unit: LengthUnit = Query(default="cm"),
) -> MeasurementsResponse:
    """
    Get measurement history, oldest first.

    Weight is returned in the profile's weight unit, sizes in length_unit.
    """
    profile = await load_profile(db, user_id)

    try:
        measurements = await db.list_measurements(user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch measurements: {str(e)}")

    progress = ProgressService(length_unit)
    return MeasurementsResponse(
        weight_unit=profile.weight_unit,
        length_unit=length_unit,
        measurements=[progress.to_display(m, profile.weight_unit) for m in measurements],
    )


@router.post("", response_model=MeasurementsResponse)
async def add_measurement(
    request: MeasurementRequest,
    user_id: CurrentUserId,
    db: SupabaseDep,
) -> MeasurementsResponse:
    """Record a measurement. Values are stored in kg / cm."""
    profile = await load_profile(db, user_id)

    try:
        measurements = await db.add_measurement(
            user_id,
            measurement_date=request.date,
            weight=to_canonical_weight(request.weight, profile.weight_unit),
            waist_size=to_canonical_length(request.waist_size, request.length_unit),
            hip_size=to_canonical_length(request.hip_size, request.length_unit),
            bust_size=to_canonical_length(request.bust_size, request.length_unit),
        )
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to add measurement: {str(e)}")

    progress = ProgressService(request.length_unit)
    return MeasurementsResponse(
        weight_unit=profile.weight_unit,
        length_unit=request.length_unit,
        measurements=[progress.to_display(m, profile.weight_unit) for m in measurements],
    )
