"""
Onboarding and profile endpoints.
"""

import logging

from fastapi import APIRouter, HTTPException

from recovery.core.auth import CurrentUserId
from recovery.core.errors import PersistenceError
from recovery.models.schemas import OnboardingRequest, Profile, ProfileUpdateRequest
from recovery.services import SupabaseDep, SupabaseService
from recovery.services.units import to_canonical_weight

logger = logging.getLogger(__name__)

router = APIRouter(tags=["profile"])


async def load_profile(db: SupabaseService, user_id: str) -> Profile:
    """Fetch the caller's profile or fail with 404."""
    try:
        profile = await db.get_profile(user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found, complete onboarding first")
    return profile


def _profile_data(request: OnboardingRequest, username: str | None = None) -> dict:
    return {
        "first_name": request.first_name,
        "last_name": request.last_name,
        "username": username or f"{request.first_name} {request.last_name}",
        "delivery_type": request.delivery_type,
        "delivery_date": request.delivery_date.isoformat(),
        "pre_pregnancy_weight": to_canonical_weight(
            request.pre_pregnancy_weight, request.weight_unit
        ),
        "weight_unit": request.weight_unit,
    }


@router.post("/onboarding", response_model=Profile)
async def onboard_user(
    request: OnboardingRequest,
    user_id: CurrentUserId,
    db: SupabaseDep,
) -> Profile:
    """
    Save the caller's profile.
    Creates it on first submit and updates it when it already exists.
    """
    try:
        data = _profile_data(request)
        existing = await db.get_profile(user_id)

        if existing:
            logger.info(f"Profile for {user_id} already exists, updating")
            return await db.update_profile(user_id, data)

        return await db.create_profile(user_id, data)

    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Onboarding failed: {str(e)}")


@router.get("/profile", response_model=Profile)
async def get_profile(user_id: CurrentUserId, db: SupabaseDep) -> Profile:
    """Get the caller's profile."""
    return await load_profile(db, user_id)


@router.put("/profile", response_model=Profile)
async def update_profile(
    request: ProfileUpdateRequest,
    user_id: CurrentUserId,
    db: SupabaseDep,
) -> Profile:
    """Edit the caller's profile."""
    await load_profile(db, user_id)

    try:
        return await db.update_profile(user_id, _profile_data(request, request.username))
    except PersistenceError as e:
        raise HTTPException(status_code=500, detail=f"Failed to update profile: {str(e)}")
