"""
Pydantic schemas for request/response validation.

Stored values are always canonical metric (kg, cm). Request models that
accept user-entered numbers say which unit they are in.
"""

import datetime as dt
from typing import Literal

from pydantic import BaseModel, Field, field_validator


DeliveryType = Literal["vaginal", "c-section"]
WeightUnit = Literal["kg", "lbs"]
LengthUnit = Literal["cm", "in"]
TimeOfDay = Literal["morning", "afternoon", "evening", "bedtime"]

ExerciseType = Literal[
    "walking",
    "swimming",
    "yoga",
    "stretching",
    "kegel",
    "pelvic-floor",
    "light-cardio",
    "other",
]


def _not_in_future(v: dt.date) -> dt.date:
    if v > dt.date.today():
        raise ValueError("Delivery date cannot be in the future")
    return v


# ============================================================================
# Profile Schemas
# ============================================================================


class OnboardingRequest(BaseModel):
    """Profile details collected right after sign-up."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    delivery_type: DeliveryType
    delivery_date: dt.date = Field(..., description="Delivery date (YYYY-MM-DD)")
    pre_pregnancy_weight: float = Field(..., gt=0, description="In weight_unit")
    weight_unit: WeightUnit = "kg"

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_names(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be blank")
        return v

    @field_validator("delivery_date")
    @classmethod
    def validate_delivery_date(cls, v: dt.date) -> dt.date:
        """Ensure the delivery date is not in the future."""
        return _not_in_future(v)


class ProfileUpdateRequest(OnboardingRequest):
    """Edit form for an existing profile."""

    username: str | None = Field(None, min_length=1, max_length=200)


class Profile(BaseModel):
    """User profile. pre_pregnancy_weight is in kg."""

    id: str
    username: str
    first_name: str
    last_name: str
    delivery_type: DeliveryType
    delivery_date: dt.date
    pre_pregnancy_weight: float
    weight_unit: WeightUnit = "kg"


# ============================================================================
# Measurement Schemas
# ============================================================================


class MeasurementRequest(BaseModel):
    """
    New body measurement.

    weight is entered in the profile's weight unit, sizes in length_unit.
    """

    date: dt.date = Field(default_factory=dt.date.today)
    weight: float | None = Field(None, gt=0)
    waist_size: float | None = Field(None, gt=0)
    hip_size: float | None = Field(None, gt=0)
    bust_size: float | None = Field(None, gt=0)
    length_unit: LengthUnit = "cm"


class Measurement(BaseModel):
    """A body measurement snapshot."""

    id: str
    date: dt.date
    weight: float | None = None
    waist_size: float | None = None
    hip_size: float | None = None
    bust_size: float | None = None


class MeasurementsResponse(BaseModel):
    """Measurement history converted to the requested display units."""

    weight_unit: WeightUnit
    length_unit: LengthUnit
    measurements: list[Measurement]


# ============================================================================
# Exercise Schemas
# ============================================================================


class ExerciseLogRequest(BaseModel):
    """Exercise session to log."""

    date: dt.date = Field(default_factory=dt.date.today)
    exercise_type: ExerciseType
    duration_minutes: int = Field(..., gt=0, le=1440)
    notes: str | None = Field(None, max_length=1000)


class ExerciseLogEntry(BaseModel):
    """A logged exercise session."""

    id: str
    date: dt.date
    exercise_type: str
    duration_minutes: int
    notes: str | None = None


class ExerciseSuggestion(BaseModel):
    """A recommended exercise. Derived on every request, never stored."""

    name: str
    description: str
    duration: str
    frequency: str
    cautions: list[str] | None = None


class RecommendationResponse(BaseModel):
    """Exercise program for the caller's current postpartum week."""

    postpartum_week: int
    delivery_type: DeliveryType
    suggestions: list[ExerciseSuggestion]
    guidelines: list[str]


# ============================================================================
# Supplement Schemas
# ============================================================================


class SupplementRequest(BaseModel):
    """New supplement in the user's regimen."""

    name: str = Field(..., min_length=1, max_length=200)
    dosage: str = Field(..., min_length=1, max_length=100)
    frequency: str = Field("daily", min_length=1, max_length=100)
    time_of_day: TimeOfDay = "morning"
    notes: str | None = Field(None, max_length=500)

    @field_validator("name", "dosage")
    @classmethod
    def require_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field cannot be blank")
        return v


class Supplement(BaseModel):
    """A supplement in the user's regimen."""

    id: str
    name: str
    dosage: str
    frequency: str
    time_of_day: TimeOfDay
    notes: str | None = None


class SupplementLogRequest(BaseModel):
    """Mark a supplement as taken (or not) for today."""

    taken: bool


class SupplementLogEntry(BaseModel):
    """Daily adherence record for one supplement."""

    id: str
    supplement_id: str
    supplement_name: str
    date: dt.date
    taken: bool
    taken_at: dt.datetime | None = None


# ============================================================================
# Mood Schemas
# ============================================================================


class MoodLogRequest(BaseModel):
    """Today's mood journal. Replaces any entry already saved today."""

    mood_rating: int = Field(..., ge=1, le=5)
    energy_level: int = Field(..., ge=1, le=5)
    journal_entry: str = Field("", max_length=5000)
    gratitude_notes: str = Field("", max_length=2000)


class MoodLogEntry(BaseModel):
    """A day's mood journal entry."""

    id: str
    date: dt.date
    mood_rating: int = Field(..., ge=1, le=5)
    energy_level: int = Field(..., ge=1, le=5)
    journal_entry: str | None = None
    gratitude_notes: str | None = None


# ============================================================================
# Hydration Schemas
# ============================================================================


class WaterIntakeRequest(BaseModel):
    """Water to add to today's intake. Negative amounts undo."""

    amount_ml: int = Field(..., ge=-10000, le=10000)


class HydrationTargetRequest(BaseModel):
    """Daily water target."""

    target_amount: int = Field(..., gt=0, le=10000)


class HydrationLogEntry(BaseModel):
    """Today's water intake. id/date are unset until something is logged."""

    id: str | None = None
    date: dt.date | None = None
    water_intake_ml: int = Field(0, ge=0)
    target_amount: int


# ============================================================================
# Progress Schemas
# ============================================================================


class ProgressOverview(BaseModel):
    """Summary cards shown at the top of the dashboard."""

    first_name: str
    delivery_type: DeliveryType
    delivery_date: dt.date
    postpartum_week: int
    days_since_delivery: int
    weight_unit: WeightUnit
    length_unit: LengthUnit
    latest_measurement_date: dt.date | None = None
    latest_weight: str | None = None
    latest_waist: str | None = None
    weight_change: str | None = Field(
        None, description="Latest weight minus pre-pregnancy weight"
    )


class ChartDataset(BaseModel):
    """One plotted series."""

    label: str
    data: list[float | None]


class ChartData(BaseModel):
    """Recovery progress series in display units."""

    labels: list[str]
    datasets: list[ChartDataset]
