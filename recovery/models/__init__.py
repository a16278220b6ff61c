"""Data models and schemas."""

from .schemas import (
    OnboardingRequest,
    ProfileUpdateRequest,
    Profile,
    MeasurementRequest,
    Measurement,
    MeasurementsResponse,
    ExerciseLogRequest,
    ExerciseLogEntry,
    ExerciseSuggestion,
    RecommendationResponse,
    SupplementRequest,
    Supplement,
    SupplementLogRequest,
    SupplementLogEntry,
    MoodLogRequest,
    MoodLogEntry,
    WaterIntakeRequest,
    HydrationTargetRequest,
    HydrationLogEntry,
    ProgressOverview,
    ChartData,
)

__all__ = [
    "OnboardingRequest",
    "ProfileUpdateRequest",
    "Profile",
    "MeasurementRequest",
    "Measurement",
    "MeasurementsResponse",
    "ExerciseLogRequest",
    "ExerciseLogEntry",
    "ExerciseSuggestion",
    "RecommendationResponse",
    "SupplementRequest",
    "Supplement",
    "SupplementLogRequest",
    "SupplementLogEntry",
    "MoodLogRequest",
    "MoodLogEntry",
    "WaterIntakeRequest",
    "HydrationTargetRequest",
    "HydrationLogEntry",
    "ProgressOverview",
    "ChartData",
]
