"""API routers."""

from .health import router as health_router
from .profile import router as profile_router
from .measurements import router as measurements_router
from .exercises import router as exercises_router
from .supplements import router as supplements_router
from .mood import router as mood_router
from .hydration import router as hydration_router
from .progress import router as progress_router

__all__ = [
    "health_router",
    "profile_router",
    "measurements_router",
    "exercises_router",
    "supplements_router",
    "mood_router",
    "hydration_router",
    "progress_router",
]
