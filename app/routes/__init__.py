# ── Auth ──────────────────────────────────────────────────────
from app.routes.auth_router import router as auth_router

# ── Fleet assets ──────────────────────────────────────────────
from app.routes.engine_router import router as engine_router
from app.routes.car_router import router as car_router

# ── People ────────────────────────────────────────────────────
from app.routes.user_router import router as user_router
from app.routes.driver_router import router as driver_router

# ── Trips ─────────────────────────────────────────────────────
from app.routes.trip_router import router as trip_router

__all__ = [
    "auth_router",
    "engine_router",
    "car_router",
    "user_router",
    "driver_router",
    "trip_router",
]
