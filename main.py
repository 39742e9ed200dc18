from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from app.config import settings
from app.core.exceptions import FleetError, UnauthorizedError
from app.core.logging_config import setup_logging, get_logger
from app.middleware import RequestTrackingMiddleware, request_tracker
from app.routes import (
    auth_router,
    engine_router,
    car_router,
    user_router,
    driver_router,
    trip_router,
)
from app.utils.response_utils import ResponseWrapper

# Setup logging as early as possible
setup_logging(force_configure=True)

logger = get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="API for managing cars, engines, drivers and trips",
    version=settings.APP_VERSION,
)

# Set up CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestTrackingMiddleware)

# Include routers
app.include_router(auth_router, prefix=settings.API_PREFIX)
app.include_router(engine_router, prefix=settings.API_PREFIX)
app.include_router(car_router, prefix=settings.API_PREFIX)
app.include_router(user_router, prefix=settings.API_PREFIX)
app.include_router(driver_router, prefix=settings.API_PREFIX)
app.include_router(trip_router, prefix=settings.API_PREFIX)


@app.exception_handler(FleetError)
async def fleet_error_handler(request: Request, exc: FleetError):
    """Render domain errors in the standard error envelope"""
    headers = None
    if isinstance(exc, UnauthorizedError):
        headers = {"WWW-Authenticate": "Bearer"}
    if exc.status_code >= 500:
        logger.error(f"[{exc.error_code}] {request.method} {request.url.path} | {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=ResponseWrapper.from_error(exc),
        headers=headers,
    )


@app.get("/")
async def root():
    return {"message": f"Welcome to {settings.APP_NAME}"}


@app.get("/health")
async def health_check():
    return {"message": "I Am Alive!!", "requests": request_tracker.get_request_stats()}


@app.on_event("startup")
async def startup_event():
    """Application startup event"""
    logger.info(f"{settings.APP_NAME} starting up | env={settings.ENV}")
    if settings.CREATE_TABLES_ON_STARTUP:
        from app.database.create_tables import create_tables

        create_tables()


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown event"""
    logger.info(f"{settings.APP_NAME} shutting down")


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
