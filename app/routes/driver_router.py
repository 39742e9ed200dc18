from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database.session import get_db
from app.schemas.driver import (
    DriverRequest, DriverUpdateRequest, DriverResponse, DriverWithUserResponse
)
from app.schemas.trip import TripResponse
from app.services.driver_service import DriverService
from app.services.trip_service import TripService
from app.routes.trip_router import get_trip_service
from app.utils.response_utils import ResponseWrapper
from app.core.exceptions import FleetError
from common_utils.auth.middleware import get_current_username
from app.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/drivers", tags=["drivers"])


def get_driver_service() -> DriverService:
    return DriverService()


@router.get("", response_model=dict)
def list_drivers(
    db: Session = Depends(get_db),
    driver_service: DriverService = Depends(get_driver_service),
    username: str = Depends(get_current_username),
):
    drivers = driver_service.list_drivers(db)
    return ResponseWrapper.success(
        data=[DriverWithUserResponse.model_validate(d) for d in drivers],
        message=f"Fetched {len(drivers)} drivers",
    )


@router.get("/{driver_id}", response_model=dict)
def get_driver(
    driver_id: str,
    db: Session = Depends(get_db),
    driver_service: DriverService = Depends(get_driver_service),
    username: str = Depends(get_current_username),
):
    driver = driver_service.get_driver(db, driver_id)
    return ResponseWrapper.success(data=DriverWithUserResponse.model_validate(driver))


@router.get("/{driver_id}/trips", response_model=dict)
def list_driver_trips(
    driver_id: str,
    db: Session = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service),
    username: str = Depends(get_current_username),
):
    trips = trip_service.list_trips_by_driver(db, driver_id)
    return ResponseWrapper.success(
        data=[TripResponse.model_validate(t) for t in trips],
        message=f"Fetched {len(trips)} trips",
    )


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_driver(
    driver_in: DriverRequest,
    db: Session = Depends(get_db),
    driver_service: DriverService = Depends(get_driver_service),
    username: str = Depends(get_current_username),
):
    try:
        driver = driver_service.create_driver(db, driver_in, username)
    except FleetError as e:
        logger.warning(f"[DriverCreate] Rejected | user_id={driver_in.user_id} {e.error_code}: {e.message}")
        raise

    return ResponseWrapper.created(
        data=DriverWithUserResponse.model_validate(driver),
        message="Driver created successfully",
    )


@router.put("/{driver_id}", response_model=dict)
def update_driver(
    driver_id: str,
    driver_in: DriverUpdateRequest,
    db: Session = Depends(get_db),
    driver_service: DriverService = Depends(get_driver_service),
    username: str = Depends(get_current_username),
):
    driver = driver_service.update_driver(db, driver_id, driver_in)
    return ResponseWrapper.updated(
        data=DriverWithUserResponse.model_validate(driver),
        message="Driver updated successfully",
    )


@router.put("/{driver_id}/toggle-status", response_model=dict)
def toggle_driver_status(
    driver_id: str,
    active: bool = Query(..., description="New value of the active flag"),
    db: Session = Depends(get_db),
    driver_service: DriverService = Depends(get_driver_service),
    username: str = Depends(get_current_username),
):
    """
    Activate or deactivate a driver. Setting the current value again is a no-op.
    """
    driver = driver_service.toggle_driver_status(db, driver_id, active)
    status_str = "activated" if driver.active else "deactivated"
    logger.info(f"[DriverToggle] Driver {driver_id} -> {status_str} by user={username}")

    return ResponseWrapper.updated(
        data=DriverResponse.model_validate(driver),
        message=f"Driver successfully {status_str}",
    )


@router.delete("/{driver_id}", response_model=dict)
def soft_delete_driver(
    driver_id: str,
    db: Session = Depends(get_db),
    driver_service: DriverService = Depends(get_driver_service),
    username: str = Depends(get_current_username),
):
    driver = driver_service.soft_delete_driver(db, driver_id)
    return ResponseWrapper.deleted(
        data=DriverResponse.model_validate(driver),
        message="Driver deleted successfully",
    )


@router.delete("/{driver_id}/delete", response_model=dict)
def delete_driver(
    driver_id: str,
    db: Session = Depends(get_db),
    driver_service: DriverService = Depends(get_driver_service),
    username: str = Depends(get_current_username),
):
    """
    Permanently remove a driver row.
    """
    driver = driver_service.delete_driver(db, driver_id)
    return ResponseWrapper.deleted(
        data=DriverResponse.model_validate(driver),
        message="Driver permanently deleted",
    )
