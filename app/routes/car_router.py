from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database.session import get_db
from app.schemas.car import CarRequest, CarResponse, CarWithEngineResponse
from app.schemas.trip import TripResponse
from app.services.car_service import CarService
from app.services.trip_service import TripService
from app.routes.trip_router import get_trip_service
from app.utils.response_utils import ResponseWrapper
from app.core.exceptions import FleetError
from common_utils.auth.middleware import get_current_username
from app.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/cars", tags=["cars"])


def get_car_service() -> CarService:
    return CarService()


@router.get("", response_model=dict)
def list_cars(
    brand: Optional[str] = Query(None, description="Exact brand to filter by"),
    is_engine: bool = Query(False, alias="isEngine", description="Include each car's engine"),
    db: Session = Depends(get_db),
    car_service: CarService = Depends(get_car_service),
    username: str = Depends(get_current_username),
):
    """
    List cars, optionally for a single brand and with their engines.
    """
    cars = car_service.list_cars(db, brand=brand, include_engine=is_engine)
    schema = CarWithEngineResponse if is_engine else CarResponse
    return ResponseWrapper.success(
        data=[schema.model_validate(c) for c in cars],
        message=f"Fetched {len(cars)} cars",
    )


@router.get("/{car_id}", response_model=dict)
def get_car(
    car_id: str,
    db: Session = Depends(get_db),
    car_service: CarService = Depends(get_car_service),
    username: str = Depends(get_current_username),
):
    car = car_service.get_car(db, car_id)
    return ResponseWrapper.success(data=CarWithEngineResponse.model_validate(car))


@router.get("/{car_id}/trips", response_model=dict)
def list_car_trips(
    car_id: str,
    db: Session = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service),
    username: str = Depends(get_current_username),
):
    trips = trip_service.list_trips_by_car(db, car_id)
    return ResponseWrapper.success(
        data=[TripResponse.model_validate(t) for t in trips],
        message=f"Fetched {len(trips)} trips",
    )


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_car(
    car_in: CarRequest,
    db: Session = Depends(get_db),
    car_service: CarService = Depends(get_car_service),
    username: str = Depends(get_current_username),
):
    logger.info(f"[CarCreate] Request by user={username} | registration_number={car_in.registration_number}")
    try:
        car = car_service.create_car(db, car_in, username)
    except FleetError as e:
        logger.warning(f"[CarCreate] Rejected | {e.error_code}: {e.message}")
        raise

    return ResponseWrapper.created(
        data=CarWithEngineResponse.model_validate(car),
        message="Car created successfully",
    )


@router.put("/{car_id}", response_model=dict)
def update_car(
    car_id: str,
    car_in: CarRequest,
    db: Session = Depends(get_db),
    car_service: CarService = Depends(get_car_service),
    username: str = Depends(get_current_username),
):
    try:
        car = car_service.update_car(db, car_id, car_in, username)
    except FleetError as e:
        logger.warning(f"[CarUpdate] Rejected | car_id={car_id} {e.error_code}: {e.message}")
        raise

    return ResponseWrapper.updated(
        data=CarWithEngineResponse.model_validate(car),
        message="Car updated successfully",
    )


@router.delete("/{car_id}", response_model=dict)
def delete_car(
    car_id: str,
    db: Session = Depends(get_db),
    car_service: CarService = Depends(get_car_service),
    username: str = Depends(get_current_username),
):
    car = car_service.delete_car(db, car_id)
    return ResponseWrapper.deleted(
        data=CarResponse.model_validate(car),
        message="Car deleted successfully",
    )
