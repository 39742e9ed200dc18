from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database.session import get_db
from app.schemas.trip import TripRequest, TripResponse
from app.services.trip_service import TripService
from app.utils.response_utils import ResponseWrapper
from app.core.exceptions import FleetError
from common_utils.auth.middleware import get_current_username
from app.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/trips", tags=["trips"])


def get_trip_service() -> TripService:
    return TripService()


@router.get("", response_model=dict)
def list_trips(
    db: Session = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service),
    username: str = Depends(get_current_username),
):
    trips = trip_service.list_trips(db)
    return ResponseWrapper.success(
        data=[TripResponse.model_validate(t) for t in trips],
        message=f"Fetched {len(trips)} trips",
    )


@router.get("/{trip_id}", response_model=dict)
def get_trip(
    trip_id: str,
    db: Session = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service),
    username: str = Depends(get_current_username),
):
    trip = trip_service.get_trip(db, trip_id)
    return ResponseWrapper.success(data=TripResponse.model_validate(trip))


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_trip(
    trip_in: TripRequest,
    db: Session = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service),
    username: str = Depends(get_current_username),
):
    logger.info(
        f"[TripCreate] Request by user={username} | driver_id={trip_in.driver_id}, car_id={trip_in.car_id}"
    )
    try:
        trip = trip_service.create_trip(db, trip_in, username)
    except FleetError as e:
        logger.warning(f"[TripCreate] Rejected | {e.error_code}: {e.message}")
        raise

    return ResponseWrapper.created(
        data=TripResponse.model_validate(trip),
        message="Trip created successfully",
    )


@router.put("/{trip_id}", response_model=dict)
def update_trip(
    trip_id: str,
    trip_in: TripRequest,
    db: Session = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service),
    username: str = Depends(get_current_username),
):
    trip = trip_service.update_trip(db, trip_id, trip_in, username)
    return ResponseWrapper.updated(
        data=TripResponse.model_validate(trip),
        message="Trip updated successfully",
    )


@router.put("/{trip_id}/update-status", response_model=dict)
def update_trip_status(
    trip_id: str,
    trip_status: str = Query(..., alias="status"),
    db: Session = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service),
    username: str = Depends(get_current_username),
):
    trip = trip_service.update_trip_status(db, trip_id, trip_status, username)
    return ResponseWrapper.updated(
        data=TripResponse.model_validate(trip),
        message=f"Trip status set to {trip.status}",
    )


@router.delete("/{trip_id}", response_model=dict)
def delete_trip(
    trip_id: str,
    db: Session = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service),
    username: str = Depends(get_current_username),
):
    trip = trip_service.delete_trip(db, trip_id)
    return ResponseWrapper.deleted(
        data=TripResponse.model_validate(trip),
        message="Trip deleted successfully",
    )
