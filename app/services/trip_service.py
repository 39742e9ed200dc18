from typing import List
from sqlalchemy.orm import Session

from app.crud.trip import trip_crud
from app.crud.interface import TripStore
from app.models.trip import Trip
from app.schemas.trip import TripRequest
from app.core.exceptions import NotFoundError
from app.utils.validation import parse_id, validate_trip_request
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class TripService:
    def __init__(self, store: TripStore = trip_crud):
        self.store = store

    def get_trip(self, db: Session, trip_id) -> Trip:
        trip_uuid = parse_id(trip_id, "trip_id")
        trip = self.store.get_by_id(db, trip_id=trip_uuid)
        if trip is None:
            raise NotFoundError("Trip not found", {"trip_id": str(trip_uuid)})
        return trip

    def list_trips(self, db: Session) -> List[Trip]:
        return self.store.get_all(db)

    def list_trips_by_car(self, db: Session, car_id) -> List[Trip]:
        return self.store.get_by_car(db, car_id=parse_id(car_id, "car_id"))

    def list_trips_by_driver(self, db: Session, driver_id) -> List[Trip]:
        return self.store.get_by_driver(db, driver_id=parse_id(driver_id, "driver_id"))

    def create_trip(self, db: Session, trip_req: TripRequest, actor: str) -> Trip:
        validate_trip_request(trip_req)
        return self.store.create(db, obj_in=trip_req, created_by=actor)

    def update_trip(self, db: Session, trip_id, trip_req: TripRequest, actor: str) -> Trip:
        trip_uuid = parse_id(trip_id, "trip_id")
        validate_trip_request(trip_req)
        return self.store.update_by_id(db, trip_id=trip_uuid, obj_in=trip_req, updated_by=actor)

    def update_trip_status(self, db: Session, trip_id, status: str, actor: str) -> Trip:
        """
        Set a trip's status without checking it against the known statuses
        or the current state; any transition is allowed.
        """
        trip_uuid = parse_id(trip_id, "trip_id")
        return self.store.update_status(db, trip_id=trip_uuid, status=status, updated_by=actor)

    def delete_trip(self, db: Session, trip_id) -> Trip:
        trip_uuid = parse_id(trip_id, "trip_id")
        deleted = self.store.remove(db, id=trip_uuid)
        if deleted is None:
            raise NotFoundError("Trip not found", {"trip_id": str(trip_uuid)})
        logger.info(f"[TripDelete] Trip deleted | trip_id={trip_uuid}")
        return deleted
