from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.models.trip import Trip
from app.schemas.trip import TripRequest
from app.crud.base import CRUDBase, translate_db_errors
from app.core.exceptions import NotFoundError
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class CRUDTrip(CRUDBase[Trip]):
    """
    Trips store. Driver and car references are enforced by the foreign
    keys alone; a dangling id surfaces as ReferentialIntegrityError.
    """

    def get_by_id(self, db: Session, *, trip_id: UUID) -> Optional[Trip]:
        return self.get(db, trip_id)

    def get_all(self, db: Session) -> List[Trip]:
        return self.get_multi(db)

    def get_by_car(self, db: Session, *, car_id: UUID) -> List[Trip]:
        return self.get_multi(db, filters={"car_id": car_id})

    def get_by_driver(self, db: Session, *, driver_id: UUID) -> List[Trip]:
        return self.get_multi(db, filters={"driver_id": driver_id})

    def create(self, db: Session, *, obj_in: TripRequest, created_by: str) -> Trip:
        db_obj = Trip(
            description=obj_in.description,
            driver_id=obj_in.driver_id,
            car_id=obj_in.car_id,
            start_location=obj_in.start_location,
            end_location=obj_in.end_location,
            start_time=obj_in.start_time,
            end_time=obj_in.end_time,
            distance_km=obj_in.distance_km,
            fuel_consumed_liters=obj_in.fuel_consumed_liters,
            status=obj_in.status,
            created_by=created_by,
            updated_by=created_by,
        )
        db_obj = self.insert(db, db_obj)
        logger.info(
            f"[TripCreate] Trip created | trip_id={db_obj.id}, driver_id={db_obj.driver_id}, car_id={db_obj.car_id}"
        )
        return db_obj

    def _reload(self, db: Session, trip_id: UUID) -> Trip:
        trip = self.get(db, trip_id)
        if trip is None:
            raise NotFoundError(f"Trip {trip_id} not found")
        return trip

    def update_by_id(
        self, db: Session, *, trip_id: UUID, obj_in: TripRequest, updated_by: str
    ) -> Trip:
        self.update_row(
            db,
            id=trip_id,
            values={
                Trip.description: obj_in.description,
                Trip.driver_id: obj_in.driver_id,
                Trip.car_id: obj_in.car_id,
                Trip.start_location: obj_in.start_location,
                Trip.end_location: obj_in.end_location,
                Trip.start_time: obj_in.start_time,
                Trip.end_time: obj_in.end_time,
                Trip.distance_km: obj_in.distance_km,
                Trip.fuel_consumed_liters: obj_in.fuel_consumed_liters,
                Trip.status: obj_in.status,
                Trip.updated_by: updated_by,
            },
        )
        logger.info(f"[TripUpdate] Trip updated | trip_id={trip_id}")
        return self._reload(db, trip_id)

    def update_status(
        self, db: Session, *, trip_id: UUID, status: str, updated_by: str
    ) -> Trip:
        """Change only the status column; the value is stored as given"""
        self.update_row(
            db,
            id=trip_id,
            values={Trip.status: status, Trip.updated_by: updated_by},
        )
        logger.info(f"[TripStatus] status={status} | trip_id={trip_id}")
        return self._reload(db, trip_id)


trip_crud = CRUDTrip(Trip)
