from typing import List, Optional
from sqlalchemy.orm import Session

from app.crud.car import car_crud
from app.crud.interface import CarStore
from app.models.car import Car
from app.schemas.car import CarRequest
from app.core.exceptions import NotFoundError
from app.utils.validation import parse_id, validate_car_request
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class CarService:
    """Validates car requests and hands them to the car store."""

    def __init__(self, store: CarStore = car_crud):
        self.store = store

    def get_car(self, db: Session, car_id) -> Car:
        car_uuid = parse_id(car_id, "car_id")
        car = self.store.get_by_id(db, car_id=car_uuid)
        if car is None:
            raise NotFoundError("Car not found", {"car_id": str(car_uuid)})
        return car

    def list_cars(
        self, db: Session, brand: Optional[str] = None, include_engine: bool = False
    ) -> List[Car]:
        return self.store.get_all(db, brand=brand, include_engine=include_engine)

    def create_car(self, db: Session, car_req: CarRequest, actor: str) -> Car:
        validate_car_request(car_req)
        return self.store.create(db, obj_in=car_req, created_by=actor)

    def update_car(self, db: Session, car_id, car_req: CarRequest, actor: str) -> Car:
        car_uuid = parse_id(car_id, "car_id")
        validate_car_request(car_req)
        return self.store.update_by_id(db, car_id=car_uuid, obj_in=car_req, updated_by=actor)

    def delete_car(self, db: Session, car_id) -> Car:
        car_uuid = parse_id(car_id, "car_id")
        deleted = self.store.remove(db, id=car_uuid)
        if deleted is None:
            raise NotFoundError("Car not found", {"car_id": str(car_uuid)})
        logger.info(f"[CarDelete] Car deleted | car_id={car_uuid}")
        return deleted
