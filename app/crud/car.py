from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session, joinedload

from app.models.car import Car
from app.models.engine import Engine
from app.schemas.car import CarRequest
from app.crud.base import CRUDBase, translate_db_errors
from app.core.exceptions import NotFoundError, ReferentialIntegrityError
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class CRUDCar(CRUDBase[Car]):

    def get_by_id(self, db: Session, *, car_id: UUID) -> Optional[Car]:
        """Fetch a car together with its engine"""
        with translate_db_errors(db):
            return (
                db.query(Car)
                .options(joinedload(Car.engine))
                .filter(Car.id == car_id)
                .first()
            )

    def get_all(
        self,
        db: Session,
        *,
        brand: Optional[str] = None,
        include_engine: bool = False
    ) -> List[Car]:
        """List cars, optionally narrowed to one brand (exact match)"""
        query = db.query(Car)

        if include_engine:
            query = query.options(joinedload(Car.engine))

        if brand:
            query = query.filter(Car.brand == brand)

        with translate_db_errors(db):
            return query.order_by(Car.created_at.desc()).all()

    def _check_engine(self, db: Session, engine_id: UUID) -> None:
        with translate_db_errors(db):
            engine_exists = db.query(Engine.id).filter(Engine.id == engine_id).first()
        if not engine_exists:
            logger.warning(f"[CarStore] Unknown engine_id={engine_id}")
            raise ReferentialIntegrityError(
                "Engine not found",
                {"field": "engine.engine_id", "value": str(engine_id)},
            )

    def create(self, db: Session, *, obj_in: CarRequest, created_by: str) -> Car:
        """Insert a car after confirming its engine exists"""
        logger.info(
            f"[CarCreate] Initiating car creation | registration_number={obj_in.registration_number}, engine_id={obj_in.engine.engine_id}"
        )
        self._check_engine(db, obj_in.engine.engine_id)

        db_obj = Car(
            registration_number=obj_in.registration_number.strip(),
            name=obj_in.name,
            year=int(str(obj_in.year).strip()),
            brand=obj_in.brand,
            fuel_type=obj_in.fuel_type,
            status=obj_in.status,
            price=obj_in.price,
            engine_id=obj_in.engine.engine_id,
            created_by=created_by,
            updated_by=created_by,
        )
        db_obj = self.insert(db, db_obj)
        logger.info(f"[CarCreate] Car created | car_id={db_obj.id}")
        return self.get_by_id(db, car_id=db_obj.id)

    def update_by_id(
        self, db: Session, *, car_id: UUID, obj_in: CarRequest, updated_by: str
    ) -> Car:
        """Overwrite every mutable field of a car"""
        self._check_engine(db, obj_in.engine.engine_id)

        self.update_row(
            db,
            id=car_id,
            values={
                Car.registration_number: obj_in.registration_number.strip(),
                Car.name: obj_in.name,
                Car.year: int(str(obj_in.year).strip()),
                Car.brand: obj_in.brand,
                Car.fuel_type: obj_in.fuel_type,
                Car.status: obj_in.status,
                Car.price: obj_in.price,
                Car.engine_id: obj_in.engine.engine_id,
                Car.updated_by: updated_by,
            },
        )
        updated = self.get_by_id(db, car_id=car_id)
        if updated is None:
            raise NotFoundError(f"Car {car_id} not found")
        logger.info(f"[CarUpdate] Car updated | car_id={car_id}")
        return updated


car_crud = CRUDCar(Car)
