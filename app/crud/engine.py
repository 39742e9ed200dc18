from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.models.engine import Engine
from app.schemas.engine import EngineRequest
from app.crud.base import CRUDBase, translate_db_errors
from app.core.exceptions import NotFoundError
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class CRUDEngine(CRUDBase[Engine]):

    def get_by_id(self, db: Session, *, engine_id: UUID) -> Optional[Engine]:
        return self.get(db, engine_id)

    def get_all(self, db: Session) -> List[Engine]:
        with translate_db_errors(db):
            return db.query(Engine).order_by(Engine.created_at.desc()).all()

    def create(self, db: Session, *, obj_in: EngineRequest) -> Engine:
        db_obj = Engine(
            displacement=obj_in.displacement,
            no_of_cylinders=obj_in.no_of_cylinders,
            car_range=obj_in.car_range,
        )
        db_obj = self.insert(db, db_obj)
        logger.info(f"[EngineCreate] Engine created | engine_id={db_obj.id}")
        return db_obj

    def update_by_id(self, db: Session, *, engine_id: UUID, obj_in: EngineRequest) -> Engine:
        self.update_row(
            db,
            id=engine_id,
            values={
                Engine.displacement: obj_in.displacement,
                Engine.no_of_cylinders: obj_in.no_of_cylinders,
                Engine.car_range: obj_in.car_range,
            },
        )
        updated = self.get(db, engine_id)
        if updated is None:
            raise NotFoundError(f"Engine {engine_id} not found")
        logger.info(f"[EngineUpdate] Engine updated | engine_id={engine_id}")
        return updated


engine_crud = CRUDEngine(Engine)
