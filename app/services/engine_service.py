from typing import List
from sqlalchemy.orm import Session

from app.crud.engine import engine_crud
from app.crud.interface import EngineStore
from app.models.engine import Engine
from app.schemas.engine import EngineRequest
from app.core.exceptions import NotFoundError
from app.utils.validation import parse_id, validate_engine_request
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class EngineService:
    def __init__(self, store: EngineStore = engine_crud):
        self.store = store

    def get_engine(self, db: Session, engine_id) -> Engine:
        engine_uuid = parse_id(engine_id, "engine_id")
        engine = self.store.get_by_id(db, engine_id=engine_uuid)
        if engine is None:
            raise NotFoundError("Engine not found", {"engine_id": str(engine_uuid)})
        return engine

    def list_engines(self, db: Session) -> List[Engine]:
        return self.store.get_all(db)

    def create_engine(self, db: Session, engine_req: EngineRequest) -> Engine:
        validate_engine_request(engine_req)
        return self.store.create(db, obj_in=engine_req)

    def update_engine(self, db: Session, engine_id, engine_req: EngineRequest) -> Engine:
        engine_uuid = parse_id(engine_id, "engine_id")
        validate_engine_request(engine_req)
        return self.store.update_by_id(db, engine_id=engine_uuid, obj_in=engine_req)

    def delete_engine(self, db: Session, engine_id) -> Engine:
        engine_uuid = parse_id(engine_id, "engine_id")
        deleted = self.store.remove(db, id=engine_uuid)
        if deleted is None:
            raise NotFoundError("Engine not found", {"engine_id": str(engine_uuid)})
        logger.info(f"[EngineDelete] Engine deleted | engine_id={engine_uuid}")
        return deleted
