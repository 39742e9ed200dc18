from datetime import datetime
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session, joinedload

from app.models.driver import Driver
from app.models.user import User
from app.schemas.driver import DriverRequest, DriverUpdateRequest
from app.crud.base import CRUDBase, translate_db_errors
from app.core.exceptions import NotFoundError, ReferentialIntegrityError
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class CRUDDriver(CRUDBase[Driver]):

    def _active_query(self, db: Session):
        return (
            db.query(Driver)
            .options(joinedload(Driver.user))
            .filter(Driver.deleted_at.is_(None))
        )

    def get_by_id(self, db: Session, *, driver_id: UUID) -> Optional[Driver]:
        """Fetch a non-deleted driver with its user loaded"""
        with translate_db_errors(db):
            return self._active_query(db).filter(Driver.id == driver_id).first()

    def get_all(self, db: Session) -> List[Driver]:
        with translate_db_errors(db):
            return self._active_query(db).order_by(Driver.created_at.desc()).all()

    def create(self, db: Session, *, obj_in: DriverRequest, created_by: str) -> Driver:
        logger.info(f"[DriverCreate] Initiating driver creation | user_id={obj_in.user_id}")

        with translate_db_errors(db):
            user_exists = (
                db.query(User.id)
                .filter(User.id == obj_in.user_id, User.deleted_at.is_(None))
                .first()
            )
        if not user_exists:
            logger.warning(f"[DriverCreate] Unknown user_id={obj_in.user_id}")
            raise ReferentialIntegrityError(
                "User not found",
                {"field": "user_id", "value": str(obj_in.user_id)},
            )

        db_obj = Driver(
            user_id=obj_in.user_id,
            driver_license_number=obj_in.driver_license_number,
            license_expiry=obj_in.license_expiry,
            active=True,
            created_by=created_by,
        )
        db_obj = self.insert(db, db_obj)
        logger.info(f"[DriverCreate] Driver created | driver_id={db_obj.id}")
        return self._reload(db, db_obj.id)

    def _reload(self, db: Session, driver_id: UUID) -> Driver:
        with translate_db_errors(db):
            driver = (
                db.query(Driver)
                .options(joinedload(Driver.user))
                .filter(Driver.id == driver_id)
                .first()
            )
        if driver is None:
            raise NotFoundError(f"Driver {driver_id} not found")
        return driver

    def update_by_id(
        self, db: Session, *, driver_id: UUID, obj_in: DriverUpdateRequest
    ) -> Driver:
        self.update_row(
            db,
            id=driver_id,
            values={
                Driver.driver_license_number: obj_in.driver_license_number,
                Driver.license_expiry: obj_in.license_expiry,
            },
        )
        logger.info(f"[DriverUpdate] Driver updated | driver_id={driver_id}")
        return self._reload(db, driver_id)

    def set_active(self, db: Session, *, driver_id: UUID, active: bool) -> Driver:
        self.update_row(db, id=driver_id, values={Driver.active: active})
        logger.info(f"[DriverToggle] active={active} | driver_id={driver_id}")
        return self._reload(db, driver_id)

    def soft_delete(
        self, db: Session, *, driver_id: UUID, deleted_at: datetime
    ) -> Optional[Driver]:
        snapshot = self.snapshot(
            db, self._active_query(db).filter(Driver.id == driver_id)
        )
        if snapshot is None:
            return None
        self.update_row(db, id=driver_id, values={Driver.deleted_at: deleted_at})
        logger.info(f"[DriverDelete] Driver soft-deleted | driver_id={driver_id}")
        return snapshot


driver_crud = CRUDDriver(Driver)
