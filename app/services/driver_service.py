from typing import List
from sqlalchemy.orm import Session

from app.crud.driver import driver_crud
from app.crud.interface import DriverStore
from app.models.driver import Driver
from app.schemas.driver import DriverRequest, DriverUpdateRequest
from app.core.exceptions import NotFoundError, ValidationError
from app.utils.validation import is_nil, parse_id
from common_utils import utc_now
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class DriverService:
    def __init__(self, store: DriverStore = driver_crud):
        self.store = store

    def _not_found(self, driver_id) -> NotFoundError:
        return NotFoundError("Driver not found", {"driver_id": str(driver_id)})

    def get_driver(self, db: Session, driver_id) -> Driver:
        driver_uuid = parse_id(driver_id, "driver_id")
        driver = self.store.get_by_id(db, driver_id=driver_uuid)
        if driver is None:
            raise self._not_found(driver_uuid)
        return driver

    def list_drivers(self, db: Session) -> List[Driver]:
        return self.store.get_all(db)

    def create_driver(self, db: Session, driver_req: DriverRequest, actor: str) -> Driver:
        if is_nil(driver_req.user_id):
            raise ValidationError("user id is required", {"field": "user_id"})
        return self.store.create(db, obj_in=driver_req, created_by=actor)

    def update_driver(self, db: Session, driver_id, driver_req: DriverUpdateRequest) -> Driver:
        driver_uuid = parse_id(driver_id, "driver_id")
        return self.store.update_by_id(db, driver_id=driver_uuid, obj_in=driver_req)

    def toggle_driver_status(self, db: Session, driver_id, active: bool) -> Driver:
        driver_uuid = parse_id(driver_id, "driver_id")
        return self.store.set_active(db, driver_id=driver_uuid, active=active)

    def soft_delete_driver(self, db: Session, driver_id) -> Driver:
        driver_uuid = parse_id(driver_id, "driver_id")
        deleted = self.store.soft_delete(db, driver_id=driver_uuid, deleted_at=utc_now())
        if deleted is None:
            raise self._not_found(driver_uuid)
        return deleted

    def delete_driver(self, db: Session, driver_id) -> Driver:
        driver_uuid = parse_id(driver_id, "driver_id")
        deleted = self.store.remove(db, id=driver_uuid)
        if deleted is None:
            raise self._not_found(driver_uuid)
        logger.info(f"[DriverDelete] Driver removed | driver_id={driver_uuid}")
        return deleted
