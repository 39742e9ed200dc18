"""
Store contracts the services depend on.

The concrete SQLAlchemy stores in this package satisfy these protocols
structurally; tests substitute in-memory fakes.
"""
from datetime import datetime
from typing import List, Optional, Protocol
from uuid import UUID

from sqlalchemy.orm import Session

from app.models.car import Car
from app.models.driver import Driver
from app.models.engine import Engine
from app.models.trip import Trip
from app.models.user import User
from app.schemas.car import CarRequest
from app.schemas.driver import DriverRequest, DriverUpdateRequest
from app.schemas.engine import EngineRequest
from app.schemas.trip import TripRequest
from app.schemas.user import UserRequest, UserUpdateRequest


class EngineStore(Protocol):
    def get_by_id(self, db: Session, *, engine_id: UUID) -> Optional[Engine]: ...
    def get_all(self, db: Session) -> List[Engine]: ...
    def create(self, db: Session, *, obj_in: EngineRequest) -> Engine: ...
    def update_by_id(self, db: Session, *, engine_id: UUID, obj_in: EngineRequest) -> Engine: ...
    def remove(self, db: Session, *, id: UUID) -> Optional[Engine]: ...


class CarStore(Protocol):
    def get_by_id(self, db: Session, *, car_id: UUID) -> Optional[Car]: ...
    def get_all(self, db: Session, *, brand: Optional[str] = None, include_engine: bool = False) -> List[Car]: ...
    def create(self, db: Session, *, obj_in: CarRequest, created_by: str) -> Car: ...
    def update_by_id(self, db: Session, *, car_id: UUID, obj_in: CarRequest, updated_by: str) -> Car: ...
    def remove(self, db: Session, *, id: UUID) -> Optional[Car]: ...


class UserStore(Protocol):
    def get_by_id(self, db: Session, *, user_id: UUID) -> Optional[User]: ...
    def get_by_username(self, db: Session, *, username: str) -> Optional[User]: ...
    def get_all(self, db: Session) -> List[User]: ...
    def create(self, db: Session, *, obj_in: UserRequest, password_hash: str, created_by: str) -> User: ...
    def update_by_id(self, db: Session, *, user_id: UUID, obj_in: UserUpdateRequest) -> User: ...
    def update_password(self, db: Session, *, user_id: UUID, password_hash: str) -> User: ...
    def set_active(self, db: Session, *, user_id: UUID, active: bool) -> User: ...
    def soft_delete(self, db: Session, *, user_id: UUID, deleted_at: datetime) -> Optional[User]: ...
    def remove(self, db: Session, *, id: UUID) -> Optional[User]: ...


class DriverStore(Protocol):
    def get_by_id(self, db: Session, *, driver_id: UUID) -> Optional[Driver]: ...
    def get_all(self, db: Session) -> List[Driver]: ...
    def create(self, db: Session, *, obj_in: DriverRequest, created_by: str) -> Driver: ...
    def update_by_id(self, db: Session, *, driver_id: UUID, obj_in: DriverUpdateRequest) -> Driver: ...
    def set_active(self, db: Session, *, driver_id: UUID, active: bool) -> Driver: ...
    def soft_delete(self, db: Session, *, driver_id: UUID, deleted_at: datetime) -> Optional[Driver]: ...
    def remove(self, db: Session, *, id: UUID) -> Optional[Driver]: ...


class TripStore(Protocol):
    def get_by_id(self, db: Session, *, trip_id: UUID) -> Optional[Trip]: ...
    def get_all(self, db: Session) -> List[Trip]: ...
    def get_by_car(self, db: Session, *, car_id: UUID) -> List[Trip]: ...
    def get_by_driver(self, db: Session, *, driver_id: UUID) -> List[Trip]: ...
    def create(self, db: Session, *, obj_in: TripRequest, created_by: str) -> Trip: ...
    def update_by_id(self, db: Session, *, trip_id: UUID, obj_in: TripRequest, updated_by: str) -> Trip: ...
    def update_status(self, db: Session, *, trip_id: UUID, status: str, updated_by: str) -> Trip: ...
    def remove(self, db: Session, *, id: UUID) -> Optional[Trip]: ...
