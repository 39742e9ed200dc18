from datetime import datetime
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.user import UserRequest, UserUpdateRequest
from app.crud.base import CRUDBase, translate_db_errors
from app.core.exceptions import NotFoundError
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class CRUDUser(CRUDBase[User]):
    """Users store. Reads hide soft-deleted rows unless asked not to."""

    def get_by_id(
        self, db: Session, *, user_id: UUID, include_deleted: bool = False
    ) -> Optional[User]:
        query = db.query(User).filter(User.id == user_id)
        if not include_deleted:
            query = query.filter(User.deleted_at.is_(None))
        with translate_db_errors(db):
            return query.first()

    def get_by_username(self, db: Session, *, username: str) -> Optional[User]:
        with translate_db_errors(db):
            return (
                db.query(User)
                .filter(User.username == username, User.deleted_at.is_(None))
                .first()
            )

    def get_all(self, db: Session) -> List[User]:
        with translate_db_errors(db):
            return (
                db.query(User)
                .filter(User.deleted_at.is_(None))
                .order_by(User.created_at.desc())
                .all()
            )

    def create(
        self, db: Session, *, obj_in: UserRequest, password_hash: str, created_by: str
    ) -> User:
        db_obj = User(
            username=obj_in.username.strip(),
            password=password_hash,
            first_name=obj_in.first_name,
            last_name=obj_in.last_name,
            email=obj_in.email,
            phone_number=obj_in.phone_number,
            role=obj_in.role,
            active=True,
            created_by=created_by,
        )
        db_obj = self.insert(db, db_obj)
        logger.info(f"[UserCreate] User created | user_id={db_obj.id}, username={db_obj.username}")
        return db_obj

    def _reload(self, db: Session, user_id: UUID) -> User:
        user = self.get_by_id(db, user_id=user_id, include_deleted=True)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    def update_by_id(self, db: Session, *, user_id: UUID, obj_in: UserUpdateRequest) -> User:
        self.update_row(
            db,
            id=user_id,
            values={
                User.username: obj_in.username.strip(),
                User.first_name: obj_in.first_name,
                User.last_name: obj_in.last_name,
                User.email: obj_in.email,
                User.phone_number: obj_in.phone_number,
                User.role: obj_in.role,
            },
        )
        logger.info(f"[UserUpdate] User updated | user_id={user_id}")
        return self._reload(db, user_id)

    def update_password(self, db: Session, *, user_id: UUID, password_hash: str) -> User:
        self.update_row(db, id=user_id, values={User.password: password_hash})
        logger.info(f"[UserUpdate] Password changed | user_id={user_id}")
        return self._reload(db, user_id)

    def set_active(self, db: Session, *, user_id: UUID, active: bool) -> User:
        self.update_row(db, id=user_id, values={User.active: active})
        logger.info(f"[UserToggle] active={active} | user_id={user_id}")
        return self._reload(db, user_id)

    def soft_delete(
        self, db: Session, *, user_id: UUID, deleted_at: datetime
    ) -> Optional[User]:
        """Stamp deleted_at, returning the user as it was before"""
        snapshot = self.snapshot(
            db, db.query(User).filter(User.id == user_id, User.deleted_at.is_(None))
        )
        if snapshot is None:
            return None
        self.update_row(db, id=user_id, values={User.deleted_at: deleted_at})
        logger.info(f"[UserDelete] User soft-deleted | user_id={user_id}")
        return snapshot


user_crud = CRUDUser(User)
