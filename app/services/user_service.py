from typing import List
from sqlalchemy.orm import Session

from app.crud.user import user_crud
from app.crud.interface import UserStore
from app.models.user import User
from app.schemas.user import UpdatePasswordRequest, UserRequest, UserUpdateRequest
from app.core.exceptions import NotFoundError, ValidationError
from app.utils.auth import get_password_hash, verify_password
from app.utils.validation import parse_id
from common_utils import utc_now
from app.core.logging_config import get_logger

logger = get_logger(__name__)


def _check_password_pair(password: str, confirm_password: str) -> None:
    if not password:
        raise ValidationError("password is required", {"field": "password"})
    if password != confirm_password:
        raise ValidationError(
            "password and confirm password do not match",
            {"field": "confirm_password"},
        )


class UserService:
    """
    User accounts. Passwords are hashed here, so the store only ever sees
    bcrypt hashes.
    """

    def __init__(self, store: UserStore = user_crud):
        self.store = store

    def _not_found(self, user_id) -> NotFoundError:
        return NotFoundError("User not found", {"user_id": str(user_id)})

    def get_user(self, db: Session, user_id) -> User:
        user_uuid = parse_id(user_id, "user_id")
        user = self.store.get_by_id(db, user_id=user_uuid)
        if user is None:
            raise self._not_found(user_uuid)
        return user

    def get_user_by_username(self, db: Session, username: str) -> User:
        user = self.store.get_by_username(db, username=username)
        if user is None:
            raise NotFoundError("User not found", {"username": username})
        return user

    def list_users(self, db: Session) -> List[User]:
        return self.store.get_all(db)

    def create_user(self, db: Session, user_req: UserRequest, actor: str) -> User:
        if not user_req.username.strip():
            raise ValidationError("username is required", {"field": "username"})
        _check_password_pair(user_req.password, user_req.confirm_password)

        return self.store.create(
            db,
            obj_in=user_req,
            password_hash=get_password_hash(user_req.password),
            created_by=actor,
        )

    def update_user(self, db: Session, user_id, user_req: UserUpdateRequest) -> User:
        user_uuid = parse_id(user_id, "user_id")
        if not user_req.username.strip():
            raise ValidationError("username is required", {"field": "username"})
        return self.store.update_by_id(db, user_id=user_uuid, obj_in=user_req)

    def update_user_password(
        self, db: Session, user_id, password_req: UpdatePasswordRequest
    ) -> User:
        user_uuid = parse_id(user_id, "user_id")
        _check_password_pair(password_req.password, password_req.confirm_password)

        user = self.store.get_by_id(db, user_id=user_uuid)
        if user is None:
            raise self._not_found(user_uuid)
        if not verify_password(password_req.previous_password, user.password):
            logger.warning(f"[UserPassword] Previous password mismatch | user_id={user_uuid}")
            raise ValidationError(
                "previous password is incorrect",
                {"field": "previous_password"},
            )

        return self.store.update_password(
            db, user_id=user_uuid, password_hash=get_password_hash(password_req.password)
        )

    def toggle_user_status(self, db: Session, user_id, active: bool) -> User:
        user_uuid = parse_id(user_id, "user_id")
        return self.store.set_active(db, user_id=user_uuid, active=active)

    def soft_delete_user(self, db: Session, user_id) -> User:
        user_uuid = parse_id(user_id, "user_id")
        deleted = self.store.soft_delete(db, user_id=user_uuid, deleted_at=utc_now())
        if deleted is None:
            raise self._not_found(user_uuid)
        return deleted

    def delete_user(self, db: Session, user_id) -> User:
        user_uuid = parse_id(user_id, "user_id")
        deleted = self.store.remove(db, id=user_uuid)
        if deleted is None:
            raise self._not_found(user_uuid)
        logger.info(f"[UserDelete] User removed | user_id={user_uuid}")
        return deleted
