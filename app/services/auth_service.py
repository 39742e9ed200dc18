from sqlalchemy.orm import Session

from app.crud.user import user_crud
from app.crud.interface import UserStore
from app.models.user import User
from app.core.exceptions import UnauthorizedError
from app.utils.auth import verify_password
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class AuthService:
    def __init__(self, store: UserStore = user_crud):
        self.store = store

    def authenticate(self, db: Session, username: str, password: str) -> User:
        """
        Check a username/password pair. Only active, non-deleted users may
        log in; every failure looks the same to the caller.
        """
        user = self.store.get_by_username(db, username=username)

        if user is None or not user.active:
            logger.warning(f"[Login] Unknown or inactive user | username={username}")
            raise UnauthorizedError("Invalid username or password")

        if not verify_password(password, user.password):
            logger.warning(f"[Login] Wrong password | username={username}")
            raise UnauthorizedError("Invalid username or password")

        logger.info(f"[Login] Authenticated | username={username}")
        return user
