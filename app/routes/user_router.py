from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database.session import get_db
from app.schemas.user import (
    UpdatePasswordRequest, UserRequest, UserResponse, UserUpdateRequest
)
from app.services.user_service import UserService
from app.utils.response_utils import ResponseWrapper
from app.core.exceptions import FleetError
from common_utils.auth.middleware import get_current_username
from app.core.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


def get_user_service() -> UserService:
    return UserService()


@router.get("", response_model=dict)
def list_users(
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
    username: str = Depends(get_current_username),
):
    users = user_service.list_users(db)
    return ResponseWrapper.success(
        data=[UserResponse.model_validate(u) for u in users],
        message=f"Fetched {len(users)} users",
    )


@router.get("/{user_id}", response_model=dict)
def get_user(
    user_id: str,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
    username: str = Depends(get_current_username),
):
    user = user_service.get_user(db, user_id)
    return ResponseWrapper.success(data=UserResponse.model_validate(user))


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserRequest,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
    username: str = Depends(get_current_username),
):
    try:
        user = user_service.create_user(db, user_in, username)
    except FleetError as e:
        logger.warning(f"[UserCreate] Rejected | username={user_in.username} {e.error_code}: {e.message}")
        raise

    return ResponseWrapper.created(
        data=UserResponse.model_validate(user),
        message="User created successfully",
    )


@router.put("/{user_id}", response_model=dict)
def update_user(
    user_id: str,
    user_in: UserUpdateRequest,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
    username: str = Depends(get_current_username),
):
    user = user_service.update_user(db, user_id, user_in)
    return ResponseWrapper.updated(
        data=UserResponse.model_validate(user),
        message="User updated successfully",
    )


@router.put("/{user_id}/update-password", response_model=dict)
def update_user_password(
    user_id: str,
    password_in: UpdatePasswordRequest,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
    username: str = Depends(get_current_username),
):
    user = user_service.update_user_password(db, user_id, password_in)
    logger.info(f"[UserPassword] Password changed | user_id={user_id} by user={username}")
    return ResponseWrapper.updated(
        data=UserResponse.model_validate(user),
        message="Password updated successfully",
    )


@router.put("/{user_id}/toggle-status", response_model=dict)
def toggle_user_status(
    user_id: str,
    active: bool = Query(..., description="New value of the active flag"),
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
    username: str = Depends(get_current_username),
):
    user = user_service.toggle_user_status(db, user_id, active)
    status_str = "activated" if user.active else "deactivated"
    return ResponseWrapper.updated(
        data=UserResponse.model_validate(user),
        message=f"User successfully {status_str}",
    )


@router.delete("/{user_id}", response_model=dict)
def soft_delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
    username: str = Depends(get_current_username),
):
    user = user_service.soft_delete_user(db, user_id)
    return ResponseWrapper.deleted(
        data=UserResponse.model_validate(user),
        message="User deleted successfully",
    )


@router.delete("/{user_id}/delete", response_model=dict)
def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
    username: str = Depends(get_current_username),
):
    user = user_service.delete_user(db, user_id)
    return ResponseWrapper.deleted(
        data=UserResponse.model_validate(user),
        message="User permanently deleted",
    )
