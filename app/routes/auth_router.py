from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database.session import get_db
from app.schemas.auth import LoginRequest, TokenResponse
from app.services.auth_service import AuthService
from common_utils.auth.utils import create_access_token
from app.utils.response_utils import ResponseWrapper
from app.core.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Authentication"])


def get_auth_service() -> AuthService:
    return AuthService()


@router.post("/login", status_code=status.HTTP_200_OK)
def login(
    form_data: LoginRequest,
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Exchange a username and password for a bearer token.
    """
    user = auth_service.authenticate(db, form_data.username, form_data.password)
    token, expires_at = create_access_token(user.username)

    return ResponseWrapper.success(
        data=TokenResponse(token=token, expires_at=expires_at),
        message="Login successful",
    )
