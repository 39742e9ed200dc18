from typing import Dict, Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.exceptions import UnauthorizedError
from .utils import verify_token


class JWTAuthMiddleware(HTTPBearer):
    def __init__(self):
        # Missing credentials are reported as UnauthorizedError below, not 403
        super(JWTAuthMiddleware, self).__init__(auto_error=False)

    async def __call__(self, request: Request) -> Dict:
        credentials: Optional[HTTPAuthorizationCredentials] = await super(JWTAuthMiddleware, self).__call__(request)

        if not credentials:
            raise UnauthorizedError("Missing bearer token")

        payload = verify_token(credentials.credentials)
        request.state.user = payload
        return payload


jwt_auth = JWTAuthMiddleware()


def get_current_username(payload: Dict = Depends(jwt_auth)) -> str:
    """Username of the caller, used for the created_by/updated_by stamps"""
    return payload["sub"]
