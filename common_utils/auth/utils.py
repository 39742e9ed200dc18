from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Tuple
import jwt
from app.config import settings
from app.core.exceptions import UnauthorizedError

# Configuration - use centralized settings
SECRET_KEY = settings.SECRET_KEY
ALGORITHM = settings.ALGORITHM
TOKEN_EXPIRY_HOURS = settings.TOKEN_EXPIRY_HOURS


def create_access_token(
    subject: str,
    expires_delta: Optional[timedelta] = None
) -> Tuple[str, datetime]:
    """Sign a token for ``subject`` (the username); returns it with its expiry"""
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + (expires_delta or timedelta(hours=TOKEN_EXPIRY_HOURS))
    to_encode = {
        "sub": subject,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM), expire


def verify_token(token: str) -> Dict:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Token expired")
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid token")

    if not payload.get("sub"):
        raise UnauthorizedError("Token has no subject")
    return payload
