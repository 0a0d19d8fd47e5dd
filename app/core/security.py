from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from app.core.config import settings

ALGORITHM = "HS256"


def create_access_token(subject: str | Any, expires_delta: timedelta) -> str:
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {"exp": expire, "sub": str(subject)}
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify the signature and expiry of a bearer token and return its claims.

    Raises ``jwt.InvalidTokenError`` (or a subclass) when the token is not valid.
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
