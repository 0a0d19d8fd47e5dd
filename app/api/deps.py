from collections.abc import Generator
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt.exceptions import InvalidTokenError
from pydantic import ValidationError
from sqlmodel import Session

from app.core.db import engine
from app.core.security import decode_access_token
from app.models import TokenPayload
from app.services.access import AccessControl
from app.services.registry import ApplicationRegistry
from app.services.roles import RoleStore

# Missing credentials mean an anonymous caller, not an error.
bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_db)]
CredentialsDep = Annotated[
    HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
]


def get_caller(credentials: CredentialsDep) -> str | None:
    if credentials is None:
        return None
    try:
        payload = decode_access_token(credentials.credentials)
        token_data = TokenPayload(**payload)
    except (InvalidTokenError, ValidationError):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Could not validate credentials",
        )
    if not token_data.sub:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Could not validate credentials",
        )
    return token_data.sub


CallerDep = Annotated[str | None, Depends(get_caller)]


@lru_cache
def get_role_store() -> RoleStore:
    return RoleStore(engine)


@lru_cache
def get_registry() -> ApplicationRegistry:
    return ApplicationRegistry(engine)


def get_access_control(
    roles: Annotated[RoleStore, Depends(get_role_store)],
    registry: Annotated[ApplicationRegistry, Depends(get_registry)],
) -> AccessControl:
    return AccessControl(roles=roles, registry=registry)


AccessDep = Annotated[AccessControl, Depends(get_access_control)]
