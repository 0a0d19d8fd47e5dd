from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.api.deps import get_db, get_registry, get_role_store
from app.main import app
from app.services.access import AccessControl
from app.services.registry import ApplicationRegistry
from app.services.roles import RoleStore
from tests.utils.utils import ADMIN_PRINCIPAL, principal_token_headers


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    # One in-memory database per test, shared by every thread through a single connection.
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture()
def role_store(engine: Engine) -> RoleStore:
    store = RoleStore(engine)
    store.seed_admins([ADMIN_PRINCIPAL])
    return store


@pytest.fixture()
def registry(engine: Engine) -> ApplicationRegistry:
    return ApplicationRegistry(engine)


@pytest.fixture()
def access(role_store: RoleStore, registry: ApplicationRegistry) -> AccessControl:
    return AccessControl(roles=role_store, registry=registry)


@pytest.fixture()
def client(
    engine: Engine, role_store: RoleStore, registry: ApplicationRegistry
) -> Generator[TestClient, None, None]:
    def get_test_db() -> Generator[Session, None, None]:
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = get_test_db
    app.dependency_overrides[get_role_store] = lambda: role_store
    app.dependency_overrides[get_registry] = lambda: registry
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def admin_token_headers() -> dict[str, str]:
    return principal_token_headers(ADMIN_PRINCIPAL)


@pytest.fixture()
def normal_user_token_headers() -> dict[str, str]:
    return principal_token_headers("user-one")


@pytest.fixture()
def other_user_token_headers() -> dict[str, str]:
    return principal_token_headers("user-two")
