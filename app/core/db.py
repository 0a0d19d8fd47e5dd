import logging

from sqlalchemy import Engine
from sqlmodel import create_engine

from app.core.config import settings
from app.services.roles import RoleStore

logger = logging.getLogger(__name__)

engine = create_engine(
    str(settings.SQLALCHEMY_DATABASE_URI),
    connect_args=(
        {"check_same_thread": False}
        if str(settings.SQLALCHEMY_DATABASE_URI).startswith("sqlite")
        else {}
    ),
)


def init_db(db_engine: Engine) -> None:
    # Tables should be created with Alembic migrations
    # But if you don't want to use migrations, create
    # the tables un-commenting the next lines
    # from sqlmodel import SQLModel

    # This works because the models are already imported and registered from app.models
    # SQLModel.metadata.create_all(db_engine)

    if not settings.FIRST_ADMIN_PRINCIPALS:
        logger.warning("No FIRST_ADMIN_PRINCIPALS configured; nobody can assign roles")
        return
    RoleStore(db_engine).seed_admins(list(settings.FIRST_ADMIN_PRINCIPALS))
