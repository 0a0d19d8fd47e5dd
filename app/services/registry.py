"""Storage and numbering of residential certificate applications.

Numbers start at ``FIRST_APPLICATION_NUMBER`` and are taken from a single-row
counter that is incremented in the same transaction as the insert, under a
process-wide lock. A failed insert rolls the counter back with it, so numbers
are never burned, duplicated or reused.
"""

from __future__ import annotations

import logging
import threading

from sqlalchemy import Engine
from sqlmodel import Session, col, func, select

from app.core.errors import NotFoundError
from app.models import (
    ApplicationForm,
    ApplicationSequence,
    ApplicationStatus,
    ResidentialApplication,
    get_time_ns,
)

logger = logging.getLogger(__name__)

FIRST_APPLICATION_NUMBER = 1
SEQUENCE_ROW_ID = 1


class ApplicationRegistry:
    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._lock = threading.Lock()

    def insert(self, owner: str, form: ApplicationForm) -> int:
        with self._lock, Session(self.engine) as session:
            application_number = self._next_number(session)
            now = get_time_ns()
            application = ResidentialApplication.model_validate(
                form,
                update={
                    "application_number": application_number,
                    "principal": owner,
                    "status": ApplicationStatus.PENDING.value,
                    "created": now,
                    "last_updated": now,
                },
            )
            session.add(application)
            session.commit()

        logger.info("Application %d submitted by %s", application_number, owner)
        return application_number

    def get_by_id(self, application_number: int) -> ResidentialApplication:
        with Session(self.engine) as session:
            application = session.get(ResidentialApplication, application_number)
        if application is None:
            raise NotFoundError(application_number)
        return application

    def list_all(self) -> list[ResidentialApplication]:
        statement = select(ResidentialApplication).order_by(
            col(ResidentialApplication.application_number)
        )
        with Session(self.engine) as session:
            return list(session.exec(statement).all())

    def list_by_owner(self, owner: str) -> list[ResidentialApplication]:
        statement = (
            select(ResidentialApplication)
            .where(ResidentialApplication.principal == owner)
            .order_by(col(ResidentialApplication.application_number))
        )
        with Session(self.engine) as session:
            return list(session.exec(statement).all())

    def count(self) -> int:
        with Session(self.engine) as session:
            return session.exec(
                select(func.count()).select_from(ResidentialApplication)
            ).one()

    def _next_number(self, session: Session) -> int:
        # Caller holds self._lock; FOR UPDATE covers other processes on PostgreSQL.
        sequence = session.exec(
            select(ApplicationSequence)
            .where(ApplicationSequence.id == SEQUENCE_ROW_ID)
            .with_for_update()
        ).first()
        if sequence is None:
            sequence = ApplicationSequence(
                id=SEQUENCE_ROW_ID, last_number=FIRST_APPLICATION_NUMBER - 1
            )
        sequence.last_number += 1
        session.add(sequence)
        return sequence.last_number
