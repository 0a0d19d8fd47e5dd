"""Identity to role mapping.

An identity without an explicit assignment holds the baseline ``user`` role;
the anonymous caller (``None``) is always ``guest``. Only an admin may change
assignments, except for the deployment-time seeding done by ``seed_admins``.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from sqlalchemy import Engine
from sqlmodel import Session

from app.core.errors import InvalidRoleError, UnauthorizedError
from app.models import RoleAssignment, UserRole, get_time_ns

logger = logging.getLogger(__name__)

DEFAULT_ROLE = UserRole.USER
ANONYMOUS_ROLE = UserRole.GUEST


def parse_role(value: UserRole | str) -> UserRole:
    """Coerce a wire value into a ``UserRole``; unknown values are rejected, never defaulted."""
    if isinstance(value, UserRole):
        return value
    try:
        return UserRole(value)
    except ValueError as exc:
        raise InvalidRoleError(value) from exc


class RoleStore:
    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._lock = threading.Lock()

    def get_role(self, identity: str | None) -> UserRole:
        if identity is None:
            return ANONYMOUS_ROLE
        with Session(self.engine) as session:
            assignment = session.get(RoleAssignment, identity)
            if assignment is None:
                return DEFAULT_ROLE
            return UserRole(assignment.role)

    def is_admin(self, identity: str | None) -> bool:
        return self.get_role(identity) == UserRole.ADMIN

    def set_role(
        self, acting_identity: str | None, target_identity: str, role: UserRole | str
    ) -> None:
        if not self.is_admin(acting_identity):
            logger.warning(
                "Role change for %s rejected: %s is not an admin",
                target_identity,
                acting_identity,
            )
            raise UnauthorizedError()
        new_role = parse_role(role)
        self._write(target_identity, new_role)
        logger.info(
            "Role of %s set to %s by %s", target_identity, new_role.value, acting_identity
        )

    def seed_admins(self, identities: Iterable[str]) -> None:
        """Grant ``admin`` without an acting identity. Deployment bootstrap only."""
        for identity in identities:
            self._write(identity, UserRole.ADMIN)
            logger.info("Seeded admin role for %s", identity)

    def _write(self, identity: str, role: UserRole) -> None:
        with self._lock, Session(self.engine) as session:
            assignment = session.get(RoleAssignment, identity)
            if assignment is None:
                assignment = RoleAssignment(principal=identity, role=role.value)
            else:
                assignment.role = role.value
                assignment.updated_at = get_time_ns()
            session.add(assignment)
            session.commit()
