"""Access-controlled operations over the role store and the application registry.

This is the only entry point the API layer uses. Every method takes the
resolved caller identity (``None`` for an anonymous caller) and decides
authorization before any data is read or written.
"""

from __future__ import annotations

import logging

from app.core.errors import UnauthorizedError
from app.models import ApplicationForm, ResidentialApplication, UserRole, has_privilege
from app.services.registry import ApplicationRegistry
from app.services.roles import RoleStore

logger = logging.getLogger(__name__)


class AccessControl:
    def __init__(self, *, roles: RoleStore, registry: ApplicationRegistry) -> None:
        self.roles = roles
        self.registry = registry

    def create_application(self, caller: str | None, form: ApplicationForm) -> int:
        owner = self._require(caller, UserRole.USER)
        return self.registry.insert(owner, form)

    def get_own_applications(self, caller: str | None) -> list[ResidentialApplication]:
        owner = self._require(caller, UserRole.USER)
        return self.registry.list_by_owner(owner)

    def get_application_by_id(
        self, caller: str | None, application_number: int
    ) -> ResidentialApplication:
        # Existence first so a missing record reads as NotFound, not Unauthorized.
        application = self.registry.get_by_id(application_number)
        if caller is not None and application.principal == caller:
            return application
        if self.roles.is_admin(caller):
            return application
        logger.warning(
            "Application %d requested by non-owner %s", application_number, caller
        )
        raise UnauthorizedError("Not enough permissions")

    def get_all_applications(self, caller: str | None) -> list[ResidentialApplication]:
        self._require(caller, UserRole.ADMIN)
        return self.registry.list_all()

    def get_caller_user_role(self, caller: str | None) -> UserRole:
        return self.roles.get_role(caller)

    def is_caller_admin(self, caller: str | None) -> bool:
        return self.roles.is_admin(caller)

    def assign_caller_user_role(
        self, caller: str | None, target: str, role: UserRole | str
    ) -> None:
        self.roles.set_role(caller, target, role)

    def _require(self, caller: str | None, required: UserRole) -> str:
        role = self.roles.get_role(caller)
        if caller is None or not has_privilege(role, required):
            logger.warning(
                "Caller %s with role %s lacks %s privileges",
                caller,
                role.value,
                required.value,
            )
            raise UnauthorizedError()
        return caller
