"""Errors raised by the registry core.

Every failure of an access-controlled operation is one of these. They carry
the message shown to the caller and are translated to HTTP responses by
``app.api.errors``.
"""


class RegistryError(Exception):
    """Base class for registry failures."""

    detail = "Registry error"

    def __init__(self, detail: str | None = None) -> None:
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class UnauthorizedError(RegistryError):
    """Caller lacks the required role or does not own the record."""

    detail = "The user doesn't have enough privileges"


class NotFoundError(RegistryError):
    """No application is stored under the requested number."""

    detail = "Application not found"

    def __init__(self, application_number: int) -> None:
        self.application_number = application_number
        super().__init__()


class InvalidRoleError(RegistryError):
    """Role value outside the closed admin/user/guest enumeration."""

    detail = "Invalid role"

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__()
