import time
from enum import Enum

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy import BigInteger
from sqlmodel import Field, SQLModel


def get_time_ns() -> int:
    """Current time as integer nanoseconds since the Unix epoch."""
    return time.time_ns()


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


# Privilege rank per role; admin includes everything user may do, user everything guest may do.
ROLE_PRIVILEGE: dict[UserRole, int] = {
    UserRole.GUEST: 0,
    UserRole.USER: 1,
    UserRole.ADMIN: 2,
}


def has_privilege(role: UserRole, required: UserRole) -> bool:
    return ROLE_PRIVILEGE[role] >= ROLE_PRIVILEGE[required]


class ApplicationStatus(str, Enum):
    PENDING = "pending"


# Shared properties of a submitted form. Field contents are stored as given.
class ApplicationFormBase(SQLModel):
    # Personal
    full_name: str
    date_of_birth: str
    gender: int
    place_of_birth: str
    nationality: int
    marital_status: str | None = None
    # Contact
    phone_number: str
    email: str | None = None
    id_number: str
    # Address
    address: str
    current_address: str
    start_of_residency: str
    property_owner: str
    relation_to_landlord: str
    is_homeowner: bool
    # Professional
    profession: str
    profession_address: str
    profession_phone: str
    has_vehicle: bool
    # Renewal
    is_contract_renewal: bool
    previous_residence_cert_number: str | None = None
    previous_applications: int = Field(ge=0)


# Properties to receive via API on submission (camelCase on the wire)
class ApplicationForm(ApplicationFormBase):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Database model, one row per submission
class ResidentialApplication(ApplicationFormBase, table=True):
    __tablename__ = "residential_application"

    application_number: int = Field(
        primary_key=True, sa_column_kwargs={"autoincrement": False}
    )
    principal: str = Field(index=True, max_length=255)
    status: str = Field(default=ApplicationStatus.PENDING.value, max_length=32)
    created: int = Field(default_factory=get_time_ns, sa_type=BigInteger)
    last_updated: int = Field(default_factory=get_time_ns, sa_type=BigInteger)


# Single-row counter holding the last allocated application number
class ApplicationSequence(SQLModel, table=True):
    __tablename__ = "application_sequence"

    id: int = Field(default=1, primary_key=True)
    last_number: int = Field(default=0, sa_type=BigInteger)


# Properties to return via API
class ApplicationPublic(ApplicationFormBase):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    application_number: int
    principal: str
    status: ApplicationStatus
    created: int
    last_updated: int


class RoleAssignment(SQLModel, table=True):
    __tablename__ = "role_assignment"

    principal: str = Field(primary_key=True, max_length=255)
    role: str = Field(max_length=16)
    updated_at: int = Field(default_factory=get_time_ns, sa_type=BigInteger)


class RoleAssignmentRequest(SQLModel):
    user: str = Field(min_length=1, max_length=255)
    role: UserRole


# Contents of JWT token
class TokenPayload(SQLModel):
    sub: str | None = None
