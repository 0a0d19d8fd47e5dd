from typing import Any

from fastapi import APIRouter

from app.api.deps import AccessDep, CallerDep
from app.models import ApplicationForm, ApplicationPublic, ResidentialApplication

router = APIRouter(prefix="/applications", tags=["applications"])


def to_public(application: ResidentialApplication) -> ApplicationPublic:
    return ApplicationPublic.model_validate(application.model_dump())


@router.post("/", response_model=int, operation_id="createApplication")
def create_application(
    *, access: AccessDep, caller: CallerDep, application_in: ApplicationForm
) -> Any:
    """
    Submit a residential certificate application and return its number.
    """
    return access.create_application(caller, application_in)


@router.get(
    "/mine", response_model=list[ApplicationPublic], operation_id="getOwnApplications"
)
def read_own_applications(access: AccessDep, caller: CallerDep) -> Any:
    return [to_public(row) for row in access.get_own_applications(caller)]


@router.get(
    "/", response_model=list[ApplicationPublic], operation_id="getAllApplications"
)
def read_all_applications(access: AccessDep, caller: CallerDep) -> Any:
    """
    Retrieve every stored application. Admins only.
    """
    return [to_public(row) for row in access.get_all_applications(caller)]


@router.get(
    "/{application_number}",
    response_model=ApplicationPublic,
    operation_id="getApplicationById",
)
def read_application(
    access: AccessDep, caller: CallerDep, application_number: int
) -> Any:
    return to_public(access.get_application_by_id(caller, application_number))
