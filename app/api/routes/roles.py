from fastapi import APIRouter

from app.api.deps import AccessDep, CallerDep
from app.models import RoleAssignmentRequest, UserRole

router = APIRouter(prefix="/roles", tags=["roles"])


@router.get("/me", response_model=UserRole, operation_id="getCallerUserRole")
def read_caller_role(access: AccessDep, caller: CallerDep) -> UserRole:
    return access.get_caller_user_role(caller)


@router.get("/me/is-admin", response_model=bool, operation_id="isCallerAdmin")
def read_caller_is_admin(access: AccessDep, caller: CallerDep) -> bool:
    return access.is_caller_admin(caller)


@router.put("/assignments", response_model=None, operation_id="assignCallerUserRole")
def assign_role(
    *, access: AccessDep, caller: CallerDep, assignment_in: RoleAssignmentRequest
) -> None:
    """
    Assign a role to another principal. Admins only.
    """
    access.assign_caller_user_role(caller, assignment_in.user, assignment_in.role)
