"""Authorization rules of the access-controlled operations."""

import pytest

from app.core.errors import InvalidRoleError, NotFoundError, UnauthorizedError
from app.models import UserRole
from app.services.access import AccessControl
from tests.utils.utils import ADMIN_PRINCIPAL, build_form


def test_create_application_records_caller_as_owner(access: AccessControl) -> None:
    number = access.create_application("user-one", build_form())
    assert access.get_application_by_id("user-one", number).principal == "user-one"


def test_anonymous_caller_cannot_create(access: AccessControl) -> None:
    with pytest.raises(UnauthorizedError):
        access.create_application(None, build_form())
    assert access.get_all_applications(ADMIN_PRINCIPAL) == []


def test_guest_cannot_create_or_list_own(access: AccessControl) -> None:
    access.assign_caller_user_role(ADMIN_PRINCIPAL, "demoted", UserRole.GUEST)
    with pytest.raises(UnauthorizedError):
        access.create_application("demoted", build_form())
    with pytest.raises(UnauthorizedError):
        access.get_own_applications("demoted")


def test_own_applications_are_scoped_to_caller(access: AccessControl) -> None:
    first = access.create_application("user-one", build_form())
    access.create_application("user-two", build_form())
    third = access.create_application("user-one", build_form())

    own = access.get_own_applications("user-one")

    assert [a.application_number for a in own] == [first, third]


def test_admin_creates_and_lists_own(access: AccessControl) -> None:
    number = access.create_application(ADMIN_PRINCIPAL, build_form())
    assert [a.application_number for a in access.get_own_applications(ADMIN_PRINCIPAL)] == [
        number
    ]


class TestGetApplicationById:
    def test_owner_can_read(self, access: AccessControl) -> None:
        number = access.create_application("user-one", build_form())
        assert access.get_application_by_id("user-one", number).application_number == number

    def test_admin_can_read(self, access: AccessControl) -> None:
        number = access.create_application("user-one", build_form())
        assert (
            access.get_application_by_id(ADMIN_PRINCIPAL, number).principal == "user-one"
        )

    def test_other_user_is_rejected(self, access: AccessControl) -> None:
        number = access.create_application("user-one", build_form())
        with pytest.raises(UnauthorizedError):
            access.get_application_by_id("user-two", number)

    def test_anonymous_is_rejected(self, access: AccessControl) -> None:
        number = access.create_application("user-one", build_form())
        with pytest.raises(UnauthorizedError):
            access.get_application_by_id(None, number)

    def test_missing_number_is_not_found(self, access: AccessControl) -> None:
        with pytest.raises(NotFoundError):
            access.get_application_by_id("user-one", 42)
        with pytest.raises(NotFoundError):
            access.get_application_by_id(ADMIN_PRINCIPAL, 42)


class TestGetAllApplications:
    def test_admin_gets_every_record(self, access: AccessControl) -> None:
        access.create_application("user-one", build_form())
        access.create_application("user-two", build_form())

        numbers = [a.application_number for a in access.get_all_applications(ADMIN_PRINCIPAL)]

        assert numbers == [1, 2]

    @pytest.mark.parametrize("caller", ["user-one", None])
    def test_non_admin_is_rejected(self, access: AccessControl, caller: str | None) -> None:
        with pytest.raises(UnauthorizedError):
            access.get_all_applications(caller)


class TestRoles:
    def test_caller_role_queries(self, access: AccessControl) -> None:
        assert access.get_caller_user_role(ADMIN_PRINCIPAL) == UserRole.ADMIN
        assert access.get_caller_user_role("user-one") == UserRole.USER
        assert access.get_caller_user_role(None) == UserRole.GUEST
        assert access.is_caller_admin(ADMIN_PRINCIPAL) is True
        assert access.is_caller_admin("user-one") is False

    def test_non_admin_assignment_leaves_target_unchanged(
        self, access: AccessControl
    ) -> None:
        with pytest.raises(UnauthorizedError):
            access.assign_caller_user_role("user-one", "user-two", UserRole.ADMIN)
        assert access.get_caller_user_role("user-two") == UserRole.USER

    def test_admin_assignment_takes_effect_immediately(
        self, access: AccessControl
    ) -> None:
        access.assign_caller_user_role(ADMIN_PRINCIPAL, "user-two", UserRole.ADMIN)
        assert access.is_caller_admin("user-two") is True
        assert access.get_caller_user_role("user-two") == UserRole.ADMIN

    def test_invalid_role_value_is_rejected(self, access: AccessControl) -> None:
        with pytest.raises(InvalidRoleError):
            access.assign_caller_user_role(ADMIN_PRINCIPAL, "user-two", "owner")


def test_submission_and_promotion_scenario(access: AccessControl) -> None:
    assert access.create_application("u1", build_form(fullName="First")) == 1
    assert access.create_application("u2", build_form(fullName="Second")) == 2

    own = access.get_own_applications("u1")
    assert [(a.application_number, a.full_name) for a in own] == [(1, "First")]

    with pytest.raises(UnauthorizedError):
        access.get_application_by_id("u2", 1)

    assert len(access.get_all_applications(ADMIN_PRINCIPAL)) == 2

    access.assign_caller_user_role(ADMIN_PRINCIPAL, "u2", UserRole.ADMIN)
    assert [a.application_number for a in access.get_all_applications("u2")] == [1, 2]
