"""Unit tests for the tenant authorization policy"""

import pytest

from adoption_api.auth.claims import Claims
from adoption_api.errors import AuthorizationError
from adoption_api.models.enums import AnimalStatus
from adoption_api.tenancy.policy import (
    ALL_ANIMAL_STATUSES,
    PUBLIC_ANIMAL_STATUSES,
    OperationClass,
    authorize,
    can_view_animal,
    is_permitted,
    listing_scope,
    owns,
    visible_animal_statuses,
)

pytestmark = pytest.mark.unit

ADMIN_ORG_1 = Claims(admin_id=1, organization_id=1)
ADMIN_ORG_2 = Claims(admin_id=2, organization_id=2)
SUPER_ADMIN = Claims(admin_id=3, organization_id=3, is_super_admin=True)


class TestIsPermitted:

    @pytest.mark.parametrize("claims", [None, ADMIN_ORG_1, SUPER_ADMIN])
    def test_public_reads_always_allowed(self, claims):
        assert is_permitted(claims, 99, OperationClass.READ_PUBLIC)

    @pytest.mark.parametrize("operation", [OperationClass.READ_OWN_TENANT, OperationClass.WRITE_OWN_TENANT])
    def test_own_tenant_operations(self, operation):
        assert is_permitted(ADMIN_ORG_1, 1, operation)
        assert not is_permitted(ADMIN_ORG_1, 2, operation)
        assert not is_permitted(None, 1, operation)

    def test_super_admin_acts_as_owner_of_every_tenant(self):
        assert is_permitted(SUPER_ADMIN, 1, OperationClass.WRITE_OWN_TENANT)
        assert is_permitted(SUPER_ADMIN, 2, OperationClass.READ_OWN_TENANT)

    def test_super_admin_only(self):
        assert is_permitted(SUPER_ADMIN, None, OperationClass.SUPER_ADMIN_ONLY)
        assert not is_permitted(ADMIN_ORG_1, None, OperationClass.SUPER_ADMIN_ONLY)
        assert not is_permitted(None, None, OperationClass.SUPER_ADMIN_ONLY)

    def test_unowned_resource_is_not_owned(self):
        assert not owns(ADMIN_ORG_1, None)


class TestAuthorize:

    def test_denial_raises_forbidden(self):
        with pytest.raises(AuthorizationError) as exc_info:
            authorize(ADMIN_ORG_2, 1, OperationClass.WRITE_OWN_TENANT, "not yours")
        assert exc_info.value.status_code == 403
        assert exc_info.value.code == "FORBIDDEN"
        assert exc_info.value.message == "not yours"

    def test_super_admin_only_denial_message(self):
        with pytest.raises(AuthorizationError, match="Super-administrator"):
            authorize(ADMIN_ORG_1, None, OperationClass.SUPER_ADMIN_ONLY)

    def test_permitted_returns_none(self):
        assert authorize(ADMIN_ORG_1, 1, OperationClass.WRITE_OWN_TENANT) is None


class TestAnimalVisibility:

    def test_anonymous_sees_public_statuses_only(self):
        assert visible_animal_statuses(None, 1) == PUBLIC_ANIMAL_STATUSES
        assert AnimalStatus.ADOPTED not in PUBLIC_ANIMAL_STATUSES

    def test_owner_sees_every_status(self):
        assert visible_animal_statuses(ADMIN_ORG_1, 1) == ALL_ANIMAL_STATUSES
        assert visible_animal_statuses(ADMIN_ORG_1, 2) == PUBLIC_ANIMAL_STATUSES

    @pytest.mark.parametrize("status", [AnimalStatus.AVAILABLE, AnimalStatus.IN_PROCESS, AnimalStatus.IN_TRANSIT])
    def test_listed_animals_visible_to_anyone(self, status):
        assert can_view_animal(None, 1, status)
        assert can_view_animal(ADMIN_ORG_2, 1, status)

    def test_adopted_animal_visible_to_owner_only(self):
        assert can_view_animal(ADMIN_ORG_1, 1, AnimalStatus.ADOPTED)
        assert can_view_animal(SUPER_ADMIN, 1, AnimalStatus.ADOPTED)
        assert not can_view_animal(ADMIN_ORG_2, 1, AnimalStatus.ADOPTED)
        assert not can_view_animal(None, 1, AnimalStatus.ADOPTED)

    def test_listing_scope(self):
        assert listing_scope(None) is None
        assert listing_scope(ADMIN_ORG_1) == 1
        assert listing_scope(SUPER_ADMIN) == 3
