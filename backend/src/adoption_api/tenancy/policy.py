"""Tenant authorization policy.

Decides whether a caller (claims, or None for anonymous) may perform an
operation on a resource owned by a given organization. Decisions are
recomputed on every call; nothing is cached between requests.

Order of checks in handlers:
    1. Load the target row; missing -> NotFoundError (404)
    2. authorize(claims, row_org_id, operation); denied -> AuthorizationError (403)

Resource existence is therefore visible to any caller that knows an id.
The one deliberate exception is Adopted animals, which are reported as
missing to anonymous and non-owning callers (see ``can_view_animal``).
"""

from enum import Enum
from typing import FrozenSet, Optional

from ..auth.claims import Claims
from ..errors import AuthorizationError
from ..models.enums import AnimalStatus


class OperationClass(str, Enum):
    READ_PUBLIC = "read_public"
    READ_OWN_TENANT = "read_own_tenant"
    WRITE_OWN_TENANT = "write_own_tenant"
    SUPER_ADMIN_ONLY = "super_admin_only"


# Statuses any caller may enumerate in public listings
PUBLIC_ANIMAL_STATUSES: FrozenSet[AnimalStatus] = frozenset({
    AnimalStatus.AVAILABLE,
    AnimalStatus.IN_PROCESS,
    AnimalStatus.IN_TRANSIT,
})

ALL_ANIMAL_STATUSES: FrozenSet[AnimalStatus] = frozenset(AnimalStatus)


def owns(claims: Optional[Claims], organization_id: Optional[int]) -> bool:
    """True when the caller acts as owner of the organization's data."""
    if claims is None:
        return False
    if claims.is_super_admin:
        return True
    return organization_id is not None and claims.organization_id == organization_id


def is_permitted(
    claims: Optional[Claims],
    organization_id: Optional[int],
    operation: OperationClass,
) -> bool:
    if operation == OperationClass.READ_PUBLIC:
        return True
    if operation == OperationClass.SUPER_ADMIN_ONLY:
        return claims is not None and claims.is_super_admin
    if operation in (OperationClass.READ_OWN_TENANT, OperationClass.WRITE_OWN_TENANT):
        return owns(claims, organization_id)
    raise ValueError(f"Unknown operation class: {operation}")


def authorize(
    claims: Optional[Claims],
    organization_id: Optional[int],
    operation: OperationClass,
    message: Optional[str] = None,
) -> None:
    """Raise AuthorizationError unless the operation is permitted.

    Args:
        claims: Verified caller claims, None for anonymous callers
        organization_id: Owning organization of the target resource
        operation: Operation class being attempted
        message: Optional client-facing message for the denial
    """
    if not is_permitted(claims, organization_id, operation):
        if operation == OperationClass.SUPER_ADMIN_ONLY:
            raise AuthorizationError(
                message or "Super-administrator access required"
            )
        raise AuthorizationError(message)


def visible_animal_statuses(
    claims: Optional[Claims],
    organization_id: Optional[int],
) -> FrozenSet[AnimalStatus]:
    """Statuses the caller may see for animals of ``organization_id``."""
    if owns(claims, organization_id):
        return ALL_ANIMAL_STATUSES
    return PUBLIC_ANIMAL_STATUSES


def can_view_animal(
    claims: Optional[Claims],
    organization_id: int,
    status: AnimalStatus,
) -> bool:
    """Adopted animals are only visible to their owning organization."""
    if status != AnimalStatus.ADOPTED:
        return True
    return owns(claims, organization_id)


def listing_scope(claims: Optional[Claims]) -> Optional[int]:
    """Organization an animal listing is restricted to.

    Authenticated callers (super-administrators included) only list their
    own organization's animals, whatever filters they pass. Anonymous
    callers get the cross-tenant public catalogue (None).
    """
    if claims is None:
        return None
    return claims.organization_id
