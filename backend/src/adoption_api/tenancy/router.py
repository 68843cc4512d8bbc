"""Organization profile endpoints.

- GET /organization: the caller's own organization
- PUT /organization: partial update of the caller's own organization
- GET /organization/{slug}: public profile of an active organization
"""

import logging

from fastapi import APIRouter

from ..auth.dependencies import CurrentClaims
from ..dependencies import DbSession, get_or_404
from ..errors import NotFoundError
from ..models.organization import Organization
from ..schemas.common import Envelope
from .policy import OperationClass, authorize
from .schemas import (
    OrganizationData,
    OrganizationPublic,
    OrganizationPublicData,
    OrganizationResponse,
    OrganizationUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/organization", tags=["Organization"])


def _own_organization(db, claims) -> Organization:
    organization = get_or_404(db, Organization, claims.organization_id, "Organization not found")
    authorize(claims, organization.id, OperationClass.READ_OWN_TENANT)
    return organization


@router.get("", response_model=Envelope[OrganizationData])
def get_my_organization(claims: CurrentClaims, db: DbSession):
    organization = _own_organization(db, claims)
    return Envelope(data=OrganizationData(organizacion=OrganizationResponse.model_validate(organization)))


@router.put("", response_model=Envelope[OrganizationData])
def update_my_organization(data: OrganizationUpdate, claims: CurrentClaims, db: DbSession):
    """Update profile fields. Omitted fields are kept; null clears optional ones."""
    organization = _own_organization(db, claims)
    authorize(claims, organization.id, OperationClass.WRITE_OWN_TENANT)

    for field, value in data.model_dump(exclude_unset=True).items():
        if field == "nombre" and value is None:
            continue
        setattr(organization, field, value)

    db.commit()
    db.refresh(organization)
    logger.info("Organization profile updated", extra={"org_id": organization.id})

    return Envelope(
        data=OrganizationData(organizacion=OrganizationResponse.model_validate(organization)),
        message="Organization updated",
    )


@router.get("/{slug}", response_model=Envelope[OrganizationPublicData])
def get_public_organization(slug: str, db: DbSession):
    organization = (
        db.query(Organization)
        .filter(Organization.slug == slug, Organization.activa.is_(True))
        .first()
    )
    if organization is None:
        raise NotFoundError("Organization not found")

    return Envelope(data=OrganizationPublicData(organizacion=OrganizationPublic.model_validate(organization)))
