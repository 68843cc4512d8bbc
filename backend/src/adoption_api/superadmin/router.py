"""Super-administrator endpoints: tenant management and onboarding review."""

from typing import Optional

from fastapi import APIRouter, Query, status

from ..auth.dependencies import SuperAdminClaims
from ..contact_requests import service as contact_service
from ..contact_requests.schemas import (
    ContactRequestData,
    ContactRequestListData,
    ContactRequestResponse,
    ContactRequestReview,
)
from ..dependencies import DbSession
from ..models.enums import ContactStatus
from ..schemas.common import Envelope
from ..tenancy.schemas import OrganizationResponse
from . import service
from .schemas import (
    AdministratorInfo,
    Credentials,
    OrganizationCreate,
    OrganizationCreatedData,
    OrganizationListData,
    OrganizationOverview,
    OrganizationToggleData,
)

router = APIRouter(prefix="/super-admin", tags=["Super Admin"])


@router.get("/organizations", response_model=Envelope[OrganizationListData])
def list_organizations(claims: SuperAdminClaims, db: DbSession):
    overviews = [
        OrganizationOverview(
            **OrganizationResponse.model_validate(org).model_dump(),
            administradores=[AdministratorInfo.model_validate(a) for a in org.administradores],
            counts=counts,
        )
        for org, counts in service.list_organizations(db)
    ]
    return Envelope(data=OrganizationListData(organizaciones=overviews, total=len(overviews)))


@router.post(
    "/organizations",
    response_model=Envelope[OrganizationCreatedData],
    status_code=status.HTTP_201_CREATED,
)
def create_organization(data: OrganizationCreate, claims: SuperAdminClaims, db: DbSession):
    """Create an organization and its first administrator in one transaction.

    The response echoes the login credentials so they can be handed to the
    shelter.
    """
    organization, admin = service.create_organization(db, data)
    return Envelope(
        data=OrganizationCreatedData(
            organizacion=OrganizationResponse.model_validate(organization),
            administrador=AdministratorInfo.model_validate(admin),
            credenciales=Credentials(username=data.admin_username, password=data.admin_password),
        ),
        message="Organization and administrator created",
    )


@router.put("/organizations/{organization_id}/toggle", response_model=Envelope[OrganizationToggleData])
def toggle_organization(organization_id: int, claims: SuperAdminClaims, db: DbSession):
    organization = service.toggle_organization(db, organization_id)
    return Envelope(
        data=OrganizationToggleData(organizacion=OrganizationResponse.model_validate(organization)),
        message="Organization activated" if organization.activa else "Organization deactivated",
    )


@router.get("/contact-requests", response_model=Envelope[ContactRequestListData])
def list_contact_requests(
    claims: SuperAdminClaims,
    db: DbSession,
    estado: Optional[ContactStatus] = Query(None),
):
    contacts = contact_service.list_contact_requests(db, estado)
    return Envelope(
        data=ContactRequestListData(
            solicitudes=[ContactRequestResponse.model_validate(c) for c in contacts],
            total=len(contacts),
        )
    )


@router.put("/contact-requests/{contact_id}", response_model=Envelope[ContactRequestData])
def review_contact_request(
    contact_id: int,
    data: ContactRequestReview,
    claims: SuperAdminClaims,
    db: DbSession,
):
    contact = contact_service.review_contact_request(db, contact_id, data)
    return Envelope(
        data=ContactRequestData(solicitud=ContactRequestResponse.model_validate(contact)),
        message="Contact request updated",
    )
