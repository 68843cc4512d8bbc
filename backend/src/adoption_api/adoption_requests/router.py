"""Adoption request endpoints.

POST is public. Every other operation requires a bearer token and is
restricted to the owning organization of the request's animal (or a
super-administrator).
"""

from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Query, status

from ..auth.dependencies import CurrentClaims
from ..dependencies import DbSession, Notifier
from ..models.enums import RequestStatus
from ..schemas.common import Envelope, MessageData
from ..tenancy.policy import OperationClass
from . import service
from .schemas import (
    AdoptionRequestCreate,
    AdoptionRequestCreated,
    AdoptionRequestResponse,
    AdoptionRequestStatusUpdate,
    CreatedData,
    DetailData,
    ListData,
    StatsData,
)

router = APIRouter(prefix="/adoption-requests", tags=["Adoption Requests"])


@router.post(
    "",
    response_model=Envelope[CreatedData],
    status_code=status.HTTP_201_CREATED,
)
def create_adoption_request(
    data: AdoptionRequestCreate,
    background_tasks: BackgroundTasks,
    db: DbSession,
    notifier: Notifier,
):
    """Submit an adoption application (public).

    The organization is notified by email after the response is sent; a
    failed notification never affects the stored request.

    Raises:
        400 VALIDATION_ERROR: invalid form (age, motivation, commitments)
        404 ANIMAL_NOT_FOUND
        400 ANIMAL_NOT_AVAILABLE: the animal is already adopted
    """
    request = service.submit_request(db, data)
    notifier.submit_adoption_request(background_tasks, service.build_notification(request))

    return Envelope(
        data=CreatedData(solicitud=AdoptionRequestCreated.model_validate(request)),
        message="Adoption request submitted. The organization will contact you soon.",
    )


@router.get("", response_model=Envelope[ListData])
def list_adoption_requests(
    claims: CurrentClaims,
    db: DbSession,
    estado_solicitud: Optional[RequestStatus] = Query(None),
    animal_id: Optional[int] = Query(None, ge=1),
):
    requests = service.list_requests(
        db,
        service.request_scope(claims),
        estado=estado_solicitud,
        animal_id=animal_id,
    )
    return Envelope(
        data=ListData(
            solicitudes=[AdoptionRequestResponse.model_validate(r) for r in requests],
            total=len(requests),
        )
    )


@router.get("/stats", response_model=Envelope[StatsData])
def adoption_request_stats(claims: CurrentClaims, db: DbSession):
    stats = service.request_statistics(db, service.request_scope(claims))
    return Envelope(data=StatsData(**stats))


@router.get("/{request_id}", response_model=Envelope[DetailData])
def get_adoption_request(request_id: int, claims: CurrentClaims, db: DbSession):
    request = service.get_authorized_request(
        db, claims, request_id, OperationClass.READ_OWN_TENANT
    )
    return Envelope(data=DetailData(solicitud=AdoptionRequestResponse.model_validate(request)))


@router.patch("/{request_id}", response_model=Envelope[DetailData])
def update_adoption_request_status(
    request_id: int,
    data: AdoptionRequestStatusUpdate,
    claims: CurrentClaims,
    db: DbSession,
):
    """Set the request status to any of the five lifecycle values."""
    request = service.get_authorized_request(
        db, claims, request_id, OperationClass.WRITE_OWN_TENANT
    )
    request = service.update_status(db, request, data.estado_solicitud)
    return Envelope(
        data=DetailData(solicitud=AdoptionRequestResponse.model_validate(request)),
        message="Adoption request status updated",
    )


@router.delete("/{request_id}", response_model=Envelope[MessageData])
def delete_adoption_request(request_id: int, claims: CurrentClaims, db: DbSession):
    request = service.get_authorized_request(
        db, claims, request_id, OperationClass.WRITE_OWN_TENANT
    )
    service.delete_request(db, request)
    return Envelope(data=MessageData(message="Adoption request deleted"))
