"""Adoption request persistence operations.

Reads and writes are tenant-scoped through the request's animal: an
administrator sees requests for their organization's animals, a
super-administrator sees every request.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from ..auth.claims import Claims
from ..dependencies import get_or_404
from ..errors import AnimalNotAvailableError, NotFoundError
from ..models.adoption_request import AdoptionRequest
from ..models.animal import Animal
from ..models.enums import RequestStatus
from ..notifications.dispatcher import AdoptionNotification
from ..observability.metrics import (
    adoption_requests_created_total,
    adoption_requests_rejected_total,
)
from ..tenancy.policy import OperationClass, authorize
from . import lifecycle
from .schemas import AdoptionRequestCreate

logger = logging.getLogger(__name__)

RECENT_WINDOW_DAYS = 7


def submit_request(db: Session, data: AdoptionRequestCreate) -> AdoptionRequest:
    """Persist a public application for an animal that accepts requests.

    Raises:
        NotFoundError: ANIMAL_NOT_FOUND
        AnimalNotAvailableError: the animal is Adopted
    """
    animal = db.get(Animal, data.animal_id)
    if animal is None:
        adoption_requests_rejected_total.labels(reason="animal_not_found").inc()
        raise NotFoundError("Animal not found", code="ANIMAL_NOT_FOUND")

    try:
        lifecycle.ensure_animal_accepts_requests(animal)
    except AnimalNotAvailableError:
        adoption_requests_rejected_total.labels(reason="animal_not_available").inc()
        logger.info(
            f"Adoption request refused: animal {animal.id} is {animal.estado.value}",
            extra={"org_id": animal.organizacion_id},
        )
        raise

    request = AdoptionRequest(
        **data.model_dump(),
        estado_solicitud=lifecycle.INITIAL_STATUS,
    )
    db.add(request)
    db.commit()
    db.refresh(request)

    adoption_requests_created_total.labels(org_id=str(animal.organizacion_id)).inc()
    logger.info(
        f"Adoption request {request.id} created for animal {animal.id}",
        extra={"org_id": animal.organizacion_id},
    )
    return request


def build_notification(request: AdoptionRequest) -> AdoptionNotification:
    """Snapshot everything the background email job needs."""
    animal = request.animal
    organization = animal.organizacion
    return AdoptionNotification(
        request_id=request.id,
        animal_id=animal.id,
        animal_nombre=animal.nombre,
        animal_especie=animal.especie.value,
        organization_id=organization.id,
        organization_name=organization.nombre,
        organization_email=organization.email,
        nombre_completo=request.nombre_completo,
        edad=request.edad,
        email=request.email,
        telefono_whatsapp=request.telefono_whatsapp,
        ciudad_zona=request.ciudad_zona,
        tipo_vivienda=request.tipo_vivienda.value,
        motivacion=request.motivacion,
        fecha_solicitud=request.fecha_solicitud,
    )


def request_scope(claims: Claims) -> Optional[int]:
    """Organization filter for request reads (None: every organization)."""
    if claims.is_super_admin:
        return None
    return claims.organization_id


def _scoped_query(db: Session, scope: Optional[int]):
    query = db.query(AdoptionRequest).join(AdoptionRequest.animal)
    if scope is not None:
        query = query.filter(Animal.organizacion_id == scope)
    return query


def list_requests(
    db: Session,
    scope: Optional[int],
    estado: Optional[RequestStatus] = None,
    animal_id: Optional[int] = None,
) -> List[AdoptionRequest]:
    """Requests within ``scope``, newest first; filters AND-combine with it."""
    query = _scoped_query(db, scope).options(joinedload(AdoptionRequest.animal))
    if estado is not None:
        query = query.filter(AdoptionRequest.estado_solicitud == estado)
    if animal_id is not None:
        query = query.filter(AdoptionRequest.animal_id == animal_id)

    return query.order_by(
        AdoptionRequest.fecha_solicitud.desc(),
        AdoptionRequest.id.desc(),
    ).all()


def get_authorized_request(
    db: Session,
    claims: Claims,
    request_id: int,
    operation: OperationClass,
) -> AdoptionRequest:
    """Load a request (404 first) and check tenant ownership (403)."""
    request = get_or_404(db, AdoptionRequest, request_id, "Adoption request not found")
    authorize(
        claims,
        request.animal.organizacion_id,
        operation,
        "You do not have permission to access this adoption request",
    )
    return request


def update_status(
    db: Session,
    request: AdoptionRequest,
    new_status: RequestStatus,
) -> AdoptionRequest:
    previous = request.estado_solicitud
    target = lifecycle.resolve_status_update(previous, new_status)
    if target is None:
        return request

    request.estado_solicitud = target
    db.commit()
    db.refresh(request)

    logger.info(
        f"Adoption request {request.id} status {previous.value} -> {target.value}",
        extra={"org_id": request.animal.organizacion_id},
    )
    if not lifecycle.follows_review_flow(previous, target):
        flow = "reopened" if lifecycle.is_terminal(previous) else "out of review order"
        logger.info(
            f"Adoption request {request.id} status change {flow}",
            extra={"org_id": request.animal.organizacion_id},
        )
    return request


def delete_request(db: Session, request: AdoptionRequest) -> None:
    request_id = request.id
    org_id = request.animal.organizacion_id
    db.delete(request)
    db.commit()
    logger.info(f"Adoption request {request_id} deleted", extra={"org_id": org_id})


def count_by_status(db: Session, scope: Optional[int]) -> Dict[str, int]:
    """Count per status; every status is present, zero when unused."""
    rows = (
        _scoped_query(db, scope)
        .with_entities(AdoptionRequest.estado_solicitud, func.count(AdoptionRequest.id))
        .group_by(AdoptionRequest.estado_solicitud)
        .all()
    )
    counts = {status.value: 0 for status in RequestStatus}
    for status, count in rows:
        counts[RequestStatus(status).value] = count
    return counts


def count_since(db: Session, scope: Optional[int], since: datetime) -> int:
    return (
        _scoped_query(db, scope)
        .filter(AdoptionRequest.fecha_solicitud >= since)
        .count()
    )


def request_statistics(
    db: Session,
    scope: Optional[int],
    now: Optional[datetime] = None,
) -> Dict[str, object]:
    """Totals for the request dashboard.

    Returns:
        {"total": int, "ultimos_7_dias": int, "por_estado": {status: count}}
    """
    now = now or datetime.now(timezone.utc)
    por_estado = count_by_status(db, scope)
    return {
        "total": sum(por_estado.values()),
        "ultimos_7_dias": count_since(db, scope, now - timedelta(days=RECENT_WINDOW_DAYS)),
        "por_estado": por_estado,
    }
