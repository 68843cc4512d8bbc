"""Shelter onboarding request operations."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..dependencies import get_or_404
from ..models.base import utcnow
from ..models.contact_request import ContactRequest
from ..models.enums import ContactStatus
from .schemas import ContactRequestCreate, ContactRequestReview

logger = logging.getLogger(__name__)


def create_contact_request(db: Session, data: ContactRequestCreate) -> ContactRequest:
    contact = ContactRequest(**data.model_dump(), estado=ContactStatus.PENDING)
    db.add(contact)
    db.commit()
    db.refresh(contact)
    logger.info(f"Contact request {contact.id} received from {contact.nombre_refugio}")
    return contact


def list_contact_requests(db: Session, estado: Optional[ContactStatus] = None) -> List[ContactRequest]:
    query = db.query(ContactRequest)
    if estado is not None:
        query = query.filter(ContactRequest.estado == estado)
    return query.order_by(ContactRequest.fecha_solicitud.desc(), ContactRequest.id.desc()).all()


def review_contact_request(db: Session, contact_id: int, data: ContactRequestReview) -> ContactRequest:
    """Record a super-administrator decision.

    ``fecha_respuesta`` is stamped whenever a status is supplied.
    """
    contact = get_or_404(db, ContactRequest, contact_id, "Contact request not found")

    changes = data.model_dump(exclude_unset=True)
    if changes.get("estado") is not None:
        contact.estado = changes["estado"]
        contact.fecha_respuesta = utcnow()
    if "notas_admin" in changes:
        contact.notas_admin = changes["notas_admin"]

    db.commit()
    db.refresh(contact)
    logger.info(f"Contact request {contact.id} reviewed: {contact.estado.value}")
    return contact
