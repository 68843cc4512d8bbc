"""Public endpoint for shelters asking to join the platform."""

from fastapi import APIRouter, status

from ..dependencies import DbSession
from ..schemas.common import Envelope
from . import service
from .schemas import ContactRequestCreate, ContactRequestData, ContactRequestResponse

router = APIRouter(prefix="/contact-requests", tags=["Contact Requests"])


@router.post("", response_model=Envelope[ContactRequestData], status_code=status.HTTP_201_CREATED)
def create_contact_request(data: ContactRequestCreate, db: DbSession):
    contact = service.create_contact_request(db, data)
    return Envelope(
        data=ContactRequestData(solicitud=ContactRequestResponse.model_validate(contact)),
        message="Request received. We will contact you soon.",
    )
