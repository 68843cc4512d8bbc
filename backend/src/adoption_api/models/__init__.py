"""SQLAlchemy models for the adoption platform"""

from .base import Base
from .enums import (
    AnimalStatus,
    ContactStatus,
    HousingType,
    OtherPetsNeutered,
    RequestStatus,
    Sex,
    Size,
    Species,
)
from .organization import Organization
from .administrator import Administrator
from .animal import Animal
from .adoption_request import AdoptionRequest
from .success_story import SuccessStory
from .contact_request import ContactRequest

__all__ = [
    "Base",
    "Organization",
    "Administrator",
    "Animal",
    "AdoptionRequest",
    "SuccessStory",
    "ContactRequest",
    "AnimalStatus",
    "RequestStatus",
    "ContactStatus",
    "Species",
    "Sex",
    "Size",
    "HousingType",
    "OtherPetsNeutered",
]
