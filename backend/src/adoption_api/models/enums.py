"""Closed value sets used by the models and the API schemas.

Values are the exact strings exchanged with clients and stored in the
database; member names are what the code refers to.
"""

from enum import Enum


class AnimalStatus(str, Enum):
    """Listing lifecycle of an Animal."""
    AVAILABLE = "Disponible"
    IN_PROCESS = "En proceso"
    IN_TRANSIT = "En transito"
    ADOPTED = "Adoptado"


class RequestStatus(str, Enum):
    """Adoption request lifecycle: New -> Reviewed -> UnderEvaluation -> Approved | Rejected."""
    NEW = "Nueva"
    REVIEWED = "Revisada"
    UNDER_EVALUATION = "En evaluación"
    APPROVED = "Aprobada"
    REJECTED = "Rechazada"


class ContactStatus(str, Enum):
    """Review state of a shelter onboarding request."""
    PENDING = "Pendiente"
    APPROVED = "Aprobada"
    REJECTED = "Rechazada"


class Species(str, Enum):
    DOG = "Perro"
    CAT = "Gato"


class Sex(str, Enum):
    MALE = "Macho"
    FEMALE = "Hembra"


class Size(str, Enum):
    SMALL = "Pequeño"
    MEDIUM = "Mediano"
    LARGE = "Grande"


class HousingType(str, Enum):
    HOUSE_WITH_YARD = "Casa con patio"
    HOUSE_WITHOUT_YARD = "Casa sin patio"
    APARTMENT = "Departamento"
    OTHER = "Otro"


class OtherPetsNeutered(str, Enum):
    YES = "Sí"
    NO = "No"
    SOME = "Algunos"
