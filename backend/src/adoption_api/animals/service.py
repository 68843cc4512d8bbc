"""Animal listing operations with tenant-aware visibility."""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from ..auth.claims import Claims
from ..dependencies import get_or_404
from ..errors import ConflictError, NotFoundError
from ..models.adoption_request import AdoptionRequest
from ..models.animal import Animal
from ..models.enums import AnimalStatus, Size, Species
from ..tenancy.policy import (
    OperationClass,
    authorize,
    can_view_animal,
    listing_scope,
    visible_animal_statuses,
)
from .schemas import AnimalCreate, AnimalUpdate

logger = logging.getLogger(__name__)

# A null for these fields in a partial update keeps the stored value
_NULL_KEEPS_VALUE = frozenset({
    "nombre",
    "especie",
    "sexo",
    "edad_aproximada",
    "tamanio",
    "descripcion_historia",
    "estado_castracion",
    "estado_vacunacion",
    "estado_desparasitacion",
    "socializa_perros",
    "socializa_gatos",
    "socializa_ninos",
    "estado",
    "foto_principal",
})

NOT_FOUND_MESSAGE = "Animal not found"


def _escape_like(text: str) -> str:
    """Match % and _ literally in a LIKE pattern."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def list_animals(
    db: Session,
    claims: Optional[Claims],
    estado: Optional[AnimalStatus] = None,
    especie: Optional[Species] = None,
    tamanio: Optional[Size] = None,
    busqueda: Optional[str] = None,
) -> List[Animal]:
    """Animals visible to the caller, newest first.

    Authenticated callers are restricted to their own organization (all
    statuses). Anonymous callers see every organization's listed animals
    but never Adopted ones. Query filters narrow that set further.
    """
    scope = listing_scope(claims)
    allowed = visible_animal_statuses(claims, scope)

    query = db.query(Animal).options(joinedload(Animal.organizacion))
    if scope is not None:
        query = query.filter(Animal.organizacion_id == scope)

    if estado is not None:
        if estado not in allowed:
            return []
        query = query.filter(Animal.estado == estado)
    elif allowed != frozenset(AnimalStatus):
        query = query.filter(Animal.estado.in_(list(allowed)))

    if especie is not None:
        query = query.filter(Animal.especie == especie)
    if tamanio is not None:
        query = query.filter(Animal.tamanio == tamanio)
    if busqueda:
        query = query.filter(Animal.nombre.ilike(f"%{_escape_like(busqueda.strip())}%", escape="\\"))

    return query.order_by(Animal.fecha_publicacion.desc(), Animal.id.desc()).all()


def get_visible_animal(db: Session, claims: Optional[Claims], animal_id: int) -> Animal:
    """Fetch one animal; Adopted animals are hidden from non-owners."""
    animal = get_or_404(db, Animal, animal_id, NOT_FOUND_MESSAGE)
    if not can_view_animal(claims, animal.organizacion_id, animal.estado):
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return animal


def get_writable_animal(db: Session, claims: Claims, animal_id: int) -> Animal:
    animal = get_or_404(db, Animal, animal_id, NOT_FOUND_MESSAGE)
    authorize(
        claims,
        animal.organizacion_id,
        OperationClass.WRITE_OWN_TENANT,
        "You do not have permission to modify this animal",
    )
    return animal


def create_animal(db: Session, claims: Claims, data: AnimalCreate) -> Animal:
    """Publish a new animal in the caller's organization as Disponible."""
    animal = Animal(
        **data.model_dump(),
        estado=AnimalStatus.AVAILABLE,
        organizacion_id=claims.organization_id,
        administrador_id=claims.admin_id,
    )
    db.add(animal)
    db.commit()
    db.refresh(animal)

    logger.info(
        f"Animal {animal.id} published",
        extra={"org_id": claims.organization_id, "admin_id": claims.admin_id},
    )
    return animal


def update_animal(db: Session, animal: Animal, data: AnimalUpdate) -> Animal:
    """Apply a partial update.

    Omitted fields are untouched. An explicit null keeps the stored value
    for required and boolean fields and clears optional text fields; an
    explicit ``false`` is stored as false.
    """
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field in _NULL_KEEPS_VALUE:
            continue
        setattr(animal, field, value)

    db.commit()
    db.refresh(animal)
    logger.info(f"Animal {animal.id} updated", extra={"org_id": animal.organizacion_id})
    return animal


def set_status(db: Session, animal: Animal, estado: AnimalStatus) -> Animal:
    previous = animal.estado
    animal.estado = estado
    db.commit()
    db.refresh(animal)
    logger.info(
        f"Animal {animal.id} status {previous.value} -> {estado.value}",
        extra={"org_id": animal.organizacion_id},
    )
    return animal


def delete_animal(db: Session, animal: Animal) -> None:
    """Delete an animal that no adoption request references.

    Raises:
        ConflictError: HAS_DEPENDENCIES
    """
    has_requests = (
        db.query(AdoptionRequest.id)
        .filter(AdoptionRequest.animal_id == animal.id)
        .first()
        is not None
    )
    if has_requests:
        raise ConflictError(
            "Cannot delete an animal that has adoption requests",
            code="HAS_DEPENDENCIES",
        )

    animal_id = animal.id
    org_id = animal.organizacion_id
    db.delete(animal)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(
            "Cannot delete an animal that has dependent records",
            code="HAS_DEPENDENCIES",
        )

    logger.info(f"Animal {animal_id} deleted", extra={"org_id": org_id})
