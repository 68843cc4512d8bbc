"""Animal endpoints.

Reads accept an optional bearer token: with one, the listing is the
caller's own organization in every status; without one, the public
catalogue. Writes require a token and ownership of the animal.
"""

from typing import Optional

from fastapi import APIRouter, Query, status

from ..auth.dependencies import CurrentClaims, OptionalClaims
from ..dependencies import DbSession
from ..models.enums import AnimalStatus, Size, Species
from ..schemas.common import Envelope, MessageData
from . import service
from .schemas import (
    AnimalCreate,
    AnimalData,
    AnimalListData,
    AnimalResponse,
    AnimalStatusUpdate,
    AnimalUpdate,
)

router = APIRouter(prefix="/animals", tags=["Animals"])


@router.get("", response_model=Envelope[AnimalListData])
def list_animals(
    claims: OptionalClaims,
    db: DbSession,
    estado: Optional[AnimalStatus] = Query(None),
    especie: Optional[Species] = Query(None),
    tamanio: Optional[Size] = Query(None),
    busqueda: Optional[str] = Query(None, max_length=100),
):
    animals = service.list_animals(
        db, claims, estado=estado, especie=especie, tamanio=tamanio, busqueda=busqueda
    )
    return Envelope(
        data=AnimalListData(
            animales=[AnimalResponse.model_validate(a) for a in animals],
            total=len(animals),
        )
    )


@router.get("/{animal_id}", response_model=Envelope[AnimalData])
def get_animal(animal_id: int, claims: OptionalClaims, db: DbSession):
    animal = service.get_visible_animal(db, claims, animal_id)
    return Envelope(data=AnimalData(animal=AnimalResponse.model_validate(animal)))


@router.post("", response_model=Envelope[AnimalData], status_code=status.HTTP_201_CREATED)
def create_animal(data: AnimalCreate, claims: CurrentClaims, db: DbSession):
    animal = service.create_animal(db, claims, data)
    return Envelope(
        data=AnimalData(animal=AnimalResponse.model_validate(animal)),
        message="Animal published",
    )


@router.put("/{animal_id}", response_model=Envelope[AnimalData])
@router.patch("/{animal_id}", response_model=Envelope[AnimalData])
def update_animal(animal_id: int, data: AnimalUpdate, claims: CurrentClaims, db: DbSession):
    animal = service.get_writable_animal(db, claims, animal_id)
    animal = service.update_animal(db, animal, data)
    return Envelope(
        data=AnimalData(animal=AnimalResponse.model_validate(animal)),
        message="Animal updated",
    )


@router.patch("/{animal_id}/status", response_model=Envelope[AnimalData])
def update_animal_status(
    animal_id: int,
    data: AnimalStatusUpdate,
    claims: CurrentClaims,
    db: DbSession,
):
    animal = service.get_writable_animal(db, claims, animal_id)
    animal = service.set_status(db, animal, data.estado)
    return Envelope(
        data=AnimalData(animal=AnimalResponse.model_validate(animal)),
        message="Animal status updated",
    )


@router.delete("/{animal_id}", response_model=Envelope[MessageData])
def delete_animal(animal_id: int, claims: CurrentClaims, db: DbSession):
    animal = service.get_writable_animal(db, claims, animal_id)
    service.delete_animal(db, animal)
    return Envelope(data=MessageData(message="Animal deleted"))
