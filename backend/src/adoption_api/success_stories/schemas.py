"""Pydantic schemas for success story endpoints"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..models.enums import Species
from ..schemas.common import validate_url


class SuccessStoryCreate(BaseModel):
    animal_id: int = Field(..., ge=1)
    titulo: str = Field(..., min_length=3, max_length=200)
    historia: str = Field(..., min_length=20)
    foto_actual_1: Optional[str] = None
    foto_actual_2: Optional[str] = None
    foto_actual_3: Optional[str] = None
    fecha_adopcion: date

    @field_validator('foto_actual_1', 'foto_actual_2', 'foto_actual_3')
    @classmethod
    def validate_photos(cls, v: Optional[str]) -> Optional[str]:
        return validate_url(v)


class SuccessStoryUpdate(BaseModel):
    titulo: Optional[str] = Field(None, min_length=3, max_length=200)
    historia: Optional[str] = Field(None, min_length=20)
    foto_actual_1: Optional[str] = None
    foto_actual_2: Optional[str] = None
    foto_actual_3: Optional[str] = None
    fecha_adopcion: Optional[date] = None

    @field_validator('foto_actual_1', 'foto_actual_2', 'foto_actual_3')
    @classmethod
    def validate_photos(cls, v: Optional[str]) -> Optional[str]:
        return validate_url(v)


class StoryAnimal(BaseModel):
    id: int
    nombre: str
    especie: Species
    foto_principal: str

    class Config:
        from_attributes = True


class SuccessStoryResponse(BaseModel):
    id: int
    animal_id: int
    organizacion_id: int
    titulo: str
    historia: str
    foto_actual_1: Optional[str] = None
    foto_actual_2: Optional[str] = None
    foto_actual_3: Optional[str] = None
    fecha_adopcion: date
    fecha_publicacion: datetime
    animal: StoryAnimal

    class Config:
        from_attributes = True


class OrganizationStories(BaseModel):
    id: int
    nombre: str
    slug: str
    logo_url: Optional[str] = None
    casos_exito: List[SuccessStoryResponse]


class StoryData(BaseModel):
    caso_exito: SuccessStoryResponse


class OrganizationStoriesData(BaseModel):
    organizacion: OrganizationStories


class AllStoriesData(BaseModel):
    organizaciones: List[OrganizationStories]
