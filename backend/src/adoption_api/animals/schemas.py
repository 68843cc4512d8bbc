"""Pydantic schemas for animal endpoints"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..models.enums import AnimalStatus, Sex, Size, Species
from ..schemas.common import validate_url

MIN_HISTORY_LENGTH = 50


class AnimalCreate(BaseModel):
    """New listing. Any client-supplied ``estado`` is ignored."""
    nombre: str = Field(..., min_length=1, max_length=100)
    especie: Species
    sexo: Sex
    edad_aproximada: str = Field(..., min_length=1, max_length=50)
    tamanio: Size
    raza_mezcla: Optional[str] = Field(None, max_length=100)
    descripcion_historia: str = Field(..., min_length=MIN_HISTORY_LENGTH)
    estado_castracion: bool = False
    estado_vacunacion: str = Field(..., min_length=1, max_length=200)
    estado_desparasitacion: bool = False
    socializa_perros: Optional[bool] = None
    socializa_gatos: Optional[bool] = None
    socializa_ninos: Optional[bool] = None
    necesidades_especiales: Optional[str] = None
    tipo_hogar_ideal: Optional[str] = None
    publicado_por: Optional[str] = Field(None, max_length=100)
    contacto_rescatista: Optional[str] = Field(None, max_length=100)
    foto_principal: str
    foto_2: Optional[str] = None
    foto_3: Optional[str] = None
    foto_4: Optional[str] = None
    foto_5: Optional[str] = None

    @field_validator('nombre', 'descripcion_historia')
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @field_validator('foto_principal')
    @classmethod
    def validate_main_photo(cls, v: str) -> str:
        v = validate_url(v)
        if v is None:
            raise ValueError("A main photo is required")
        return v

    @field_validator('foto_2', 'foto_3', 'foto_4', 'foto_5')
    @classmethod
    def validate_photos(cls, v: Optional[str]) -> Optional[str]:
        return validate_url(v)


class AnimalUpdate(BaseModel):
    """Partial update: omitted fields keep their stored value."""
    nombre: Optional[str] = Field(None, min_length=1, max_length=100)
    especie: Optional[Species] = None
    sexo: Optional[Sex] = None
    edad_aproximada: Optional[str] = Field(None, min_length=1, max_length=50)
    tamanio: Optional[Size] = None
    raza_mezcla: Optional[str] = Field(None, max_length=100)
    descripcion_historia: Optional[str] = Field(None, min_length=MIN_HISTORY_LENGTH)
    estado_castracion: Optional[bool] = None
    estado_vacunacion: Optional[str] = Field(None, min_length=1, max_length=200)
    estado_desparasitacion: Optional[bool] = None
    socializa_perros: Optional[bool] = None
    socializa_gatos: Optional[bool] = None
    socializa_ninos: Optional[bool] = None
    necesidades_especiales: Optional[str] = None
    tipo_hogar_ideal: Optional[str] = None
    estado: Optional[AnimalStatus] = None
    publicado_por: Optional[str] = Field(None, max_length=100)
    contacto_rescatista: Optional[str] = Field(None, max_length=100)
    foto_principal: Optional[str] = None
    foto_2: Optional[str] = None
    foto_3: Optional[str] = None
    foto_4: Optional[str] = None
    foto_5: Optional[str] = None

    @field_validator('foto_principal', 'foto_2', 'foto_3', 'foto_4', 'foto_5')
    @classmethod
    def validate_photos(cls, v: Optional[str]) -> Optional[str]:
        return validate_url(v)


class AnimalStatusUpdate(BaseModel):
    estado: AnimalStatus


class OrganizationSummary(BaseModel):
    id: int
    nombre: str
    slug: str
    telefono: Optional[str] = None
    whatsapp: Optional[str] = None
    instagram: Optional[str] = None

    class Config:
        from_attributes = True


class AnimalResponse(BaseModel):
    id: int
    organizacion_id: int
    administrador_id: Optional[int] = None
    nombre: str
    especie: Species
    sexo: Sex
    edad_aproximada: str
    tamanio: Size
    raza_mezcla: Optional[str] = None
    descripcion_historia: str
    estado_castracion: bool
    estado_vacunacion: str
    estado_desparasitacion: bool
    socializa_perros: Optional[bool] = None
    socializa_gatos: Optional[bool] = None
    socializa_ninos: Optional[bool] = None
    necesidades_especiales: Optional[str] = None
    tipo_hogar_ideal: Optional[str] = None
    estado: AnimalStatus
    publicado_por: Optional[str] = None
    contacto_rescatista: Optional[str] = None
    foto_principal: str
    foto_2: Optional[str] = None
    foto_3: Optional[str] = None
    foto_4: Optional[str] = None
    foto_5: Optional[str] = None
    fecha_publicacion: datetime
    organizacion: Optional[OrganizationSummary] = None

    class Config:
        from_attributes = True


class AnimalData(BaseModel):
    animal: AnimalResponse


class AnimalListData(BaseModel):
    animales: List[AnimalResponse]
    total: int
