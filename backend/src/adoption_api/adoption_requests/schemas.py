"""Pydantic schemas for adoption request endpoints"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from ..models.enums import HousingType, OtherPetsNeutered, RequestStatus, Species
from . import lifecycle


class AdoptionRequestCreate(BaseModel):
    """Public application form.

    ``estado_solicitud`` is not accepted; every request starts as Nueva.
    """
    animal_id: int = Field(..., ge=1)
    nombre_completo: str = Field(..., min_length=2, max_length=100)
    edad: int = Field(..., le=120)
    email: EmailStr
    telefono_whatsapp: str = Field(..., min_length=6, max_length=20)
    instagram: Optional[str] = Field(None, max_length=100)
    ciudad_zona: str = Field(..., min_length=2, max_length=100)
    tipo_vivienda: HousingType
    vive_solo_acompanado: str = Field(..., min_length=1, max_length=100)
    todos_de_acuerdo: bool
    tiene_otros_animales: bool
    otros_animales_castrados: Optional[OtherPetsNeutered] = None
    experiencia_previa: str = Field(..., min_length=1)
    puede_cubrir_gastos: bool
    veterinaria_que_usa: Optional[str] = Field(None, max_length=200)
    motivacion: str
    compromiso_castracion: bool
    acepta_contacto: bool = True

    @field_validator('nombre_completo', 'ciudad_zona', 'vive_solo_acompanado', 'experiencia_previa')
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field cannot be blank")
        return v

    @field_validator('edad')
    @classmethod
    def validate_edad(cls, v: int) -> int:
        return lifecycle.require_adult(v)

    @field_validator('motivacion')
    @classmethod
    def validate_motivacion(cls, v: str) -> str:
        return lifecycle.require_motivation(v)

    @field_validator('todos_de_acuerdo')
    @classmethod
    def validate_todos_de_acuerdo(cls, v: bool) -> bool:
        return lifecycle.require_household_agreement(v)

    @field_validator('compromiso_castracion')
    @classmethod
    def validate_compromiso_castracion(cls, v: bool) -> bool:
        return lifecycle.require_sterilization_commitment(v)


class AdoptionRequestStatusUpdate(BaseModel):
    estado_solicitud: RequestStatus


class AnimalSummary(BaseModel):
    id: int
    nombre: str
    especie: Species

    class Config:
        from_attributes = True


class AnimalListSummary(AnimalSummary):
    foto_principal: Optional[str] = None
    organizacion_id: int


class AdoptionRequestCreated(BaseModel):
    """Echo returned to the applicant."""
    id: int
    animal: AnimalSummary
    nombre_completo: str
    email: str
    fecha_solicitud: datetime
    estado_solicitud: RequestStatus

    class Config:
        from_attributes = True


class AdoptionRequestResponse(BaseModel):
    id: int
    animal_id: int
    animal: AnimalListSummary
    nombre_completo: str
    edad: int
    email: str
    telefono_whatsapp: str
    instagram: Optional[str] = None
    ciudad_zona: str
    tipo_vivienda: HousingType
    vive_solo_acompanado: str
    todos_de_acuerdo: bool
    tiene_otros_animales: bool
    otros_animales_castrados: Optional[OtherPetsNeutered] = None
    experiencia_previa: str
    puede_cubrir_gastos: bool
    veterinaria_que_usa: Optional[str] = None
    motivacion: str
    compromiso_castracion: bool
    acepta_contacto: bool
    fecha_solicitud: datetime
    estado_solicitud: RequestStatus

    class Config:
        from_attributes = True


class CreatedData(BaseModel):
    solicitud: AdoptionRequestCreated


class DetailData(BaseModel):
    solicitud: AdoptionRequestResponse


class ListData(BaseModel):
    solicitudes: List[AdoptionRequestResponse]
    total: int


class StatsData(BaseModel):
    total: int
    ultimos_7_dias: int
    por_estado: Dict[str, int]
