"""Pydantic schemas for shelter onboarding (contact) requests"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from ..models.enums import ContactStatus


class ContactRequestCreate(BaseModel):
    nombre_refugio: str = Field(..., min_length=2, max_length=100)
    nombre_contacto: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    telefono: str = Field(..., min_length=6, max_length=30)
    ciudad: str = Field(..., min_length=2, max_length=100)
    descripcion: str = Field(..., min_length=10)
    instagram: Optional[str] = Field(None, max_length=100)
    facebook: Optional[str] = Field(None, max_length=200)
    cantidad_animales: Optional[str] = Field(None, max_length=50)


class ContactRequestReview(BaseModel):
    estado: Optional[ContactStatus] = None
    notas_admin: Optional[str] = None


class ContactRequestResponse(BaseModel):
    id: int
    nombre_refugio: str
    nombre_contacto: str
    email: str
    telefono: str
    ciudad: str
    descripcion: str
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    cantidad_animales: Optional[str] = None
    estado: ContactStatus
    notas_admin: Optional[str] = None
    fecha_solicitud: datetime
    fecha_respuesta: Optional[datetime] = None

    class Config:
        from_attributes = True


class ContactRequestData(BaseModel):
    solicitud: ContactRequestResponse


class ContactRequestListData(BaseModel):
    solicitudes: List[ContactRequestResponse]
    total: int
