"""Pydantic schemas for organization profile endpoints"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from ..schemas.common import validate_url


class OrganizationResponse(BaseModel):
    """Full profile, visible to the organization's own administrators."""
    id: int
    nombre: str
    slug: str
    email: Optional[str] = None
    telefono: Optional[str] = None
    whatsapp: Optional[str] = None
    direccion: Optional[str] = None
    logo_url: Optional[str] = None
    descripcion: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    donacion_alias: Optional[str] = None
    donacion_cbu: Optional[str] = None
    donacion_info: Optional[str] = None
    activa: bool
    fecha_creacion: datetime

    class Config:
        from_attributes = True


class OrganizationPublic(BaseModel):
    """Public profile: no email and no bank account number."""
    id: int
    nombre: str
    slug: str
    telefono: Optional[str] = None
    whatsapp: Optional[str] = None
    direccion: Optional[str] = None
    logo_url: Optional[str] = None
    descripcion: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    donacion_alias: Optional[str] = None
    donacion_info: Optional[str] = None

    class Config:
        from_attributes = True


class OrganizationUpdate(BaseModel):
    """Partial profile update. ``slug`` and ``activa`` are not editable here."""
    nombre: Optional[str] = Field(None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    telefono: Optional[str] = Field(None, max_length=30)
    whatsapp: Optional[str] = Field(None, max_length=30)
    direccion: Optional[str] = Field(None, max_length=200)
    logo_url: Optional[str] = None
    descripcion: Optional[str] = None
    instagram: Optional[str] = Field(None, max_length=100)
    facebook: Optional[str] = Field(None, max_length=200)
    donacion_alias: Optional[str] = Field(None, max_length=100)
    donacion_cbu: Optional[str] = Field(None, max_length=30)
    donacion_info: Optional[str] = None

    @field_validator('nombre')
    @classmethod
    def strip_nombre(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Organization name must have at least 2 characters")
        return v

    @field_validator('logo_url')
    @classmethod
    def validate_logo_url(cls, v: Optional[str]) -> Optional[str]:
        return validate_url(v)


class OrganizationData(BaseModel):
    organizacion: OrganizationResponse


class OrganizationPublicData(BaseModel):
    organizacion: OrganizationPublic
