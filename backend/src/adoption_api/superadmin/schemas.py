"""Pydantic schemas for super-administrator endpoints"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from ..auth.password import MIN_PASSWORD_LENGTH
from ..tenancy.schemas import OrganizationResponse


class OrganizationCreate(BaseModel):
    """New organization together with its first administrator."""
    nombre: str = Field(..., min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    telefono: Optional[str] = Field(None, max_length=30)
    whatsapp: Optional[str] = Field(None, max_length=30)
    direccion: Optional[str] = Field(None, max_length=200)
    descripcion: Optional[str] = None
    admin_username: str = Field(..., min_length=3, max_length=50, pattern=r'^[A-Za-z0-9_.-]+$')
    admin_email: EmailStr
    admin_password: str = Field(..., min_length=MIN_PASSWORD_LENGTH, max_length=128)


class AdministratorInfo(BaseModel):
    id: int
    username: str
    email: str
    es_super_admin: bool
    fecha_creacion: datetime
    ultimo_acceso: Optional[datetime] = None

    class Config:
        from_attributes = True


class OrganizationCounts(BaseModel):
    animales: int
    administradores: int


class OrganizationOverview(OrganizationResponse):
    administradores: List[AdministratorInfo]
    counts: OrganizationCounts


class Credentials(BaseModel):
    username: str
    password: str


class OrganizationCreatedData(BaseModel):
    organizacion: OrganizationResponse
    administrador: AdministratorInfo
    credenciales: Credentials


class OrganizationListData(BaseModel):
    organizaciones: List[OrganizationOverview]
    total: int


class OrganizationToggleData(BaseModel):
    organizacion: OrganizationResponse
