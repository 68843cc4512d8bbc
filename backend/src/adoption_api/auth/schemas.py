"""Pydantic schemas for authentication endpoints"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class AdminSummary(BaseModel):
    id: int
    username: str
    email: str
    es_super_admin: bool

    class Config:
        from_attributes = True


class OrganizationRef(BaseModel):
    id: int
    nombre: str
    slug: str

    class Config:
        from_attributes = True


class LoginData(BaseModel):
    """Successful login.

    Attributes:
        token: Signed bearer token
        token_type: Always "bearer"
        expires_in: Token lifetime in seconds
    """
    token: str
    token_type: str = "bearer"
    expires_in: int
    admin: AdminSummary
    organizacion: OrganizationRef


class MeData(BaseModel):
    id: int
    username: str
    email: str
    es_super_admin: bool
    fecha_creacion: datetime
    ultimo_acceso: Optional[datetime] = None
    organizacion: OrganizationRef

    class Config:
        from_attributes = True
