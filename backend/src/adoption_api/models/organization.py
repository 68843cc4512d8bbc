"""Organization model - root entity for multi-tenant isolation"""

import re

from sqlalchemy import Boolean, Column, Integer, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import relationship, validates

from .base import Base, utcnow


class Organization(Base):
    """
    Organization (shelter) - the unit of data isolation.

    Animals, administrators and success stories reference organization.id.
    Organizations are deactivated through ``activa`` and never hard-deleted.
    """
    __tablename__ = "organization"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(Text, nullable=False)
    slug = Column(Text, nullable=False, unique=True)
    email = Column(Text, nullable=True)
    telefono = Column(Text, nullable=True)
    whatsapp = Column(Text, nullable=True)
    direccion = Column(Text, nullable=True)
    logo_url = Column(Text, nullable=True)
    descripcion = Column(Text, nullable=True)
    instagram = Column(Text, nullable=True)
    facebook = Column(Text, nullable=True)
    donacion_alias = Column(Text, nullable=True)
    donacion_cbu = Column(Text, nullable=True)
    donacion_info = Column(Text, nullable=True)
    activa = Column(Boolean, nullable=False, default=True, server_default=text("true"))
    fecha_creacion = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    # Relationships
    administradores = relationship("Administrator", back_populates="organizacion")
    animales = relationship("Animal", back_populates="organizacion")
    casos_exito = relationship("SuccessStory", back_populates="organizacion")

    @validates('slug')
    def validate_slug(self, key, value):
        """
        Ensure slug is URL-friendly.

        Pattern: ^[a-z0-9-]+$
        Valid: refugio-patitas, huellitas-2024
        """
        if not value or not re.match(r'^[a-z0-9-]+$', value):
            raise ValueError(
                "Slug must contain only lowercase letters, numbers, and hyphens"
            )
        if len(value) > 50:
            raise ValueError("Slug cannot exceed 50 characters")
        return value

    @validates('nombre')
    def validate_nombre(self, key, value):
        if not value or len(value.strip()) == 0:
            raise ValueError("Organization name cannot be empty")
        return value.strip()

    def __repr__(self):
        return f"<Organization(id={self.id}, slug='{self.slug}', activa={self.activa})>"
