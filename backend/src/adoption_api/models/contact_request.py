"""Shelter onboarding (contact) request model"""

from sqlalchemy import Column, Integer, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP

from .base import Base, enum_column_type, utcnow
from .enums import ContactStatus


class ContactRequest(Base):
    """Public request from a shelter that wants an account.

    Not tenant-scoped; reviewed by super-administrators only.
    """
    __tablename__ = "contact_request"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre_refugio = Column(Text, nullable=False)
    nombre_contacto = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    telefono = Column(Text, nullable=False)
    ciudad = Column(Text, nullable=False)
    descripcion = Column(Text, nullable=False)
    instagram = Column(Text, nullable=True)
    facebook = Column(Text, nullable=True)
    cantidad_animales = Column(Text, nullable=True)
    estado = Column(
        enum_column_type(ContactStatus, "ck_contact_estado"),
        nullable=False,
        default=ContactStatus.PENDING,
        index=True,
    )
    notas_admin = Column(Text, nullable=True)
    fecha_solicitud = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    fecha_respuesta = Column(TIMESTAMP(timezone=True), nullable=True)

    def __repr__(self):
        return f"<ContactRequest(id={self.id}, nombre_refugio='{self.nombre_refugio}')>"
