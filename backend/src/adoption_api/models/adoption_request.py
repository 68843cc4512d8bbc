"""Adoption request model"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import relationship

from .base import Base, enum_column_type, utcnow
from .enums import HousingType, OtherPetsNeutered, RequestStatus


class AdoptionRequest(Base):
    """Application submitted by the public for one animal.

    Tenant ownership is derived from ``animal.organizacion_id``.
    """
    __tablename__ = "adoption_request"

    id = Column(Integer, primary_key=True, autoincrement=True)
    animal_id = Column(
        Integer, ForeignKey("animal.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    # Applicant
    nombre_completo = Column(Text, nullable=False)
    edad = Column(Integer, nullable=False)
    email = Column(Text, nullable=False)
    telefono_whatsapp = Column(Text, nullable=False)
    instagram = Column(Text, nullable=True)
    ciudad_zona = Column(Text, nullable=False)

    # Household
    tipo_vivienda = Column(enum_column_type(HousingType, "ck_request_tipo_vivienda"), nullable=False)
    vive_solo_acompanado = Column(Text, nullable=False)
    todos_de_acuerdo = Column(Boolean, nullable=False)
    tiene_otros_animales = Column(Boolean, nullable=False)
    otros_animales_castrados = Column(
        enum_column_type(OtherPetsNeutered, "ck_request_otros_castrados"), nullable=True
    )

    # Experience and commitment
    experiencia_previa = Column(Text, nullable=False)
    puede_cubrir_gastos = Column(Boolean, nullable=False)
    veterinaria_que_usa = Column(Text, nullable=True)
    motivacion = Column(Text, nullable=False)
    compromiso_castracion = Column(Boolean, nullable=False)
    acepta_contacto = Column(Boolean, nullable=False, default=True, server_default=text("true"))

    fecha_solicitud = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, index=True)
    estado_solicitud = Column(
        enum_column_type(RequestStatus, "ck_request_estado"),
        nullable=False,
        default=RequestStatus.NEW,
    )

    # Relationships
    animal = relationship("Animal", back_populates="solicitudes")

    def __repr__(self):
        return f"<AdoptionRequest(id={self.id}, animal_id={self.animal_id}, estado='{self.estado_solicitud}')>"
