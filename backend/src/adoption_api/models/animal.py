"""Animal listing model"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import relationship

from .base import Base, enum_column_type, utcnow
from .enums import AnimalStatus, Sex, Size, Species

PHOTO_FIELDS = ("foto_principal", "foto_2", "foto_3", "foto_4", "foto_5")


class Animal(Base):
    """An animal published for adoption by one organization.

    Deletion is restricted at the database level while adoption requests
    reference the row.
    """
    __tablename__ = "animal"

    id = Column(Integer, primary_key=True, autoincrement=True)
    organizacion_id = Column(
        Integer, ForeignKey("organization.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    administrador_id = Column(
        Integer, ForeignKey("administrator.id", ondelete="SET NULL"), nullable=True
    )

    nombre = Column(Text, nullable=False)
    especie = Column(enum_column_type(Species, "ck_animal_especie"), nullable=False)
    sexo = Column(enum_column_type(Sex, "ck_animal_sexo"), nullable=False)
    edad_aproximada = Column(Text, nullable=False)
    tamanio = Column(enum_column_type(Size, "ck_animal_tamanio"), nullable=False)
    raza_mezcla = Column(Text, nullable=True)
    descripcion_historia = Column(Text, nullable=False)

    estado_castracion = Column(Boolean, nullable=False, default=False)
    estado_vacunacion = Column(Text, nullable=False)
    estado_desparasitacion = Column(Boolean, nullable=False, default=False)
    socializa_perros = Column(Boolean, nullable=True)
    socializa_gatos = Column(Boolean, nullable=True)
    socializa_ninos = Column(Boolean, nullable=True)
    necesidades_especiales = Column(Text, nullable=True)
    tipo_hogar_ideal = Column(Text, nullable=True)

    estado = Column(
        enum_column_type(AnimalStatus, "ck_animal_estado"),
        nullable=False,
        default=AnimalStatus.AVAILABLE,
        index=True,
    )
    publicado_por = Column(Text, nullable=True)
    contacto_rescatista = Column(Text, nullable=True)

    foto_principal = Column(Text, nullable=False)
    foto_2 = Column(Text, nullable=True)
    foto_3 = Column(Text, nullable=True)
    foto_4 = Column(Text, nullable=True)
    foto_5 = Column(Text, nullable=True)

    fecha_publicacion = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, index=True)

    # Relationships
    organizacion = relationship("Organization", back_populates="animales")
    solicitudes = relationship("AdoptionRequest", back_populates="animal", passive_deletes="all")
    caso_exito = relationship(
        "SuccessStory",
        back_populates="animal",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Animal(id={self.id}, nombre='{self.nombre}', estado='{self.estado}')>"
