"""Success story model (one per adopted animal)"""

from sqlalchemy import Column, Date, ForeignKey, Integer, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class SuccessStory(Base):
    __tablename__ = "success_story"

    id = Column(Integer, primary_key=True, autoincrement=True)
    animal_id = Column(
        Integer, ForeignKey("animal.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    organizacion_id = Column(
        Integer, ForeignKey("organization.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    titulo = Column(Text, nullable=False)
    historia = Column(Text, nullable=False)
    foto_actual_1 = Column(Text, nullable=True)
    foto_actual_2 = Column(Text, nullable=True)
    foto_actual_3 = Column(Text, nullable=True)
    fecha_adopcion = Column(Date, nullable=False)
    fecha_publicacion = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    # Relationships
    animal = relationship("Animal", back_populates="caso_exito")
    organizacion = relationship("Organization", back_populates="casos_exito")

    def __repr__(self):
        return f"<SuccessStory(id={self.id}, animal_id={self.animal_id})>"
