"""Administrator SQLAlchemy model"""

import re

from sqlalchemy import Boolean, Column, ForeignKey, Integer, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import relationship, validates

from .base import Base, utcnow


class Administrator(Base):
    """Administrator of exactly one organization.

    Administrators flagged ``es_super_admin`` have cross-tenant authority
    (organization management and onboarding review). Passwords are hashed
    using Argon2id.
    """
    __tablename__ = "administrator"

    id = Column(Integer, primary_key=True, autoincrement=True)
    organizacion_id = Column(
        Integer, ForeignKey("organization.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    username = Column(Text, nullable=False, unique=True)
    email = Column(Text, nullable=False, unique=True)
    password_hash = Column(Text, nullable=False)
    es_super_admin = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    fecha_creacion = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    ultimo_acceso = Column(TIMESTAMP(timezone=True), nullable=True)

    # Relationships
    organizacion = relationship("Organization", back_populates="administradores")

    @validates('email')
    def validate_email(self, key, value):
        """Basic email format validation"""
        if not re.match(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$', value):
            raise ValueError("Invalid email format")
        return value.lower()

    def __repr__(self):
        return f"<Administrator(id={self.id}, username='{self.username}')>"
