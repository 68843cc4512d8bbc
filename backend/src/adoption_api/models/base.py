"""Base SQLAlchemy declarative base for all models"""

from datetime import datetime, timezone
from enum import Enum
from typing import Type

from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import declarative_base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def enum_column_type(enum_cls: Type[Enum], name: str) -> SAEnum:
    """Store a str Enum by its value (the wire representation)."""
    return SAEnum(
        enum_cls,
        name=name,
        native_enum=False,
        create_constraint=True,
        length=32,
        values_callable=lambda members: [member.value for member in members],
        validate_strings=True,
    )


Base = declarative_base()
