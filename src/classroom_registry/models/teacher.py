"""Teacher database model.

A teacher is identified solely by its email address.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from .base import Base


class TeacherModel(Base):
    """Teacher database model."""

    __tablename__ = "teachers"

    email = Column(String(254), primary_key=True, index=True)

    registrations = relationship(
        "RegistrationModel",
        back_populates="teacher",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
