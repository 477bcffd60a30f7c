"""Student database model.

A student is identified solely by its email address.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from .base import Base


class StudentModel(Base):
    """Student database model."""

    __tablename__ = "students"

    email = Column(String(254), primary_key=True, index=True)

    registrations = relationship(
        "RegistrationModel",
        back_populates="student",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    suspensions = relationship(
        "SuspensionModel",
        back_populates="student",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
