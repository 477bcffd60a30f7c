"""Suspension database model.

Suspension history is append-only: a student may carry any number of records.
A NULL suspended_until means the suspension has no end date.
"""

from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base


class SuspensionModel(Base):
    """Suspension database model."""

    __tablename__ = "suspensions"

    student_email = Column(
        String(254),
        ForeignKey("students.email", ondelete="CASCADE"),
        primary_key=True,
    )
    suspended_at = Column(DateTime(timezone=True), primary_key=True)
    suspended_until = Column(DateTime(timezone=True), nullable=True)

    student = relationship("StudentModel", back_populates="suspensions")
