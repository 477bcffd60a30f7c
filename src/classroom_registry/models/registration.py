from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base


class RegistrationModel(Base):
    __tablename__ = "registered"

    student_email = Column(
        String(254),
        ForeignKey("students.email", ondelete="CASCADE"),
        primary_key=True,
    )
    teacher_email = Column(
        String(254),
        ForeignKey("teachers.email", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    student = relationship("StudentModel", back_populates="registrations")
    teacher = relationship("TeacherModel", back_populates="registrations")
