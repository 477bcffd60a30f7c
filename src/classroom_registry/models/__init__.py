from .base import Base
from .teacher import TeacherModel
from .student import StudentModel
from .registration import RegistrationModel
from .suspension import SuspensionModel

__all__ = [
    "Base",
    "TeacherModel",
    "StudentModel",
    "RegistrationModel",
    "SuspensionModel",
]
