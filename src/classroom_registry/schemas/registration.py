"""Request and response models for the registration API.

Field names follow the JSON keys used by existing clients.
"""

from typing import List

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    teacher: str = Field(description="Email of the teacher.")
    students: List[str] = Field(
        default=[],
        description="Emails of the students to register to the teacher.",
    )


class CommonStudentsResponse(BaseModel):
    students: List[str] = Field(
        description="Students registered to all requested teachers, sorted."
    )
