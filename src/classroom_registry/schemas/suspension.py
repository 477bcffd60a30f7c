"""Request model for suspending a student."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SuspendRequest(BaseModel):
    student: str = Field(description="Email of the student to suspend.")
    suspended_until: Optional[datetime] = Field(
        default=None,
        description="End of the suspension. Omit to suspend until further notice. "
        "Naive values are taken as UTC.",
    )
