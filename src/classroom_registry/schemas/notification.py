"""Request and response models for notification recipient retrieval."""

from typing import List

from pydantic import BaseModel, Field


class RetrieveForNotificationsRequest(BaseModel):
    teacher: str = Field(description="Email of the teacher sending the notification.")
    notification: str = Field(
        description="Notification text. Students can be mentioned as @student@example.com."
    )


class RecipientsResponse(BaseModel):
    recipients: List[str] = Field(description="Students to notify, sorted.")
