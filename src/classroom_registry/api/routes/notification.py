"""Notification routes.

This module resolves who receives a notification. Sending it is left to
the caller.
"""

from fastapi import APIRouter

from classroom_registry.api.errors import to_http_exception
from classroom_registry.core.dependencies import RecipientResolverDep
from classroom_registry.core.exceptions import ClassroomRegistryError
from classroom_registry.schemas.notification import (
    RecipientsResponse,
    RetrieveForNotificationsRequest,
)

router = APIRouter(prefix="/api", tags=["Notification"])


@router.post(
    "/retrievefornotifications",
    response_model=RecipientsResponse,
    summary="Retrieve students who can receive a notification",
)
def retrieve_for_notifications(
    req: RetrieveForNotificationsRequest,
    resolver: RecipientResolverDep,
) -> RecipientsResponse:
    """Resolve the recipients of a teacher's notification.

    Args:
        req: Teacher email and notification text.
        resolver: Injected NotificationRecipientResolver instance.

    Returns:
        RecipientsResponse with the sorted recipient emails.

    Raises:
        HTTPException: 400 on invalid input, 404 if the teacher or a
            mentioned student is not registered, 503 if the store fails.
    """
    try:
        recipients = resolver.resolve_recipients(req.teacher, req.notification)
    except ClassroomRegistryError as exc:
        raise to_http_exception(exc)
    return RecipientsResponse(recipients=sorted(recipients))
