"""Suspension routes."""

import logging

from fastapi import APIRouter, Response, status

from classroom_registry.api.errors import to_http_exception
from classroom_registry.core.dependencies import RelationshipStoreDep
from classroom_registry.core.exceptions import (
    ClassroomRegistryError,
    InvalidInputError,
    StudentNotFoundError,
)
from classroom_registry.schemas.suspension import SuspendRequest
from classroom_registry.utils.email_utils import ensure_valid_email
from classroom_registry.utils.suspension_policy import to_utc, utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Suspension"])


@router.post(
    "/suspend",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Suspend a student",
)
def suspend(req: SuspendRequest, store: RelationshipStoreDep) -> Response:
    """Suspend a student starting now.

    Earlier suspensions of the same student are kept as history.

    Args:
        req: Student email and optional end of the suspension.
        store: Injected RelationshipStore instance.

    Raises:
        HTTPException: 400 on invalid input, 404 if the student is not
            registered, 503 if the store fails.
    """
    suspended_from = utc_now()
    try:
        ensure_valid_email(req.student, "student")
        if not store.student_exists(req.student):
            raise StudentNotFoundError(req.student)

        suspended_until = None
        if req.suspended_until is not None:
            suspended_until = to_utc(req.suspended_until)
            if suspended_until < suspended_from:
                raise InvalidInputError(
                    "suspended_until must not be earlier than the start of the suspension."
                )
        store.suspend(req.student, suspended_from, suspended_until)
    except ClassroomRegistryError as exc:
        raise to_http_exception(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
