"""Mapping of domain errors onto HTTP errors."""

import logging

from fastapi import HTTPException, status

from classroom_registry.core.exceptions import (
    ClassroomRegistryError,
    InvalidInputError,
    NotFoundError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def to_http_exception(exc: ClassroomRegistryError) -> HTTPException:
    """Build the HTTPException a route should raise for a domain error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    logger.error("Unmapped classroom registry error: %s", exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(exc),
    )
