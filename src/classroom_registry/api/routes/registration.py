"""Registration routes.

This module handles registering students to teachers and querying the
students common to a group of teachers.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query, Response, status

from classroom_registry.api.errors import to_http_exception
from classroom_registry.core.dependencies import (
    CommonStudentsResolverDep,
    RelationshipStoreDep,
)
from classroom_registry.core.exceptions import ClassroomRegistryError
from classroom_registry.schemas.registration import (
    CommonStudentsResponse,
    RegisterRequest,
)
from classroom_registry.utils.email_utils import ensure_valid_email

router = APIRouter(prefix="/api", tags=["Registration"])


@router.post(
    "/register",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Register students to a teacher",
)
def register(req: RegisterRequest, store: RelationshipStoreDep) -> Response:
    """Register one or more students to a teacher.

    Unknown teachers and students are created on the fly. Registering an
    existing pair again has no effect.

    Args:
        req: Teacher email and student emails.
        store: Injected RelationshipStore instance.

    Raises:
        HTTPException: 400 on invalid input, 503 if the store fails.
    """
    if not req.students:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No students given in request.",
        )
    try:
        ensure_valid_email(req.teacher, "teacher")
        for email in req.students:
            ensure_valid_email(email, "student")
        store.register(req.teacher, req.students)
    except ClassroomRegistryError as exc:
        raise to_http_exception(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/commonstudents",
    response_model=CommonStudentsResponse,
    summary="List students common to all given teachers",
)
def common_students(
    resolver: CommonStudentsResolverDep,
    teacher: List[str] = Query(default=[]),
) -> CommonStudentsResponse:
    try:
        students = resolver.common_students(teacher)
    except ClassroomRegistryError as exc:
        raise to_http_exception(exc)
    return CommonStudentsResponse(students=sorted(students))
