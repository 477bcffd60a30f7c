"""Relationship store.

This module persists and queries the teacher, student, registration and
suspension facts using SQLAlchemy. It is the only place that talks to the
database; the resolvers receive an instance at construction time.
"""

import functools
import logging
from datetime import datetime
from typing import Iterable, List, Optional, Set

from sqlalchemy import distinct, exists, func, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from classroom_registry.core.exceptions import StoreUnavailableError
from classroom_registry.models.registration import RegistrationModel
from classroom_registry.models.student import StudentModel
from classroom_registry.models.suspension import SuspensionModel
from classroom_registry.models.teacher import TeacherModel
from classroom_registry.utils.suspension_policy import active_at, to_utc

logger = logging.getLogger(__name__)

_INSERT_IGNORE = {
    "sqlite": sqlite_insert,
    "postgresql": postgresql_insert,
}


def _store_operation(operation: str):
    """Turn SQLAlchemy failures into StoreUnavailableError.

    The session is rolled back so it can be reused by the caller.
    """

    def decorator(method):
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            try:
                return method(self, *args, **kwargs)
            except SQLAlchemyError as exc:
                self.db.rollback()
                logger.error("Relationship store failed to %s: %s", operation, exc)
                raise StoreUnavailableError(operation) from exc

        return wrapper

    return decorator


class RelationshipStore:
    """Reads and writes registration facts using SQLAlchemy."""

    def __init__(self, db: Session):
        """Initialize RelationshipStore.

        Args:
            db: SQLAlchemy Session.
        """
        self.db = db

    # --- Lookups ---

    @_store_operation("check if teacher exists")
    def teacher_exists(self, email: str) -> bool:
        return self.db.query(
            exists().where(TeacherModel.email == email)
        ).scalar()

    @_store_operation("check if student exists")
    def student_exists(self, email: str) -> bool:
        return self.db.query(
            exists().where(StudentModel.email == email)
        ).scalar()

    @_store_operation("get common students")
    def students_registered_to_all(self, teacher_emails: Iterable[str]) -> Set[str]:
        """Students registered to every one of the given teachers.

        Args:
            teacher_emails: Teacher emails; duplicates are ignored.

        Returns:
            Set of student emails. Empty if no teachers are given.
        """
        teachers = set(teacher_emails)
        if not teachers:
            return set()
        rows = (
            self.db.query(RegistrationModel.student_email)
            .filter(RegistrationModel.teacher_email.in_(teachers))
            .group_by(RegistrationModel.student_email)
            .having(func.count(distinct(RegistrationModel.teacher_email)) == len(teachers))
            .all()
        )
        return {row.student_email for row in rows}

    @_store_operation("get students of teacher")
    def students_of_teacher(self, teacher_email: str) -> Set[str]:
        rows = (
            self.db.query(RegistrationModel.student_email)
            .filter(RegistrationModel.teacher_email == teacher_email)
            .all()
        )
        return {row.student_email for row in rows}

    @_store_operation("check if student is suspended")
    def is_suspended(self, student_email: str, at: datetime) -> bool:
        return self.db.query(
            exists()
            .where(SuspensionModel.student_email == student_email)
            .where(active_at(at))
        ).scalar()

    @_store_operation("get notifiable students")
    def notifiable_students_of_teacher(self, teacher_email: str, at: datetime) -> Set[str]:
        """Registered students of a teacher with no suspension active at ``at``.

        Args:
            teacher_email: Email of the teacher.
            at: Evaluation instant.

        Returns:
            Set of student emails.
        """
        suspended = (
            select(SuspensionModel.student_email)
            .where(SuspensionModel.student_email == RegistrationModel.student_email)
            .where(active_at(at))
            .exists()
        )
        rows = (
            self.db.query(RegistrationModel.student_email)
            .filter(RegistrationModel.teacher_email == teacher_email)
            .filter(~suspended)
            .all()
        )
        return {row.student_email for row in rows}

    # --- Writes ---

    @_store_operation("register students to teacher")
    def register(self, teacher_email: str, student_emails: List[str]) -> None:
        """Register students to a teacher, creating either side if missing.

        Already known teachers, students and pairs are left untouched.

        Args:
            teacher_email: Email of the teacher.
            student_emails: Emails of the students to register.
        """
        students = list(dict.fromkeys(student_emails))
        self._insert_ignore(TeacherModel, [{"email": teacher_email}])
        self._insert_ignore(StudentModel, [{"email": email} for email in students])
        self._insert_ignore(
            RegistrationModel,
            [
                {"teacher_email": teacher_email, "student_email": email}
                for email in students
            ],
        )
        self.db.commit()
        logger.info(
            "Registered %d student(s) to teacher %s", len(students), teacher_email
        )

    @_store_operation("suspend student")
    def suspend(
        self,
        student_email: str,
        suspended_from: datetime,
        suspended_until: Optional[datetime] = None,
    ) -> None:
        """Append a suspension record for a student.

        Args:
            student_email: Email of the student.
            suspended_from: Start of the suspension.
            suspended_until: End of the suspension, or None for no end date.
        """
        self._insert_ignore(
            SuspensionModel,
            [
                {
                    "student_email": student_email,
                    "suspended_at": to_utc(suspended_from),
                    "suspended_until": (
                        to_utc(suspended_until) if suspended_until else None
                    ),
                }
            ],
        )
        self.db.commit()
        logger.info(
            "Suspended student %s from %s until %s",
            student_email,
            suspended_from.isoformat(),
            suspended_until.isoformat() if suspended_until else "further notice",
        )

    def _insert_ignore(self, model, rows: List[dict]) -> None:
        """Insert rows, skipping those whose primary key already exists."""
        if not rows:
            return
        insert = _INSERT_IGNORE.get(self.db.get_bind().dialect.name)
        if insert is not None:
            self.db.execute(insert(model).values(rows).on_conflict_do_nothing())
            return

        # Other backends: insert only the rows not yet present
        for row in rows:
            key = tuple(row[column.name] for column in model.__table__.primary_key)
            if self.db.get(model, key) is None:
                self.db.add(model(**row))
        self.db.flush()
