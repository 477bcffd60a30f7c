"""Common students resolution.

Finds the students registered to every teacher in a list.
"""

import logging
from typing import Iterable, Set

from classroom_registry.core.exceptions import InvalidInputError
from classroom_registry.utils.email_utils import ensure_valid_email
from classroom_registry.utils.relationship_store import RelationshipStore

logger = logging.getLogger(__name__)


class CommonStudentsResolver:
    """Computes the intersection of teacher rosters."""

    def __init__(self, store: RelationshipStore):
        self.store = store

    def common_students(self, teacher_emails: Iterable[str]) -> Set[str]:
        """Return the students registered to all given teachers.

        Duplicate teachers are collapsed before counting, so the result does
        not depend on the order or multiplicity of the input.

        Args:
            teacher_emails: Non-empty sequence of teacher emails.

        Returns:
            Set of student emails, unordered.

        Raises:
            InvalidInputError: If no teacher is given or an email is invalid.
            StoreUnavailableError: If the relationship store fails.
        """
        teachers = list(dict.fromkeys(teacher_emails))
        if not teachers:
            raise InvalidInputError("No teachers given in request.")
        for email in teachers:
            ensure_valid_email(email, "teacher")

        students = self.store.students_registered_to_all(teachers)
        logger.debug(
            "Found %d common student(s) for %d teacher(s)", len(students), len(teachers)
        )
        return students
