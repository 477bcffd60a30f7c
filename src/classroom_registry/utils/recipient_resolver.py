"""Notification recipient resolution.

Recipients of a notification are the union of

* students @-mentioned in the notification body, and
* students registered to the notifying teacher,

with every student suspended at the time of the call removed.
"""

import logging
from datetime import datetime
from typing import Callable, Optional, Set

from classroom_registry.core.exceptions import (
    StudentNotFoundError,
    TeacherNotFoundError,
)
from classroom_registry.utils.email_utils import ensure_valid_email
from classroom_registry.utils.mention_extractor import unique_mentions
from classroom_registry.utils.relationship_store import RelationshipStore
from classroom_registry.utils.suspension_policy import utc_now

logger = logging.getLogger(__name__)


class NotificationRecipientResolver:
    """Resolves the students who should receive a teacher's notification."""

    def __init__(
        self,
        store: RelationshipStore,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize NotificationRecipientResolver.

        Args:
            store: Relationship store to read from.
            clock: Returns the evaluation instant. Defaults to the UTC wall clock.
        """
        self.store = store
        self.clock = clock or utc_now

    def resolve_recipients(self, teacher_email: str, body: str) -> Set[str]:
        """Return the notifiable students for a notification.

        Mentions are checked in order of appearance and the first one that
        does not name a registered student aborts the call.

        Args:
            teacher_email: Email of the notifying teacher.
            body: Notification text, may contain @-mentions.

        Returns:
            Set of student emails, unordered.

        Raises:
            InvalidInputError: If the teacher email is invalid.
            TeacherNotFoundError: If the teacher is not registered.
            StudentNotFoundError: If a mention does not name a registered student.
            StoreUnavailableError: If the relationship store fails.
        """
        ensure_valid_email(teacher_email, "teacher")
        at = self.clock()

        if not self.store.teacher_exists(teacher_email):
            raise TeacherNotFoundError(teacher_email)

        recipients: Set[str] = set()
        for email in unique_mentions(body):
            if not self.store.student_exists(email):
                raise StudentNotFoundError(email)
            if self.store.is_suspended(email, at):
                logger.debug("Skipping suspended mentioned student %s", email)
                continue
            recipients.add(email)

        recipients.update(self.store.notifiable_students_of_teacher(teacher_email, at))
        logger.info(
            "Resolved %d recipient(s) for notification from %s",
            len(recipients),
            teacher_email,
        )
        return recipients
