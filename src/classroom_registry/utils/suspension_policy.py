"""Suspension status predicate.

A suspension record is active at instant ``at`` when

    suspended_at <= at AND (suspended_until IS NULL OR at <= suspended_until)

Both ends are inclusive. The same clause is used for mentioned students and
for a teacher's roster so the two paths cannot disagree at the boundary.
"""

from datetime import datetime

import pytz
from sqlalchemy import and_, or_

from classroom_registry.models.suspension import SuspensionModel


def to_utc(value: datetime) -> datetime:
    """Convert a datetime to an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return pytz.utc.localize(value)
    return value.astimezone(pytz.utc)


def utc_now() -> datetime:
    return datetime.now(pytz.utc)


def active_at(at: datetime):
    """Build the SQL clause selecting suspension rows active at ``at``."""
    at = to_utc(at)
    return and_(
        SuspensionModel.suspended_at <= at,
        or_(
            SuspensionModel.suspended_until.is_(None),
            SuspensionModel.suspended_until >= at,
        ),
    )
