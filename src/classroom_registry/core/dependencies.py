"""Dependency injection module for FastAPI.

Every request gets its own RelationshipStore bound to a request-scoped
database session; the resolvers are built around that store.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from classroom_registry.core.database import get_db
from classroom_registry.utils.common_students import CommonStudentsResolver
from classroom_registry.utils.recipient_resolver import NotificationRecipientResolver
from classroom_registry.utils.relationship_store import RelationshipStore


def get_relationship_store(db: Session = Depends(get_db)) -> RelationshipStore:
    """Get RelationshipStore instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        RelationshipStore instance.
    """
    return RelationshipStore(db)


def get_common_students_resolver(
    store: RelationshipStore = Depends(get_relationship_store),
) -> CommonStudentsResolver:
    """Get CommonStudentsResolver bound to the request-scoped store.

    Args:
        store: Relationship store for this request.

    Returns:
        CommonStudentsResolver instance.
    """
    return CommonStudentsResolver(store)


def get_recipient_resolver(
    store: RelationshipStore = Depends(get_relationship_store),
) -> NotificationRecipientResolver:
    """Get NotificationRecipientResolver bound to the request-scoped store.

    The resolver evaluates suspensions against the UTC wall clock.

    Args:
        store: Relationship store for this request.

    Returns:
        NotificationRecipientResolver instance.
    """
    return NotificationRecipientResolver(store)


# Type aliases for dependency injection
RelationshipStoreDep = Annotated[
    RelationshipStore, Depends(get_relationship_store)
]
CommonStudentsResolverDep = Annotated[
    CommonStudentsResolver, Depends(get_common_students_resolver)
]
RecipientResolverDep = Annotated[
    NotificationRecipientResolver, Depends(get_recipient_resolver)
]
