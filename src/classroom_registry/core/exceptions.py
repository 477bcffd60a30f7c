"""Custom exception classes for the classroom registry.

This module defines application-specific exceptions following Google Python
Style Guide. Every error raised by the resolvers and the relationship store
is a subclass of ClassroomRegistryError.
"""


class ClassroomRegistryError(Exception):
    """Base exception for all classroom registry errors."""

    pass


class InvalidInputError(ClassroomRegistryError):
    """Raised when a caller supplies input the resolvers cannot accept."""

    pass


class NotFoundError(ClassroomRegistryError):
    """Raised when a referenced teacher or student does not exist."""

    def __init__(self, email: str, message: str):
        """Initialize the exception.

        Args:
            email: The email address that could not be found.
            message: Human readable description.
        """
        self.email = email
        super().__init__(message)


class TeacherNotFoundError(NotFoundError):
    """Raised when a teacher is not registered."""

    def __init__(self, email: str):
        super().__init__(email, f"Teacher '{email}' is not registered")


class StudentNotFoundError(NotFoundError):
    """Raised when an email does not belong to a registered student."""

    def __init__(self, email: str):
        super().__init__(email, f"Student '{email}' is not registered")


class StoreUnavailableError(ClassroomRegistryError):
    """Raised when the relationship store fails to answer a query."""

    def __init__(self, operation: str):
        """Initialize the exception.

        Args:
            operation: Short description of the store operation that failed.
        """
        self.operation = operation
        super().__init__(f"Relationship store failed to {operation}")


class ConfigurationError(ClassroomRegistryError):
    """Raised when there is a configuration error."""

    pass
