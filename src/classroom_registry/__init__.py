"""Teacher/student registration service with notification recipient resolution."""

__version__ = "1.0.0"
