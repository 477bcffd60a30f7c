"""Email address validation.

Any RFC 5322 address is accepted, including local hosts such as
"teacher@localhost" and quoted local parts.

Addresses are only checked, never rewritten: identities are compared by exact
string equality, so the caller's spelling is what gets stored and queried.
"""

from email_validator import EmailNotValidError, validate_email

from classroom_registry.core.exceptions import InvalidInputError


def is_valid_email(email: object) -> bool:
    """Check whether a value is a syntactically valid email address."""
    if not isinstance(email, str) or not email:
        return False
    try:
        validate_email(
            email,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
            allow_quoted_local=True,
        )
    except EmailNotValidError:
        return False
    return True


def ensure_valid_email(email: object, role: str) -> str:
    """Return the email unchanged or raise InvalidInputError.

    Args:
        email: Value to validate.
        role: "teacher" or "student", used in the error message.

    Returns:
        The same email string.

    Raises:
        InvalidInputError: If the value is not a valid email address.
    """
    if not is_valid_email(email):
        raise InvalidInputError(f"{role.capitalize()}'s email ({email}) is invalid.")
    return email
