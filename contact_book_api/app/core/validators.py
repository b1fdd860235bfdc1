"""Input validators.

Query and path values reach the handlers as raw strings; they are
parsed here into typed values or rejected with ``ValidationError``.
"""

import re
from typing import Optional

from .exceptions import ValidationError


EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
PHONE_PATTERN = re.compile(r"[0-9]{10}")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Range of an SQLite INTEGER.
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def parse_positive_int(
    value: Optional[str],
    name: str,
    default: Optional[int] = None,
    maximum: Optional[int] = None,
) -> int:
    """Parse ``value`` as an integer >= 1.

    ``None`` yields ``default`` when one is given.  Values above
    ``maximum`` are rejected rather than clamped.
    """
    if value is None and default is not None:
        return default
    text = (value or "").strip()
    if not INTEGER_PATTERN.fullmatch(text):
        raise ValidationError(f"{name} must be a positive integer")
    number = int(text)
    if number < 1:
        raise ValidationError(f"{name} must be a positive integer")
    if number > MAX_ID:
        raise ValidationError(f"{name} is out of range")
    if maximum is not None and number > maximum:
        raise ValidationError(f"{name} must not exceed {maximum}")
    return number


def validate_contact_fields(name: Optional[str], email: Optional[str], phone: Optional[str]) -> None:
    """Check a new contact's fields, first failure wins."""
    if not name or not email or not phone:
        raise ValidationError("All fields are required")
    if not EMAIL_PATTERN.search(email):
        raise ValidationError("Invalid email format")
    if not PHONE_PATTERN.fullmatch(phone):
        raise ValidationError("Phone must be 10 digits")


def parse_contact_id(value: str) -> int:
    """Parse a path id.

    Any integer that fits in an SQLite INTEGER is accepted, so ids that
    were never assigned (including zero and negatives) reach the store
    and come back as 404.
    """
    text = value.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        raise ValidationError("id must be an integer")
    number = int(text)
    if not MIN_ID <= number <= MAX_ID:
        raise ValidationError("id is out of range")
    return number
