"""Validation of user profile fields."""
import re
from typing import Optional, Tuple


EMAIL_PATTERN = r'^[\w%+-]+(\.[\w%+-]+)*@([A-Za-z0-9-]+\.)+[A-Za-z]{2,}$'
PHONE_PATTERN = r'^\+?[0-9\s\-()]{7,20}$'
NAME_PUNCTUATION = " -'."
MAX_NAME_LENGTH = 100
MAX_AGE = 120


def validate_name(name: Optional[str], field_name: str = "Name") -> Tuple[bool, str]:
    """
    Validate a person's display name.

    Letters from any script are accepted, plus spaces, hyphens, periods
    and apostrophes.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not name or not name.strip():
        return False, f"{field_name} is required"

    name = name.strip()

    if len(name) > MAX_NAME_LENGTH:
        return False, f"{field_name} is too long (max {MAX_NAME_LENGTH} characters)"

    if not any(c.isalpha() for c in name):
        return False, f"{field_name} must contain letters"

    if not all(c.isalpha() or c in NAME_PUNCTUATION for c in name):
        return False, f"{field_name} can only contain letters, spaces, hyphens, periods, and apostrophes"

    return True, ""


def validate_email(email: str) -> Tuple[bool, str]:
    """Profile e-mail is optional, but must look like an address when given."""
    email = (email or "").strip()
    if not email:
        return False, "Email is required"
    if len(email) > 254:
        return False, "Email is too long"
    if not re.match(EMAIL_PATTERN, email):
        return False, "Invalid email format"
    return True, ""


def validate_phone(phone: str) -> Tuple[bool, str]:
    if not re.match(PHONE_PATTERN, phone.strip()):
        return False, "Invalid phone number"
    return True, ""


def validate_age(age: Optional[int]) -> Tuple[bool, str]:
    if age is not None and not 0 <= age <= MAX_AGE:
        return False, f"Age must be between 0 and {MAX_AGE}"
    return True, ""
