import re
from typing import Any

# One "@", at least one "." after it, no whitespace anywhere
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

def normalize_email(raw: str) -> str:
    """Trim surrounding whitespace and lower-case an email address"""
    return raw.strip().lower()

def is_valid_email(raw: Any) -> bool:
    """
    Check that raw is a syntactically valid email address.

    Non-string and empty input is rejected. The check runs on the
    normalized form, so surrounding whitespace and case do not matter.
    """
    if not isinstance(raw, str) or not raw:
        return False
    return EMAIL_PATTERN.fullmatch(normalize_email(raw)) is not None
