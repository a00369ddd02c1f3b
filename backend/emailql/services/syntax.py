# backend/emailql/services/syntax.py
import re
from typing import Callable, Dict

from email_validator import validate_email

EmailChecker = Callable[[str], bool]

# RFC-light regex (practical)
EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def is_email_strict(addr: str) -> bool:
    """
    Syntax-only check backed by email-validator.
    No DNS lookups; any rejection (EmailNotValidError is a ValueError) -> False.
    """
    if not addr:
        return False
    try:
        validate_email(addr, check_deliverability=False)
    except ValueError:
        return False
    return True


def is_email_light(addr: str) -> bool:
    if not addr or "@" not in addr:
        return False
    return EMAIL_REGEX.match(addr) is not None


CHECKERS: Dict[str, EmailChecker] = {
    "strict": is_email_strict,
    "light": is_email_light,
}


def get_checker(name: str) -> EmailChecker:
    try:
        return CHECKERS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(CHECKERS))
        raise ValueError(f"Unknown email checker {name!r} (expected one of: {known})") from None
