# =============================================
# trainhub/core/validators.py
# =============================================
import json
import re
from typing import Any, List, NamedTuple, Optional

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Personal mailbox providers; organizations must register with their own domain
RESTRICTED_DOMAINS = frozenset({
    # Major providers
    "gmail.com", "yahoo.com", "ymail.com", "rocketmail.com",
    "outlook.com", "hotmail.com", "live.com", "msn.com",
    "icloud.com", "me.com", "mac.com", "aol.com", "zoho.com",
    "gmx.com", "gmx.us", "protonmail.com", "pm.me",
    "tutanota.com", "tutanota.de", "tutamail.com",
    # mail.com vanity domains
    "mail.com", "email.com", "usa.com", "myself.com", "consultant.com",
    "post.com", "europe.com", "asia.com", "dr.com", "engineer.com",
    "cheerful.com", "accountant.com", "activist.com", "allergist.com",
    "alumni.com", "arcticmail.com", "artlover.com", "birdlover.com",
    "brew-meister.com", "cash4u.com", "chemist.com", "columnist.com",
    "comic.com", "computer4u.com", "counsellor.com", "deliveryman.com",
    "diplomats.com", "execs.com", "fastservice.com", "gardener.com",
    "groupmail.com", "homemail.com", "job4u.com", "journalist.com",
    "legislator.com", "lobbyist.com", "minister.com", "net-shopping.com",
    "optician.com", "pediatrician.com", "planetmail.com", "politician.com",
    "priest.com", "publicist.com", "qualityservice.com", "realtyagent.com",
    "registerednurses.com", "repairman.com", "sociologist.com", "solution4u.com",
})

EMAIL_REQUIRED_MESSAGE = "Email is required"
EMAIL_FORMAT_MESSAGE = "Please enter a valid email address"
EMAIL_MALFORMED_MESSAGE = "Invalid email format"
PERSONAL_EMAIL_MESSAGE = (
    "Personal email addresses are not allowed. Please use your organization email address."
)


class EmailValidationResult(NamedTuple):
    is_valid: bool
    error: Optional[str] = None


def is_valid_email_format(email: Optional[str]) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email) is not None


def email_domain(email: str) -> str:
    return email.rsplit("@", 1)[-1].lower() if "@" in email else ""


def is_restricted_domain(email: str) -> bool:
    return email_domain(email) in RESTRICTED_DOMAINS


def validate_email_domain(email: Optional[str]) -> EmailValidationResult:
    """
    Validate an organization login email.

    The address must be well formed and must not belong to a personal
    mailbox provider. Contact emails only need `is_valid_email_format`.
    """
    if not email:
        return EmailValidationResult(False, EMAIL_REQUIRED_MESSAGE)

    if not is_valid_email_format(email):
        return EmailValidationResult(False, EMAIL_FORMAT_MESSAGE)

    domain = email_domain(email)
    if not domain:
        return EmailValidationResult(False, EMAIL_MALFORMED_MESSAGE)

    if domain in RESTRICTED_DOMAINS:
        return EmailValidationResult(False, PERSONAL_EMAIL_MESSAGE)

    return EmailValidationResult(True)


def validate_password(password: Optional[str], min_length: int = 6) -> Optional[str]:
    """Return an error message when the password is too short, None otherwise"""
    if not password or len(password) < min_length:
        return f"Password must be at least {min_length} characters long"
    return None

# =============================================
# SKILLS FIELD
# =============================================

def _clean(tokens: List[Any]) -> List[str]:
    cleaned = []
    for token in tokens:
        if token is None:
            continue
        text = str(token).strip()
        if text:
            cleaned.append(text)
    return cleaned


def parse_skills(value: Any) -> List[str]:
    """
    Read a skills column written either as a JSON array or as a plain
    comma separated string.

    >>> parse_skills('["a","b"]')
    ['a', 'b']
    >>> parse_skills("a, b ,c")
    ['a', 'b', 'c']
    >>> parse_skills(None)
    []
    """
    if isinstance(value, (list, tuple)):
        return _clean(list(value))
    if not value:
        return []

    text = str(value)
    try:
        decoded = json.loads(text)
    except ValueError:
        decoded = None

    if isinstance(decoded, list):
        return _clean(decoded)
    if isinstance(decoded, str):
        text = decoded

    return _clean(text.split(","))


def serialize_skills(value: Any) -> str:
    """Skills are always written back as a JSON array"""
    return json.dumps(parse_skills(value))
