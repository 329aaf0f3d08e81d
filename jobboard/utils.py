# jobboard/utils.py

import logging
from datetime import datetime, timedelta, timezone

from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError, VerificationError, InvalidHash
from email_validator import validate_email, EmailNotValidError

log = logging.getLogger(__name__)

JOB_LIFETIME = timedelta(days=30)

_hasher = PasswordHasher()
# Verified against when an email is unknown, so both failure paths cost the same
DUMMY_HASH = _hasher.hash("not-a-real-password")


def utcnow() -> datetime:
    """Naive UTC timestamp, the form SQLite hands back."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


# --- Password Handling ---
def hash_password(pwd: str) -> str:
    """Hashes a password using Argon2."""
    log.debug("Hashing password with Argon2.")
    return _hasher.hash(pwd)


def verify_password(pwd_hash: str, pwd: str) -> bool:
    """Verifies a plaintext password against an Argon2 hash. Never raises on mismatch."""
    try:
        return _hasher.verify(pwd_hash, pwd)
    except VerifyMismatchError:
        log.debug("Password verification failed: Mismatch.")
        return False
    except (VerificationError, InvalidHash) as e:
        log.error(f"Password verification error: Hash format or verification issue - {e}")
        return False


# --- Email Validation ---
def validate_user_email(email: str) -> str:
    """Validates email format using email-validator. Returns normalized email."""
    if not email:
        raise ValueError("Email address cannot be empty.")
    try:
        email_info = validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"Invalid email address format: {str(e)}")
    return email_info.normalized


def split_skills(skills) -> list[str]:
    """Accepts a list or a comma separated string and returns the cleaned skill list."""
    if not skills:
        return []
    if isinstance(skills, str):
        skills = skills.split(",")
    return [s.strip() for s in skills if s and s.strip()]


def token_from_header(auth_header: str | None) -> str | None:
    """Returns the token of an 'Authorization: Bearer <token>' header, or None."""
    token_prefix = "Bearer "
    if not auth_header or not auth_header.startswith(token_prefix):
        return None
    return auth_header[len(token_prefix):].strip() or None
