"""Password hashing for job seeker and employer accounts."""
import hashlib
import hmac
import secrets
from typing import Optional

from swiftjobs.core.config import settings

ALGORITHM = "pbkdf2_sha256"


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """
    Hash a password with PBKDF2-HMAC-SHA256 and a random salt.

    Returns a string of the form ``pbkdf2_sha256$<iterations>$<salt>$<digest>``.
    """
    iterations = iterations or settings.PASSWORD_HASH_ITERATIONS
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode(), salt.encode(), iterations
    ).hex()
    return f"{ALGORITHM}${iterations}${salt}${digest}"


def verify_password(password: str, stored: Optional[str]) -> bool:
    """Check a password against a stored hash. Malformed hashes never verify."""
    if not stored:
        return False

    try:
        algorithm, iterations, salt, digest = stored.split("$")
        iterations = int(iterations)
    except ValueError:
        return False

    if algorithm != ALGORITHM:
        return False

    check = hashlib.pbkdf2_hmac(
        "sha256", password.encode(), salt.encode(), iterations
    ).hex()
    return hmac.compare_digest(check, digest)
