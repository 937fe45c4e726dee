"""
Password hashing.

Passwords are stored as ``pbkdf2_sha256$<iterations>$<salt>$<hash>`` with a
random per-password salt; the iteration count travels with the hash so it can
be raised later without invalidating existing accounts.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
from typing import Optional

from bakery_shop.server.core.config import settings

ALGORITHM = "pbkdf2_sha256"


def _derive(password: str, salt: str, iterations: int) -> str:
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations)
    return base64.b64encode(digest).decode("ascii")


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """Hash ``password`` with a fresh salt."""
    iterations = iterations or settings.password_hash_iterations
    salt = secrets.token_hex(16)
    return f"{ALGORITHM}${iterations}${salt}${_derive(password, salt, iterations)}"


def verify_password(password: str, encoded: str) -> bool:
    """Check ``password`` against a hash produced by ``hash_password``."""
    try:
        algorithm, iterations, salt, expected = encoded.split("$", 3)
        rounds = int(iterations)
    except ValueError:
        return False
    if algorithm != ALGORITHM:
        return False
    return hmac.compare_digest(_derive(password, salt, rounds), expected)
