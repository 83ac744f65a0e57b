"""
Password hashing helpers.

Passwords never reach the record store in clear text: the service
layer hashes them with PBKDF2‑HMAC (SHA‑256) before a record is
created, replaced or patched.  The stored string has the form
``<iterations>$<salt hex>$<hash hex>`` so the work factor can be
raised later without invalidating existing hashes.
"""

import hashlib
import hmac
import os
from typing import Optional

from .config import settings


SALT_BYTES = 16


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A fresh random salt is generated for each call, so hashing the same
    password twice yields different strings.

    Parameters
    ----------
    password : str
        The plain text password to hash.
    iterations : Optional[int]
        PBKDF2 work factor.  Defaults to
        ``settings.password_hash_iterations``.

    Returns
    -------
    str
        Iterations, salt and hash joined with ``$``.
    """
    rounds = iterations or settings.password_hash_iterations
    salt = os.urandom(SALT_BYTES)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, rounds)
    return f"{rounds}${salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a string built by ``hash_password``.

    Returns ``False`` for malformed hashes instead of raising.
    """
    try:
        rounds_str, salt_hex, hash_hex = hashed_password.split("$", 2)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
        rounds = int(rounds_str)
    except (AttributeError, ValueError):
        return False
    if rounds <= 0:
        return False
    try:
        dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, rounds)
    except OverflowError:
        return False
    return hmac.compare_digest(dk, stored_hash)
