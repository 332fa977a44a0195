"""
Password credential utilities and opaque user id generation.
"""
from typing import Tuple
import hashlib
import hmac
import secrets

SALT_BYTES = 16
HASH_ITERATIONS = 1000
HASH_KEY_LENGTH = 64
HASH_DIGEST = "sha512"
USER_ID_PREFIX = "user_"


def _derive_key(password: str, salt: str) -> str:
    """
    Derive the hex-encoded PBKDF2 key for a password.
    The salt is used in its hex text form, so stored hashes stay verifiable
    across implementations that share the same database file.
    """
    derived = hashlib.pbkdf2_hmac(
        HASH_DIGEST,
        password.encode('utf-8'),
        salt.encode('utf-8'),
        HASH_ITERATIONS,
        dklen=HASH_KEY_LENGTH
    )
    return derived.hex()


def hash_password(password: str) -> Tuple[str, str]:
    """
    Hash a password with a fresh random salt.
    Returns (salt, hash), both hex strings for database storage.
    """
    salt = secrets.token_hex(SALT_BYTES)
    return salt, _derive_key(password, salt)


def verify_password(plain_password: str, salt: str, hashed_password: str) -> bool:
    """Verify a password against its stored salt and hash."""
    return hmac.compare_digest(_derive_key(plain_password, salt), hashed_password)


def generate_user_id() -> str:
    """Generate an opaque external user id, e.g. 'user_9f86d081884c7d65'."""
    return USER_ID_PREFIX + secrets.token_hex(8)
