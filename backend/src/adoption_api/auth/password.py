"""Password hashing and verification using Argon2id

Administrator passwords are hashed with Argon2id using OWASP-recommended
parameters, with the server-side PASSWORD_PEPPER appended before hashing.

OWASP Parameters:
- Memory cost: 65536 KB (64 MB)
- Time cost: 3 iterations
- Parallelism: 4 threads
"""

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from ..config import get_settings

MIN_PASSWORD_LENGTH = 8

_hasher = PasswordHasher(
    memory_cost=65536,  # 64 MB
    time_cost=3,
    parallelism=4,
    hash_len=32,
    salt_len=16,
    type=Type.ID  # Argon2id variant
)


def _get_pepper() -> str:
    """Get PASSWORD_PEPPER from settings.

    Raises:
        ValueError: If PASSWORD_PEPPER is empty
    """
    pepper = get_settings().PASSWORD_PEPPER
    if not pepper:
        raise ValueError("PASSWORD_PEPPER is not configured")
    return pepper


def hash_password(password: str) -> str:
    """Hash a password using Argon2id with the global pepper.

    Args:
        password: Plain text password to hash

    Returns:
        str: Argon2id hash string (format: $argon2id$v=19$m=65536,t=3,p=4$...$...)

    Raises:
        ValueError: If PASSWORD_PEPPER is not set or password is empty
    """
    if not password:
        raise ValueError("Password cannot be empty")

    return _hasher.hash(password + _get_pepper())


def verify_password(password: str, hash: str) -> bool:
    """Verify a password against an Argon2id hash.

    Returns:
        bool: True if password matches hash, False otherwise
    """
    if not password or not hash:
        return False

    try:
        _hasher.verify(hash, password + _get_pepper())
        return True
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False
