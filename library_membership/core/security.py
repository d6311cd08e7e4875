# File: library_membership/core/security.py

"""
Security helpers for the Library Membership API.

  - bcrypt password hashing (salted, constant-time verification)
  - PyJWT HS256 access tokens whose ``sub`` is the user id
"""

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Optional

import bcrypt
import jwt

from library_membership.core.config import settings


ALGORITHM = settings.algorithm
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes
SECRET_KEY = settings.secret_key

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    candidate = plain_password.encode("utf-8")
    if len(candidate) > BCRYPT_MAX_BYTES:
        return False
    return bcrypt.checkpw(candidate, password_hash.encode("utf-8"))


@lru_cache
def dummy_password_hash() -> str:
    """
    Hash checked against when a login names an unknown email, so a miss
    costs the same bcrypt round as a wrong password.
    """
    return hash_password("not-a-real-password")


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign ``data`` as a JWT with an ``exp`` claim.

    Callers put the user id in ``sub`` as a string.
    """
    to_encode: dict[str, Any] = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode["exp"] = expire
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Optional[dict[str, Any]]:
    """
    Return the token claims, or None when the signature, expiry or
    format is invalid.
    """
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.InvalidTokenError:
        return None
