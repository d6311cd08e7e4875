# File: library_membership/services/auth_service.py

"""
Authentication service.

  - User lookup by email
  - bcrypt password verification
  - Access token issuing

An unknown email and a wrong password fail with the same error and the
same message, and both pay for one bcrypt check.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from library_membership.core.errors import AuthenticationError
from library_membership.core.security import (
    create_access_token,
    dummy_password_hash,
    verify_password,
)
from library_membership.models.user import User

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."


def normalize_email(email: str) -> str:
    return email.strip().lower()


def authenticate_user(
    db: Session,
    *,
    email: str,
    password: str,
) -> User:
    """
    Return the user whose stored hash verifies ``password``.

    Raises AuthenticationError otherwise, without saying which part
    of the credentials was wrong.
    """
    user = db.scalar(select(User).where(User.email == normalize_email(email)))

    if user is None:
        verify_password(password, dummy_password_hash())
        logger.warning("Failed login attempt")
        raise AuthenticationError(INVALID_CREDENTIALS)

    if not verify_password(password, user.password_hash):
        logger.warning("Failed login attempt")
        raise AuthenticationError(INVALID_CREDENTIALS)

    return user


def login(db: Session, *, email: str, password: str) -> str:
    user = authenticate_user(db, email=email, password=password)
    logger.info("User %s logged in", user.id)
    return create_access_token({"sub": str(user.id)})
