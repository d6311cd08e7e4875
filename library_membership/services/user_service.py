# File: library_membership/services/user_service.py

"""
User registration, lookup and deletion.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from library_membership.core.errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from library_membership.core.security import BCRYPT_MAX_BYTES, hash_password
from library_membership.models.base import MAX_INTEGER
from library_membership.models.user import User
from library_membership.services.auth_service import normalize_email

logger = logging.getLogger(__name__)


def register_user(db: Session, *, email: str, password: str) -> User:
    if not password:
        raise ValidationError("Password must not be empty.")
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValidationError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes.")

    user = User(email=normalize_email(email), password_hash=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("A user with this email already exists.")

    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return user


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id) if 0 < user_id <= MAX_INTEGER else None
    if user is None:
        raise NotFoundError(f"User {user_id} not found.")
    return user


def delete_user(db: Session, *, acting_user: User, user_id: int) -> None:
    """
    Delete ``user_id`` and, through the cascade, all of its memberships.

    Only the user themselves may do this.
    """
    if acting_user.id != user_id:
        logger.warning("User %s tried to delete user %s", acting_user.id, user_id)
        raise AuthorizationError("A user cannot delete another user.")

    user = get_user(db, user_id)
    db.delete(user)
    db.commit()
    logger.info("Deleted user %s", user_id)
