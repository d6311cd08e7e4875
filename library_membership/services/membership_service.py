# File: library_membership/services/membership_service.py

"""
Membership service: who belongs to which library.

Rules:
  - A request may only create or remove a membership for the acting
    user. Any other target is rejected before anything is read or
    written.
  - There is at most one membership per (user, library). Joining twice
    returns the existing row; the unique constraint on the table backs
    this up when two joins race.
"""

import logging
from typing import NamedTuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from library_membership.core.errors import AuthorizationError, NotFoundError
from library_membership.models.library import Library
from library_membership.models.membership import Membership
from library_membership.models.user import User
from library_membership.services.library_service import get_library
from library_membership.services.user_service import get_user

logger = logging.getLogger(__name__)


class JoinResult(NamedTuple):
    membership: Membership
    created: bool


def _find_membership(db: Session, user_id: int, library_id: int) -> Membership | None:
    return db.scalar(
        select(Membership).where(
            Membership.user_id == user_id,
            Membership.library_id == library_id,
        )
    )


def _ensure_self(acting_user: User, target_user_id: int, message: str) -> None:
    if acting_user.id != target_user_id:
        logger.warning(
            "User %s rejected acting on memberships of user %s",
            acting_user.id,
            target_user_id,
        )
        raise AuthorizationError(message)


def list_libraries_for_user(db: Session, user_id: int) -> list[Library]:
    return list(get_user(db, user_id).libraries)


def list_members(db: Session, library_id: int) -> list[User]:
    return list(get_library(db, library_id).users)


def join_library(db: Session, *, acting_user: User, library_id: int) -> JoinResult:
    """
    Make ``acting_user`` a member of ``library_id``.

    Returns the membership and whether this call created it. Raises
    NotFoundError when the library does not exist.
    """
    get_library(db, library_id)
    user_id = acting_user.id

    existing = _find_membership(db, user_id, library_id)
    if existing is not None:
        return JoinResult(existing, False)

    membership = Membership(user_id=user_id, library_id=library_id)
    db.add(membership)
    try:
        db.commit()
    except IntegrityError:
        # another request inserted the same pair first
        db.rollback()
        existing = _find_membership(db, user_id, library_id)
        if existing is None:
            raise
        return JoinResult(existing, False)

    db.refresh(membership)
    logger.info("User %s joined library %s", user_id, library_id)
    return JoinResult(membership, True)


def create_membership(
    db: Session,
    *,
    acting_user: User,
    target_user_id: int,
    library_id: int,
) -> JoinResult:
    """
    Create a membership for ``target_user_id`` in ``library_id``.

    ``target_user_id`` must be the acting user's own id; anything else
    raises AuthorizationError and leaves the table untouched.
    """
    _ensure_self(acting_user, target_user_id, "A user cannot enroll another user.")
    return join_library(db, acting_user=acting_user, library_id=library_id)


def leave_library(
    db: Session,
    *,
    acting_user: User,
    target_user_id: int,
    library_id: int,
) -> None:
    _ensure_self(acting_user, target_user_id, "A user cannot remove another user's membership.")
    get_library(db, library_id)

    membership = _find_membership(db, target_user_id, library_id)
    if membership is None:
        raise NotFoundError(f"User {target_user_id} is not a member of library {library_id}.")

    db.delete(membership)
    db.commit()
    logger.info("User %s left library %s", target_user_id, library_id)
