# File: library_membership/api/deps.py

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, HTTPException, Path, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from library_membership.core.security import decode_access_token
from library_membership.db.session import SessionLocal
from library_membership.models.base import MAX_INTEGER
from library_membership.models.user import User


# Ids outside this range cannot exist in the database
IdPath = Annotated[int, Path(ge=1, le=MAX_INTEGER)]

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the acting user from the ``Authorization: Bearer`` token.

    Routes receive the user as a parameter and hand it to the services;
    nothing downstream looks identity up on its own.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise _unauthorized("Invalid or expired token")

    try:
        user_id = int(payload.get("sub", ""))
    except (TypeError, ValueError):
        raise _unauthorized("Invalid or expired token")

    user = db.get(User, user_id) if 0 < user_id <= MAX_INTEGER else None
    if user is None:
        raise _unauthorized("User no longer exists")
    return user
