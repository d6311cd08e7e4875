# File: library_membership/api/v1/routes_auth.py

"""
Auth API routes: register, login, and "who am I".
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from library_membership.api.deps import get_current_user, get_db
from library_membership.core.errors import AuthenticationError, ConflictError, ValidationError
from library_membership.models.user import User
from library_membership.schemas.user import Token, UserCreate, UserLogin, UserRead
from library_membership.services import auth_service, user_service

router = APIRouter()


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="User registration",
)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    try:
        return user_service.register_user(db, email=payload.email, password=payload.password)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)


@router.post("/login", response_model=Token, summary="User login")
def login(payload: UserLogin, db: Session = Depends(get_db)):
    """
    Exchange email + password for a bearer token.

    Unknown email and wrong password produce the same 401.
    """
    try:
        token = auth_service.login(db, email=payload.email, password=payload.password)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=token)


@router.get("/me", response_model=UserRead, summary="Current user")
def read_me(current_user: User = Depends(get_current_user)):
    return current_user
