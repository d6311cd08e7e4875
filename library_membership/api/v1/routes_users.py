# File: library_membership/api/v1/routes_users.py

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from library_membership.api.deps import IdPath, get_current_user, get_db
from library_membership.core.errors import AuthorizationError, NotFoundError
from library_membership.models.user import User
from library_membership.schemas.library import LibraryRead
from library_membership.schemas.user import UserRead
from library_membership.services import membership_service, user_service

router = APIRouter()


@router.get("/{user_id}", response_model=UserRead, summary="Get user")
def read_user(user_id: IdPath, db: Session = Depends(get_db)):
    try:
        return user_service.get_user(db, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete own account",
)
def delete_user(
    user_id: IdPath,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Delete the caller's own account together with all of its memberships.
    """
    try:
        user_service.delete_user(db, acting_user=current_user, user_id=user_id)
    except AuthorizationError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{user_id}/libraries",
    response_model=list[LibraryRead],
    summary="List libraries a user belongs to",
)
def list_user_libraries(user_id: IdPath, db: Session = Depends(get_db)):
    try:
        return membership_service.list_libraries_for_user(db, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
