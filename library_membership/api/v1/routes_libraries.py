# File: library_membership/api/v1/routes_libraries.py

"""
Library catalog endpoints, plus the per-library member list and the
self-service join / leave routes.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from library_membership.api.deps import IdPath, get_current_user, get_db
from library_membership.core.errors import AuthorizationError, NotFoundError, ValidationError
from library_membership.models.user import User
from library_membership.schemas.library import LibraryCreate, LibraryRead, LibraryUpdate
from library_membership.schemas.membership import MembershipRead
from library_membership.schemas.user import UserRead
from library_membership.services import library_service, membership_service

router = APIRouter()


@router.get("/", response_model=list[LibraryRead], summary="List libraries")
def list_libraries(db: Session = Depends(get_db)):
    return library_service.list_libraries(db)


@router.post(
    "/",
    response_model=LibraryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create library",
)
def create_library(
    payload: LibraryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        return library_service.create_library(db, **payload.model_dump())
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)


@router.get("/{library_id}", response_model=LibraryRead, summary="Get library")
def read_library(library_id: IdPath, db: Session = Depends(get_db)):
    try:
        return library_service.get_library(db, library_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.patch("/{library_id}", response_model=LibraryRead, summary="Update library")
def update_library(
    library_id: IdPath,
    payload: LibraryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        return library_service.update_library(
            db, library_id, payload.model_dump(exclude_unset=True)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.message)


@router.delete(
    "/{library_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete library",
)
def delete_library(
    library_id: IdPath,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        library_service.delete_library(db, library_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---------- MEMBERS ----------

@router.get(
    "/{library_id}/users",
    response_model=list[UserRead],
    summary="List members of a library",
)
def list_members(library_id: IdPath, db: Session = Depends(get_db)):
    try:
        return membership_service.list_members(db, library_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.post(
    "/{library_id}/users",
    response_model=MembershipRead,
    status_code=status.HTTP_201_CREATED,
    summary="Join a library as the current user",
)
def join_library(
    library_id: IdPath,
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Add the current user to the library.

    201 when the membership was created, 200 when it already existed.
    """
    try:
        result = membership_service.join_library(
            db, acting_user=current_user, library_id=library_id
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    if not result.created:
        response.status_code = status.HTTP_200_OK
    return MembershipRead.from_join(result.membership, result.created)


@router.delete(
    "/{library_id}/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Leave a library",
)
def leave_library(
    library_id: IdPath,
    user_id: IdPath,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        membership_service.leave_library(
            db, acting_user=current_user, target_user_id=user_id, library_id=library_id
        )
    except AuthorizationError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
