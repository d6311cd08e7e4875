# File: library_membership/api/v1/routes_memberships.py

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from library_membership.api.deps import get_current_user, get_db
from library_membership.core.errors import AuthorizationError, NotFoundError
from library_membership.models.user import User
from library_membership.schemas.membership import MembershipCreate, MembershipRead
from library_membership.services import membership_service

router = APIRouter()


@router.post(
    "/",
    response_model=MembershipRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create membership",
)
def create_membership(
    payload: MembershipCreate,
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Enroll ``user_id`` in ``library_id``.

    ``user_id`` has to be the caller's own id; enrolling someone else is
    a 403 and nothing is written.
    """
    try:
        result = membership_service.create_membership(
            db,
            acting_user=current_user,
            target_user_id=payload.user_id,
            library_id=payload.library_id,
        )
    except AuthorizationError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    if not result.created:
        response.status_code = status.HTTP_200_OK
    return MembershipRead.from_join(result.membership, result.created)
