# File: library_membership/schemas/membership.py

from datetime import datetime

from pydantic import BaseModel, Field

from library_membership.models.base import MAX_INTEGER


class MembershipCreate(BaseModel):
    user_id: int = Field(ge=1, le=MAX_INTEGER)
    library_id: int = Field(ge=1, le=MAX_INTEGER)


class MembershipRead(BaseModel):
    id: int
    user_id: int
    library_id: int
    created_at: datetime

    # False when the membership already existed before this request
    created: bool = True

    class Config:
        from_attributes = True

    @classmethod
    def from_join(cls, membership, created: bool) -> "MembershipRead":
        return cls.model_validate(membership).model_copy(update={"created": created})
