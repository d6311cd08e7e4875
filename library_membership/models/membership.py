# File: library_membership/models/membership.py

"""
Membership model: "user is a member of library".

At most one row per (user_id, library_id); the unique constraint is
what keeps concurrent joins for the same pair from both inserting.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_membership.models.base import Base

if TYPE_CHECKING:
    from library_membership.models.library import Library
    from library_membership.models.user import User


class Membership(Base):
    __tablename__ = "memberships"
    __table_args__ = (
        UniqueConstraint("user_id", "library_id", name="uq_memberships_user_library"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    library_id: Mapped[int] = mapped_column(
        ForeignKey("libraries.id", ondelete="CASCADE"), index=True, nullable=False
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    user: Mapped[User] = relationship(back_populates="memberships")
    library: Mapped[Library] = relationship(back_populates="memberships")
