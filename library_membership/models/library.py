# File: library_membership/models/library.py

"""
Library model.

Floor count and floor area are stored as given; beyond being
non-negative they carry no rules.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Float, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_membership.models.base import Base

if TYPE_CHECKING:
    from library_membership.models.membership import Membership
    from library_membership.models.user import User


class Library(Base):
    __tablename__ = "libraries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    floor_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    floor_area: Mapped[float | None] = mapped_column(Float, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
    )

    memberships: Mapped[list[Membership]] = relationship(
        back_populates="library",
        cascade="all, delete-orphan",
        order_by="Membership.id",
    )
    users: Mapped[list[User]] = relationship(
        secondary="memberships",
        viewonly=True,
        order_by="Membership.id",
    )
