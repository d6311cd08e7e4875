# File: library_membership/models/user.py

"""
User model.

A user exclusively owns its memberships: deleting the user deletes
every membership row that references it.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_membership.models.base import Base

if TYPE_CHECKING:
    from library_membership.models.library import Library
    from library_membership.models.membership import Membership


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, index=True, nullable=False)

    # bcrypt hash, never the plaintext
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    memberships: Mapped[list[Membership]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Membership.id",
    )
    libraries: Mapped[list[Library]] = relationship(
        secondary="memberships",
        viewonly=True,
        order_by="Membership.id",
    )
