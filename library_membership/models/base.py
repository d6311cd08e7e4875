# File: library_membership/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models (User, Library, Membership).
    """
    pass


# Largest value an INTEGER column holds (signed 64-bit)
MAX_INTEGER = 2**63 - 1
