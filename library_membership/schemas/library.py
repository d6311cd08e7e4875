# File: library_membership/schemas/library.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class LibraryBase(BaseModel):
    name: str
    floor_count: int = 0
    floor_area: Optional[float] = None


class LibraryCreate(LibraryBase):
    pass


class LibraryUpdate(BaseModel):
    name: Optional[str] = None
    floor_count: Optional[int] = None
    floor_area: Optional[float] = None


class LibraryRead(LibraryBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
