# File: library_membership/services/library_service.py

"""
Library catalog service.

Create / list / read / update / delete for libraries. Deleting a library
takes its memberships with it.
"""

import logging
import math
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from library_membership.core.errors import NotFoundError, ValidationError
from library_membership.models.base import MAX_INTEGER
from library_membership.models.library import Library

logger = logging.getLogger(__name__)


def _clean_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Library name must not be empty.")
    return name


def _check_floor_count(floor_count: Any) -> int:
    if isinstance(floor_count, bool) or not isinstance(floor_count, int):
        raise ValidationError("Floor count must be a non-negative integer.")
    if not 0 <= floor_count <= MAX_INTEGER:
        raise ValidationError(f"Floor count must be between 0 and {MAX_INTEGER}.")
    return floor_count


def _check_floor_area(floor_area: Any) -> Optional[float]:
    if floor_area is None:
        return None
    if isinstance(floor_area, bool) or not isinstance(floor_area, (int, float)):
        raise ValidationError("Floor area must be a non-negative number.")
    try:
        floor_area = float(floor_area)
    except OverflowError:
        raise ValidationError("Floor area is too large.")
    # inf and nan would not survive a round-trip through the database
    if not math.isfinite(floor_area) or floor_area < 0:
        raise ValidationError("Floor area must be a finite, non-negative number.")
    return floor_area


def create_library(
    db: Session,
    *,
    name: str,
    floor_count: int = 0,
    floor_area: Optional[float] = None,
) -> Library:
    library = Library(
        name=_clean_name(name),
        floor_count=_check_floor_count(floor_count),
        floor_area=_check_floor_area(floor_area),
    )
    db.add(library)
    db.commit()
    db.refresh(library)
    logger.info("Created library %s (%r)", library.id, library.name)
    return library


def list_libraries(db: Session) -> list[Library]:
    return list(db.scalars(select(Library).order_by(Library.id)))


def get_library(db: Session, library_id: int) -> Library:
    library = db.get(Library, library_id) if 0 < library_id <= MAX_INTEGER else None
    if library is None:
        raise NotFoundError(f"Library {library_id} not found.")
    return library


def update_library(db: Session, library_id: int, changes: dict[str, Any]) -> Library:
    """
    Apply a partial update. Keys missing from ``changes`` are left alone;
    the same rules as ``create_library`` apply to the ones present.
    """
    library = get_library(db, library_id)

    checks = {
        "name": _clean_name,
        "floor_count": _check_floor_count,
        "floor_area": _check_floor_area,
    }
    # validate everything before touching the row
    values = {key: check(changes[key]) for key, check in checks.items() if key in changes}
    for key, value in values.items():
        setattr(library, key, value)

    db.commit()
    db.refresh(library)
    logger.info("Updated library %s", library.id)
    return library


def delete_library(db: Session, library_id: int) -> None:
    library = get_library(db, library_id)
    db.delete(library)
    db.commit()
    logger.info("Deleted library %s", library_id)
