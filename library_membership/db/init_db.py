"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata
before create_all runs.
"""

import logging

from sqlalchemy.engine import Engine

from library_membership.db.session import engine
from library_membership.models.base import Base
from library_membership.models import library, membership, user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(bind: Engine = engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    logger.info("Creating tables on %s", bind.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=bind)
