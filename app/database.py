"""
PostgreSQL connection handle.
The engine is configured from DATABASE_URL but no route queries it yet.
"""

import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def create_db_engine(database_url: Optional[str]) -> Optional[Engine]:
    """
    Create a SQLAlchemy engine for database_url, or None when it is unset.
    Creating the engine does not open a connection.
    """
    if not database_url:
        logger.info("DATABASE_URL not set, database disabled")
        return None

    # SQLAlchemy dropped the "postgres" dialect alias
    if database_url.startswith("postgres://"):
        database_url = "postgresql://" + database_url[len("postgres://"):]

    return create_engine(database_url, pool_pre_ping=True, future=True)
