# db/db_utils.py
"""Database engine helpers for the EmployeeData source."""

import logging
from functools import lru_cache
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from db.models import Base
from hr_insights import config

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _cached_engine(url: str) -> Engine:
    logger.info(f"Creating database engine for {make_safe_url(url)}")
    return create_engine(url, pool_pre_ping=True)


def make_safe_url(url: str) -> str:
    """Hide the password part of a database URL for logging."""
    if "@" not in url or "://" not in url:
        return url
    scheme, rest = url.split("://", 1)
    credentials, host = rest.rsplit("@", 1)
    user = credentials.split(":", 1)[0]
    return f"{scheme}://{user}:***@{host}"


def get_engine(url: Optional[str] = None) -> Engine:
    """
    Get a SQLAlchemy engine for the configured (or given) database URL.
    Engines are cached per URL.
    """
    return _cached_engine(url or config.DATABASE_URL)


def create_employee_table(engine: Engine) -> None:
    """Create the EmployeeData table. Used for local fixtures; production tables already exist."""
    Base.metadata.create_all(engine)
    logger.info("EmployeeData table created or already exists")
