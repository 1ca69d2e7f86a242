# api/database.py
"""Dataset dependency for FastAPI."""

import logging
from functools import lru_cache

from fastapi import HTTPException

from hr_insights.common.exceptions import DataSourceError, InvalidRecordError
from hr_insights.dataset.loader import load_dataset
from hr_insights.dataset.snapshot import EmployeeDataset

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _snapshot() -> EmployeeDataset:
    logger.info("Loading employee snapshot for the API")
    return load_dataset()


def get_dataset() -> EmployeeDataset:
    """
    FastAPI dependency that provides the employee snapshot.
    The snapshot is loaded once and shared read-only by every request.

    A source that cannot be read gives 503; a malformed record under the
    abort policy gives 422. Failed loads are not cached.
    """
    try:
        return _snapshot()
    except DataSourceError as e:
        logger.error(f"Employee snapshot unavailable: {e}")
        raise HTTPException(status_code=503, detail=e.message)
    except InvalidRecordError as e:
        logger.error(f"Employee snapshot rejected: {e}")
        raise HTTPException(status_code=422, detail=str(e))


def reload_dataset() -> EmployeeDataset:
    """Drop the cached snapshot and load a fresh one."""
    _snapshot.cache_clear()
    return _snapshot()
