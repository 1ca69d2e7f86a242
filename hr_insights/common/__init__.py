# hr_insights/common/__init__.py
"""
Common utilities shared across the dataset and report layers.
Includes logging and custom exceptions.
"""

from hr_insights.common.exceptions import (
    AnalyticsError,
    InvalidRecordError,
    EmptyGroupError,
    EmptyDatasetError,
    UnknownGroupKeyError,
    UnknownReportError,
    DataSourceError,
)
from hr_insights.common.logging import configure_logging, get_logger, create_run_log_file

__all__ = [
    # Exceptions
    "AnalyticsError",
    "InvalidRecordError",
    "EmptyGroupError",
    "EmptyDatasetError",
    "UnknownGroupKeyError",
    "UnknownReportError",
    "DataSourceError",
    # Logging
    "configure_logging",
    "get_logger",
    "create_run_log_file",
]
