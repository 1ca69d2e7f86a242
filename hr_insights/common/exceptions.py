# hr_insights/common/exceptions.py
"""
Custom exceptions for the analytics engine.
Provides specific error types for record validation, aggregation and report lookup.
"""

from typing import Optional, Dict, Any, Iterable


class AnalyticsError(Exception):
    """Base exception for all analytics errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidRecordError(AnalyticsError):
    """Exception raised when an employee record is malformed or breaks an invariant."""

    def __init__(
        self,
        message: str,
        row_index: Optional[int] = None,
        employee_number: Optional[Any] = None,
        field_errors: Optional[Dict[str, str]] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if row_index is not None:
            details["row_index"] = row_index
        if employee_number is not None:
            details["employee_number"] = employee_number
        if field_errors:
            details["field_errors"] = field_errors
        super().__init__(message, details=details, **kwargs)
        self.row_index = row_index
        self.employee_number = employee_number
        self.field_errors = field_errors or {}


class EmptyGroupError(AnalyticsError):
    """Exception raised when an aggregate is requested over a group with zero rows."""

    def __init__(
        self,
        message: str,
        group_key: Optional[str] = None,
        group_value: Optional[Any] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if group_key:
            details["group_key"] = group_key
        if group_value is not None:
            details["group_value"] = group_value
        super().__init__(message, details=details, **kwargs)


class EmptyDatasetError(AnalyticsError):
    """Exception raised when a global aggregate is requested over an empty dataset."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if operation:
            details["operation"] = operation
        super().__init__(message, details=details, **kwargs)


class UnknownGroupKeyError(AnalyticsError):
    """Exception raised when a caller groups by a dimension that is not defined."""

    def __init__(
        self,
        message: str,
        group_key: Optional[Any] = None,
        available: Optional[Iterable[str]] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if group_key is not None:
            details["group_key"] = group_key
        if available:
            details["available"] = sorted(available)
        super().__init__(message, details=details, **kwargs)


class UnknownReportError(AnalyticsError):
    """Exception raised when a report name is not in the catalogue."""

    def __init__(
        self,
        message: str,
        report_name: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if report_name:
            details["report_name"] = report_name
        super().__init__(message, details=details, **kwargs)


class DataSourceError(AnalyticsError):
    """Exception raised when the employee data source cannot be read."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if source:
            details["source"] = source
        super().__init__(message, details=details, **kwargs)
