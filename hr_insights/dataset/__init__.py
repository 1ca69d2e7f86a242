"""
Dataset layer - loading, cleaning and validating the employee snapshot.
"""

from hr_insights.dataset.snapshot import EmployeeDataset
from hr_insights.dataset.schema import EmployeeRecord
from hr_insights.dataset.validator import (
    build_dataset,
    validate_records,
    summarize_dataset,
    ValidationReport,
    ValidationResult,
)
from hr_insights.dataset.loader import load_csv, load_table, load_dataset
from hr_insights.dataset.columns import CANONICAL_COLUMNS, prepare_frame

__all__ = [
    "EmployeeDataset",
    "EmployeeRecord",
    "build_dataset",
    "validate_records",
    "summarize_dataset",
    "ValidationReport",
    "ValidationResult",
    "load_csv",
    "load_table",
    "load_dataset",
    "CANONICAL_COLUMNS",
    "prepare_frame",
]
