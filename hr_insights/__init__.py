# hr_insights/__init__.py
"""
HR Insights - attrition, salary and tenure reports over the EmployeeData table.

This package is organised in two layers:
- Dataset: load the table (SQL or CSV export), clean and validate records
- Reports: grouped/global aggregations and the named report catalogue

Usage:
    from hr_insights import run_insights
    results = run_insights(csv_path="EmployeeData.csv")

    # Or run individual pieces:
    from hr_insights.dataset import load_csv
    from hr_insights.reports import attrition_rate
    dataset = load_csv("EmployeeData.csv")
    attrition_rate(dataset.frame, "department")
"""

__version__ = "1.0.0"

# Main entry point
from hr_insights.orchestrator import run_insights

# Layer exports
from hr_insights.dataset import EmployeeDataset, build_dataset, load_csv, load_table, load_dataset
from hr_insights.reports import run_report, run_reports, export_results, get_report, report_names
from hr_insights.common import (
    AnalyticsError,
    InvalidRecordError,
    EmptyGroupError,
    EmptyDatasetError,
    UnknownGroupKeyError,
    UnknownReportError,
    DataSourceError,
)

__all__ = [
    # Version
    "__version__",
    # Main orchestrator
    "run_insights",
    # Dataset layer
    "EmployeeDataset",
    "build_dataset",
    "load_csv",
    "load_table",
    "load_dataset",
    # Report layer
    "run_report",
    "run_reports",
    "export_results",
    "get_report",
    "report_names",
    # Errors
    "AnalyticsError",
    "InvalidRecordError",
    "EmptyGroupError",
    "EmptyDatasetError",
    "UnknownGroupKeyError",
    "UnknownReportError",
    "DataSourceError",
]
