"""
Report layer - aggregations, outlier detection and the named report catalogue.
"""

from hr_insights.reports.bucketing import (
    bucketize_age,
    age_band_series,
    AGE_BANDS,
    AGE_BAND_LABELS,
    AGE_GROUP_COLUMN,
)
from hr_insights.reports.aggregations import (
    attrition_rate,
    overall_attrition_rate,
    average_by,
    overall_average,
    count_by,
    promotion_wait_by_role,
    top_per_group,
    percentage,
    DIMENSIONS,
)
from hr_insights.reports.outliers import (
    OutlierCriteria,
    compensation_outliers,
    underpaid_high_performers,
    long_tenure_low_pay_leavers,
    short_tenure_high_pay,
)
from hr_insights.reports.catalogue import ReportDefinition, REPORTS, get_report, report_names
from hr_insights.reports.runner import ReportResult, run_report, run_reports, export_results

__all__ = [
    "bucketize_age",
    "age_band_series",
    "AGE_BANDS",
    "AGE_BAND_LABELS",
    "AGE_GROUP_COLUMN",
    "attrition_rate",
    "overall_attrition_rate",
    "average_by",
    "overall_average",
    "count_by",
    "promotion_wait_by_role",
    "top_per_group",
    "percentage",
    "DIMENSIONS",
    "OutlierCriteria",
    "compensation_outliers",
    "underpaid_high_performers",
    "long_tenure_low_pay_leavers",
    "short_tenure_high_pay",
    "ReportDefinition",
    "REPORTS",
    "get_report",
    "report_names",
    "ReportResult",
    "run_report",
    "run_reports",
    "export_results",
]
