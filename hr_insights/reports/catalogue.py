# hr_insights/reports/catalogue.py
"""
Report catalogue - the named reports the dashboard consumes.

Names and output columns are a contract with the dashboard and must stay
stable. Every report declares its ordering explicitly: a list of
(column, ascending) pairs passed to the report builder.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import pandas as pd

from hr_insights.common.exceptions import UnknownReportError
from hr_insights.dataset.columns import (
    ATTRITION,
    DEPARTMENT,
    DISTANCE_FROM_HOME,
    EDUCATION_FIELD,
    GENDER,
    JOB_ROLE,
    MARITAL_STATUS,
    MONTHLY_INCOME,
    OVERTIME,
    PERFORMANCE_RATING,
    TRAINING_TIMES_LAST_YEAR,
    WORK_LIFE_BALANCE,
    YEARS_AT_COMPANY,
)
from hr_insights.reports.aggregations import (
    ATTRITION_PERCENTAGE,
    AVG_YEARS_SINCE_PROMOTION,
    Order,
    apply_order,
    attrition_rate,
    average_by,
    count_by,
    overall_attrition_rate,
    overall_average,
    promotion_wait_by_role,
    top_per_group,
)
from hr_insights.reports.bucketing import AGE_GROUP_COLUMN
from hr_insights.reports.outliers import (
    long_tenure_low_pay_leavers,
    short_tenure_high_pay,
    underpaid_high_performers,
)

ROLE_COUNT = "Role_count"
SAMPLE_SIZE = 10

# Report sections, in dashboard page order
SETUP = "Table structure checks"
MISMATCHES = "Salary & performance mismatches"
PROMOTION = "Promotion wait time"
ROLES = "Job role distribution"
GENERAL = "General employee metrics"
ATTRITION_SECTION = "Employee attrition analysis"
SALARY = "Salary analysis"
TENURE = "Tenure and education overview"

PERCENTAGE_DESC = [(ATTRITION_PERCENTAGE, False)]


@dataclass(frozen=True)
class ReportDefinition:
    """A named report: how to build it and how its rows are ordered."""
    name: str
    title: str
    section: str
    build: Callable[[pd.DataFrame, Optional[Order]], pd.DataFrame]
    order: Optional[Order] = None
    global_aggregate: bool = False

    def run(self, frame: pd.DataFrame) -> pd.DataFrame:
        return self.build(frame, self.order)


def _by_key(column: str) -> Order:
    return [(column, True)]


def sample_records(frame: pd.DataFrame, order: Optional[Order] = None) -> pd.DataFrame:
    """First rows of the table, for a quick look at the data."""
    return frame.head(SAMPLE_SIZE).reset_index(drop=True)


def column_details(frame: pd.DataFrame, order: Optional[Order] = None) -> pd.DataFrame:
    """Column names, dtypes and non-null counts."""
    return pd.DataFrame({
        "Column_Name": list(frame.columns),
        "Data_Type": [str(dtype) for dtype in frame.dtypes],
        "Non_Null_Count": [int(frame[col].notna().sum()) for col in frame.columns],
    })


def most_common_role_per_department(frame: pd.DataFrame, order: Optional[Order] = None) -> pd.DataFrame:
    counts = count_by(frame, "department", "job_role", column=ROLE_COUNT)
    top = top_per_group(counts, DEPARTMENT, ROLE_COUNT)
    return apply_order(top, order)


_DEFINITIONS: List[ReportDefinition] = [
    # Table structure checks
    ReportDefinition(
        "sample_records", "First 10 employee records", SETUP,
        sample_records,
    ),
    ReportDefinition(
        "column_details", "Column details of the employee table", SETUP,
        column_details,
    ),

    # Salary & performance mismatches
    ReportDefinition(
        "underpaid_high_performers", "High performers paid at or below average", MISMATCHES,
        lambda frame, order: underpaid_high_performers(frame),
    ),
    ReportDefinition(
        "long_tenure_low_pay_leavers", "Long-tenured leavers paid below average", MISMATCHES,
        lambda frame, order: long_tenure_low_pay_leavers(frame),
    ),
    ReportDefinition(
        "short_tenure_high_pay", "Short tenure but paid at or above average", MISMATCHES,
        lambda frame, order: short_tenure_high_pay(frame),
    ),

    # Promotion wait time
    ReportDefinition(
        "promotion_wait_by_role", "Average years since last promotion by job role", PROMOTION,
        lambda frame, order: promotion_wait_by_role(frame, order=order),
        order=[(AVG_YEARS_SINCE_PROMOTION, True)],
    ),

    # Job role distribution
    ReportDefinition(
        "role_distribution_by_department", "Employees per job role in each department", ROLES,
        lambda frame, order: count_by(frame, "department", "job_role", column=ROLE_COUNT, order=order),
        order=[(ROLE_COUNT, True)],
    ),
    ReportDefinition(
        "most_common_role_per_department", "Most common job role in each department", ROLES,
        most_common_role_per_department,
        order=_by_key(DEPARTMENT),
    ),

    # General employee metrics
    ReportDefinition(
        "employees_by_performance_rating", "Employees by performance rating", GENERAL,
        lambda frame, order: count_by(frame, "performance_rating", order=order),
        order=_by_key(PERFORMANCE_RATING),
    ),
    ReportDefinition(
        "work_life_balance_distribution", "Distribution of work-life balance ratings", GENERAL,
        lambda frame, order: count_by(frame, "work_life_balance", order=order),
        order=_by_key(WORK_LIFE_BALANCE),
    ),
    ReportDefinition(
        "overtime_distribution", "Employees working overtime", GENERAL,
        lambda frame, order: count_by(frame, "overtime", order=order),
        order=_by_key(OVERTIME),
    ),
    ReportDefinition(
        "training_frequency_distribution", "Distribution of trainings last year", GENERAL,
        lambda frame, order: count_by(frame, "training_times_last_year", order=order),
        order=_by_key(TRAINING_TIMES_LAST_YEAR),
    ),

    # Employee attrition analysis
    ReportDefinition(
        "overall_attrition", "Overall attrition rate", ATTRITION_SECTION,
        lambda frame, order: overall_attrition_rate(frame),
        global_aggregate=True,
    ),
    ReportDefinition(
        "attrition_by_age_band", "Attrition by age band", ATTRITION_SECTION,
        lambda frame, order: attrition_rate(frame, "age_band", order=order),
        order=_by_key(AGE_GROUP_COLUMN),
    ),
    ReportDefinition(
        "attrition_by_department", "Attrition by department", ATTRITION_SECTION,
        lambda frame, order: attrition_rate(frame, "department", order=order),
        order=_by_key(DEPARTMENT),
    ),
    ReportDefinition(
        "attrition_by_gender", "Attrition by gender", ATTRITION_SECTION,
        lambda frame, order: attrition_rate(frame, "gender", order=order),
        order=_by_key(GENDER),
    ),
    ReportDefinition(
        "attrition_by_marital_status", "Attrition by marital status", ATTRITION_SECTION,
        lambda frame, order: attrition_rate(frame, "marital_status", order=order),
        order=_by_key(MARITAL_STATUS),
    ),
    ReportDefinition(
        "commute_distance_by_attrition", "Average commute distance of leavers vs stayers", ATTRITION_SECTION,
        lambda frame, order: average_by(
            frame, "attrition", DISTANCE_FROM_HOME,
            column="Distance_From_Home", include_count=True, order=order,
        ),
        order=_by_key(ATTRITION),
    ),
    ReportDefinition(
        "attrition_by_education_field", "Attrition by education field", ATTRITION_SECTION,
        lambda frame, order: attrition_rate(frame, "education_field", order=order),
        order=PERCENTAGE_DESC,
    ),
    ReportDefinition(
        "attrition_by_job_level", "Attrition by job level", ATTRITION_SECTION,
        lambda frame, order: attrition_rate(frame, "job_level", order=order),
        order=PERCENTAGE_DESC,
    ),
    ReportDefinition(
        "attrition_by_work_life_balance", "Attrition by work-life balance", ATTRITION_SECTION,
        lambda frame, order: attrition_rate(frame, "work_life_balance", order=order),
        order=PERCENTAGE_DESC,
    ),
    ReportDefinition(
        "attrition_by_performance_rating", "Attrition by performance rating", ATTRITION_SECTION,
        lambda frame, order: attrition_rate(frame, "performance_rating", order=order),
        order=PERCENTAGE_DESC,
    ),
    ReportDefinition(
        "attrition_by_environment_satisfaction", "Attrition by environment satisfaction", ATTRITION_SECTION,
        lambda frame, order: attrition_rate(frame, "environment_satisfaction", order=order),
        order=PERCENTAGE_DESC,
    ),

    # Salary analysis
    ReportDefinition(
        "overall_average_salary", "Average monthly salary", SALARY,
        lambda frame, order: overall_average(frame, MONTHLY_INCOME, column="AVG_Monthly_Salary"),
        global_aggregate=True,
    ),
    ReportDefinition(
        "average_salary_by_department", "Average monthly salary by department", SALARY,
        lambda frame, order: average_by(frame, "department", MONTHLY_INCOME, column="Avg_Monthly_Salary", order=order),
        order=_by_key(DEPARTMENT),
    ),
    ReportDefinition(
        "average_salary_by_education_field", "Average monthly salary by education field", SALARY,
        lambda frame, order: average_by(frame, "education_field", MONTHLY_INCOME, column="Monthly_Salary", order=order),
        order=_by_key(EDUCATION_FIELD),
    ),
    ReportDefinition(
        "average_salary_by_gender", "Average monthly salary by gender", SALARY,
        lambda frame, order: average_by(frame, "gender", MONTHLY_INCOME, column="Monthly_Salary", order=order),
        order=_by_key(GENDER),
    ),
    ReportDefinition(
        "average_salary_by_job_role", "Average monthly salary by job role", SALARY,
        lambda frame, order: average_by(frame, "job_role", MONTHLY_INCOME, column="Monthly_Salary", order=order),
        order=_by_key(JOB_ROLE),
    ),

    # Tenure and education overview
    ReportDefinition(
        "tenure_by_department", "Average years at company by department", TENURE,
        lambda frame, order: average_by(
            frame, "department", YEARS_AT_COMPANY,
            column="Years_At_Company", include_count=True, order=order,
        ),
        order=_by_key(DEPARTMENT),
    ),
    ReportDefinition(
        "employees_by_education_field", "Employees by education field", TENURE,
        lambda frame, order: count_by(frame, "education_field", order=order),
        order=_by_key(EDUCATION_FIELD),
    ),
]

REPORTS: Dict[str, ReportDefinition] = {definition.name: definition for definition in _DEFINITIONS}


def report_names() -> List[str]:
    """All report names in catalogue order."""
    return list(REPORTS)


def get_report(name: str) -> ReportDefinition:
    """
    Look up a report by name.

    Raises:
        UnknownReportError: If no report has that name
    """
    try:
        return REPORTS[name]
    except KeyError:
        raise UnknownReportError(f"Unknown report '{name}'", report_name=name) from None
