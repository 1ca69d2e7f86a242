"""
Salary & performance mismatches.

Finds employees whose pay looks out of line with their rating or tenure by
comparing MonthlyIncome with the dataset-wide mean. The mean is computed once
per call so every record is compared against the same threshold.
"""

import logging
import operator
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

import pandas as pd

from hr_insights import config
from hr_insights.dataset.columns import (
    ATTRITION,
    DEPARTMENT,
    EMPLOYEE_NUMBER,
    JOB_ROLE,
    MONTHLY_INCOME,
    PERFORMANCE_RATING,
    YEARS_AT_COMPANY,
)

logger = logging.getLogger(__name__)

OPERATORS: Dict[str, Callable] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}

STAYED = 0
LEFT = 1


@dataclass(frozen=True)
class OutlierCriteria:
    """
    A threshold on one column, a comparison of income with the dataset mean,
    and optionally an attrition status.
    """
    threshold_column: str
    threshold_op: str
    threshold_value: float
    income_op: str
    attrition: Optional[int] = None
    income_column: str = MONTHLY_INCOME

    def __post_init__(self):
        for op in (self.threshold_op, self.income_op):
            if op not in OPERATORS:
                raise ValueError(f"Unknown comparison '{op}', expected one of {list(OPERATORS)}")

    def mask(self, frame: pd.DataFrame, dataset_mean: float) -> pd.Series:
        selected = OPERATORS[self.threshold_op](frame[self.threshold_column], self.threshold_value)
        selected &= OPERATORS[self.income_op](frame[self.income_column], dataset_mean)
        if self.attrition is not None:
            selected &= frame[ATTRITION] == self.attrition
        return selected


def compensation_outliers(
    frame: pd.DataFrame,
    criteria: OutlierCriteria,
    sort_by: Optional[str] = None,
    columns: Optional[Sequence[str]] = None
) -> pd.DataFrame:
    """
    Records matching the criteria, sorted ascending by one column.

    Args:
        frame: Employee snapshot
        criteria: Threshold, income comparison and attrition filter
        sort_by: Column to sort ascending by; ties are broken by EmployeeNumber
        columns: Columns to return (default: all)

    Returns:
        Matching records; empty when the frame is empty
    """
    columns = list(columns) if columns else list(frame.columns)

    if frame.empty:
        return frame.loc[:, columns].reset_index(drop=True)

    dataset_mean = float(frame[criteria.income_column].mean())
    matches = frame.loc[criteria.mask(frame, dataset_mean)]
    logger.debug(f"{len(matches)} of {len(frame)} records match (mean income {dataset_mean:.2f})")

    if sort_by:
        tie_breaker = [EMPLOYEE_NUMBER] if sort_by != EMPLOYEE_NUMBER else []
        matches = matches.sort_values([sort_by] + tie_breaker, kind="mergesort")

    return matches.loc[:, columns].reset_index(drop=True)


# NAMED VARIANTS

UNDERPAID_HIGH_PERFORMERS = OutlierCriteria(
    threshold_column=PERFORMANCE_RATING,
    threshold_op="==",
    threshold_value=config.TOP_PERFORMANCE_RATING,
    income_op="<=",
    attrition=STAYED,
)

LONG_TENURE_LOW_PAY_LEAVERS = OutlierCriteria(
    threshold_column=YEARS_AT_COMPANY,
    threshold_op=">=",
    threshold_value=8,
    income_op="<",
    attrition=LEFT,
)

SHORT_TENURE_HIGH_PAY = OutlierCriteria(
    threshold_column=YEARS_AT_COMPANY,
    threshold_op="<",
    threshold_value=2,
    income_op=">=",
)


def underpaid_high_performers(frame: pd.DataFrame) -> pd.DataFrame:
    """Top-rated employees still with the company and paid at or below the mean."""
    return compensation_outliers(
        frame,
        UNDERPAID_HIGH_PERFORMERS,
        sort_by=MONTHLY_INCOME,
        columns=[EMPLOYEE_NUMBER, JOB_ROLE, PERFORMANCE_RATING, MONTHLY_INCOME, YEARS_AT_COMPANY],
    )


def long_tenure_low_pay_leavers(frame: pd.DataFrame) -> pd.DataFrame:
    """Leavers with 8+ years at the company who earned below the mean."""
    return compensation_outliers(
        frame,
        LONG_TENURE_LOW_PAY_LEAVERS,
        sort_by=YEARS_AT_COMPANY,
        columns=[EMPLOYEE_NUMBER, DEPARTMENT, JOB_ROLE, YEARS_AT_COMPANY, MONTHLY_INCOME],
    )


def short_tenure_high_pay(frame: pd.DataFrame) -> pd.DataFrame:
    """Employees under 2 years at the company paid at or above the mean."""
    return compensation_outliers(
        frame,
        SHORT_TENURE_HIGH_PAY,
        sort_by=YEARS_AT_COMPANY,
        columns=[EMPLOYEE_NUMBER, DEPARTMENT, JOB_ROLE, YEARS_AT_COMPANY, MONTHLY_INCOME],
    )
