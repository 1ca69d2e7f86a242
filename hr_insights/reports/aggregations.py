# hr_insights/reports/aggregations.py
"""
Grouped and global aggregations over an employee snapshot.

Every function here is pure: it reads the frame it is given and returns a new
report table. Grouped functions accept a group key that is either a dimension
name ("department", "age_band", ...), a canonical column name ("Department"),
a callable applied to each record dict, or a list/tuple of those for a
composite key.

Grouped functions can split the frame into contiguous partitions, aggregate
partial counts and sums per partition and merge them before deriving
percentages and means.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from hr_insights import config
from hr_insights.common.exceptions import (
    EmptyDatasetError,
    EmptyGroupError,
    UnknownGroupKeyError,
)
from hr_insights.dataset.columns import (
    AGE,
    ATTRITION,
    DEPARTMENT,
    EDUCATION_FIELD,
    ENVIRONMENT_SATISFACTION,
    GENDER,
    JOB_LEVEL,
    JOB_ROLE,
    MARITAL_STATUS,
    OVERTIME,
    PERFORMANCE_RATING,
    TRAINING_TIMES_LAST_YEAR,
    WORK_LIFE_BALANCE,
    YEARS_SINCE_LAST_PROMOTION,
)
from hr_insights.reports.bucketing import AGE_GROUP_COLUMN, age_band_series

logger = logging.getLogger(__name__)

# Output column names shared with the dashboard
TOTAL_EMPLOYEE = "Total_Employee"
EMPLOYEE_LEFT = "Employee_Left"
ATTRITION_PERCENTAGE = "Attrition_Percentage"
AVG_YEARS_SINCE_PROMOTION = "Avg_Years_Since_Promotion"

_ROWS = "__rows__"
_SUM = "__sum__"
_VALUES = "__values__"

GroupKey = Union[str, Callable[[Dict[str, Any]], Any]]
Order = Sequence[Tuple[str, bool]]

# Dimension name -> column it groups by
DIMENSIONS: Dict[str, str] = {
    "department": DEPARTMENT,
    "job_role": JOB_ROLE,
    "job_level": JOB_LEVEL,
    "gender": GENDER,
    "marital_status": MARITAL_STATUS,
    "education_field": EDUCATION_FIELD,
    "overtime": OVERTIME,
    "attrition": ATTRITION,
    "performance_rating": PERFORMANCE_RATING,
    "work_life_balance": WORK_LIFE_BALANCE,
    "environment_satisfaction": ENVIRONMENT_SATISFACTION,
    "training_times_last_year": TRAINING_TIMES_LAST_YEAR,
    "age_band": AGE_GROUP_COLUMN,
}


# HELPERS

def percentage(part, whole) -> float:
    """
    100 * part / whole rounded half-up to 2 decimals.

    Raises:
        EmptyGroupError: If whole is zero
    """
    whole = int(whole)
    if whole == 0:
        raise EmptyGroupError("Cannot compute a percentage over zero rows")
    value = Decimal(100) * Decimal(int(part)) / Decimal(whole)
    return float(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _resolve_key(frame: pd.DataFrame, key: GroupKey) -> Tuple[str, pd.Series]:
    """Turn one group key into (output column name, Series aligned with frame)."""
    if callable(key):
        name = getattr(key, "__name__", "Group")
        if name.startswith("<"):
            name = "Group"
        values = [key(record) for record in frame.to_dict(orient="records")]
        return name, pd.Series(values, index=frame.index, dtype=object)

    if not isinstance(key, str):
        raise UnknownGroupKeyError(f"Unsupported group key type: {type(key).__name__}", group_key=repr(key))

    column = DIMENSIONS.get(key, key if key in DIMENSIONS.values() else None)
    if column is None:
        raise UnknownGroupKeyError(f"Unknown group key '{key}'", group_key=key, available=DIMENSIONS)

    if column == AGE_GROUP_COLUMN:
        if AGE not in frame.columns:
            raise UnknownGroupKeyError(f"Column '{AGE}' needed for age bands is not in the dataset", group_key=key)
        return column, age_band_series(frame[AGE])

    if column not in frame.columns:
        raise UnknownGroupKeyError(f"Column '{column}' is not in the dataset", group_key=key)
    return column, frame[column]


def _keyed_frame(
    frame: pd.DataFrame,
    key: Union[GroupKey, Sequence[GroupKey]],
    measures: Dict[str, pd.Series]
) -> Tuple[pd.DataFrame, List[str]]:
    """Build a working frame holding the group key column(s) and measure column(s)."""
    keys = list(key) if isinstance(key, (list, tuple)) else [key]
    if not keys:
        raise UnknownGroupKeyError("At least one group key is required")

    columns: Dict[str, pd.Series] = {}
    key_names: List[str] = []
    for single in keys:
        name, values = _resolve_key(frame, single)
        unique_name, suffix = name, 2
        while unique_name in columns:
            unique_name = f"{name}_{suffix}"
            suffix += 1
        columns[unique_name] = values
        key_names.append(unique_name)

    columns.update(measures)
    return pd.DataFrame(columns, index=frame.index), key_names


def _measure_series(frame: pd.DataFrame, measure: Union[str, Callable]) -> Tuple[str, pd.Series]:
    if callable(measure):
        name = getattr(measure, "__name__", "Value")
        values = [measure(record) for record in frame.to_dict(orient="records")]
        return name, pd.to_numeric(pd.Series(values, index=frame.index, dtype=object))
    if measure not in frame.columns:
        raise KeyError(f"Measure column '{measure}' is not in the dataset")
    return measure, frame[measure]


def _partition(work: pd.DataFrame, partitions: int) -> List[pd.DataFrame]:
    """Split a frame into contiguous, non-empty chunks."""
    n = len(work)
    partitions = max(1, min(partitions, n))
    bounds = np.linspace(0, n, partitions + 1).astype(int)
    return [work.iloc[start:stop] for start, stop in zip(bounds[:-1], bounds[1:])]


def _partial_aggregate(chunk: pd.DataFrame, key_names: List[str], sum_columns: Sequence[str]) -> pd.DataFrame:
    grouped = chunk.groupby(key_names, sort=True, dropna=False)
    partial = grouped.size().to_frame(_ROWS)
    for col in sum_columns:
        partial[col] = grouped[col].sum()
    return partial


def aggregate(
    work: pd.DataFrame,
    key_names: List[str],
    sum_columns: Sequence[str] = (),
    partitions: Optional[int] = None
) -> pd.DataFrame:
    """
    Row counts and column sums per group, merged across partitions.

    Returns:
        DataFrame with the key columns (ascending), a row count column and one
        column per summed measure
    """
    if work.empty:
        return pd.DataFrame(columns=list(key_names) + [_ROWS] + list(sum_columns))

    partitions = partitions or config.AGGREGATION_PARTITIONS
    chunks = _partition(work, partitions)

    if len(chunks) == 1:
        merged = _partial_aggregate(chunks[0], key_names, sum_columns)
    else:
        logger.debug(f"Aggregating {len(work)} rows in {len(chunks)} partitions")
        with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
            partials = list(pool.map(lambda chunk: _partial_aggregate(chunk, key_names, sum_columns), chunks))
        level = key_names if len(key_names) > 1 else key_names[0]
        merged = pd.concat(partials).groupby(level=level, sort=True, dropna=False).sum()

    return merged.reset_index()


def _require_groups(table: pd.DataFrame, key_names: List[str], groups: Optional[Iterable[Any]]) -> None:
    """Raise EmptyGroupError for any expected group value that has no rows."""
    if groups is None:
        return
    if len(key_names) != 1:
        raise ValueError("Expected groups can only be given for a single group key")
    present = set(table[key_names[0]].tolist())
    for value in groups:
        if value not in present:
            raise EmptyGroupError(
                f"No employees in group {value!r}",
                group_key=key_names[0],
                group_value=value
            )


def apply_order(table: pd.DataFrame, order: Optional[Order]) -> pd.DataFrame:
    """
    Sort a report table by (column, ascending) pairs.
    Without an order the table keeps its group-key order. Sorting is stable.
    """
    if not order:
        return table.reset_index(drop=True)
    columns = [col for col, _ in order]
    missing = [col for col in columns if col not in table.columns]
    if missing:
        raise KeyError(f"Cannot order by unknown columns {missing}")
    ascending = [asc for _, asc in order]
    return table.sort_values(by=columns, ascending=ascending, kind="mergesort").reset_index(drop=True)


# ATTRITION

def attrition_rate(
    frame: pd.DataFrame,
    key: Union[GroupKey, Sequence[GroupKey]],
    order: Optional[Order] = None,
    groups: Optional[Iterable[Any]] = None,
    partitions: Optional[int] = None
) -> pd.DataFrame:
    """
    Headcount, leavers and attrition percentage per group.

    Args:
        frame: Employee snapshot
        key: Group key (see module docstring)
        order: (column, ascending) pairs; None keeps ascending group-key order
        groups: Group values that must be present; a missing one raises EmptyGroupError
        partitions: Number of partitions to aggregate separately

    Returns:
        DataFrame with key column(s), Total_Employee, Employee_Left, Attrition_Percentage
    """
    work, key_names = _keyed_frame(frame, key, {EMPLOYEE_LEFT: frame[ATTRITION]})
    table = aggregate(work, key_names, [EMPLOYEE_LEFT], partitions)
    _require_groups(table, key_names, groups)

    table = table.rename(columns={_ROWS: TOTAL_EMPLOYEE})
    table[ATTRITION_PERCENTAGE] = [
        percentage(left, total) for left, total in zip(table[EMPLOYEE_LEFT], table[TOTAL_EMPLOYEE])
    ]
    table = table[key_names + [TOTAL_EMPLOYEE, EMPLOYEE_LEFT, ATTRITION_PERCENTAGE]]
    return apply_order(table, order)


def overall_attrition_rate(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Headcount, leavers and attrition percentage over the whole dataset.

    Raises:
        EmptyDatasetError: If the frame has no rows
    """
    if frame.empty:
        raise EmptyDatasetError("Overall attrition needs at least one employee", operation="overall_attrition_rate")

    total = len(frame)
    left = int(frame[ATTRITION].sum())
    return pd.DataFrame([{
        TOTAL_EMPLOYEE: total,
        EMPLOYEE_LEFT: left,
        ATTRITION_PERCENTAGE: percentage(left, total),
    }])


# AVERAGES

def average_by(
    frame: pd.DataFrame,
    key: Union[GroupKey, Sequence[GroupKey]],
    measure: Union[str, Callable[[Dict[str, Any]], Any]],
    column: Optional[str] = None,
    include_count: bool = False,
    order: Optional[Order] = None,
    groups: Optional[Iterable[Any]] = None,
    partitions: Optional[int] = None
) -> pd.DataFrame:
    """
    Arithmetic mean of a numeric measure per group.

    Args:
        frame: Employee snapshot
        key: Group key (see module docstring)
        measure: Column name or callable on a record dict
        column: Output column name (default "Avg_<measure>")
        include_count: Also output Total_Employee per group
        order: (column, ascending) pairs; None keeps ascending group-key order
        groups: Group values that must be present; a missing one raises EmptyGroupError
        partitions: Number of partitions to aggregate separately

    Records whose measure is missing are left out of that group's mean, the
    way SQL AVG ignores NULLs; Total_Employee still counts them.

    Raises:
        EmptyGroupError: If an expected group has no rows, or a group has no
            non-missing measure values
    """
    measure_name, values = _measure_series(frame, measure)
    column = column or f"Avg_{measure_name}"

    # Missing measure values are left out of both the sum and the divisor
    measures = {_SUM: values, _VALUES: values.notna().astype(int)}
    work, key_names = _keyed_frame(frame, key, measures)
    table = aggregate(work, key_names, [_SUM, _VALUES], partitions)
    _require_groups(table, key_names, groups)

    without_values = table.loc[table[_VALUES] == 0, key_names]
    if not without_values.empty:
        group_value = without_values.iloc[0].tolist()
        raise EmptyGroupError(
            f"No {measure_name} values in group {group_value!r}",
            group_key=", ".join(key_names),
            group_value=group_value[0] if len(group_value) == 1 else tuple(group_value)
        )

    table = table.rename(columns={_ROWS: TOTAL_EMPLOYEE})
    if table.empty:
        table[column] = pd.Series(dtype=float)
    else:
        table[column] = table[_SUM] / table[_VALUES]

    output = key_names + ([TOTAL_EMPLOYEE] if include_count else []) + [column]
    return apply_order(table[output], order)


def overall_average(frame: pd.DataFrame, measure: str, column: Optional[str] = None) -> pd.DataFrame:
    """
    Mean of a measure over the whole dataset, as a one-row table.

    Raises:
        EmptyDatasetError: If the frame has no rows
    """
    if frame.empty:
        raise EmptyDatasetError(f"Average of {measure} needs at least one employee", operation="overall_average")
    column = column or f"Avg_{measure}"
    return pd.DataFrame([{column: float(frame[measure].mean())}])


def promotion_wait_by_role(frame: pd.DataFrame, order: Optional[Order] = None) -> pd.DataFrame:
    """Average years since last promotion per job role, shortest wait first."""
    if order is None:
        order = [(AVG_YEARS_SINCE_PROMOTION, True)]
    return average_by(
        frame,
        "job_role",
        YEARS_SINCE_LAST_PROMOTION,
        column=AVG_YEARS_SINCE_PROMOTION,
        order=order,
    )


# COUNTS

def count_by(
    frame: pd.DataFrame,
    *keys: GroupKey,
    column: str = TOTAL_EMPLOYEE,
    order: Optional[Order] = None,
    partitions: Optional[int] = None
) -> pd.DataFrame:
    """
    Number of employees per group; several keys make a composite group.

    Example:
        count_by(frame, "department", "job_role", column="Role_count")
    """
    work, key_names = _keyed_frame(frame, list(keys), {})
    table = aggregate(work, key_names, (), partitions)
    table = table.rename(columns={_ROWS: column})
    return apply_order(table[key_names + [column]], order)


def top_per_group(table: pd.DataFrame, group_column: str, value_column: str) -> pd.DataFrame:
    """
    Keep the row with the highest value in each group.
    Ties go to the row that comes first in the table.
    """
    if table.empty:
        return table.reset_index(drop=True)
    ranked = table.sort_values([group_column, value_column], ascending=[True, False], kind="mergesort")
    return ranked.drop_duplicates(subset=[group_column], keep="first").reset_index(drop=True)
