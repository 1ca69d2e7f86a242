# hr_insights/dataset/columns.py
"""
Column utilities - canonical EmployeeData column names, aliases and value cleaning.
Contains reusable functions for normalizing raw frames before validation.
"""

from typing import Dict, List, Optional

import pandas as pd

# Canonical column names, in the order used by the EmployeeData table
EMPLOYEE_NUMBER = "EmployeeNumber"
AGE = "Age"
ATTRITION = "Attrition"
DEPARTMENT = "Department"
DISTANCE_FROM_HOME = "DistanceFromHome"
EDUCATION_FIELD = "EducationField"
ENVIRONMENT_SATISFACTION = "EnvironmentSatisfaction"
GENDER = "Gender"
JOB_LEVEL = "JobLevel"
JOB_ROLE = "JobRole"
MARITAL_STATUS = "MaritalStatus"
MONTHLY_INCOME = "MonthlyIncome"
OVERTIME = "OverTime"
PERFORMANCE_RATING = "PerformanceRating"
TRAINING_TIMES_LAST_YEAR = "TrainingTimesLastYear"
WORK_LIFE_BALANCE = "WorkLifeBalance"
YEARS_AT_COMPANY = "YearsAtCompany"
YEARS_SINCE_LAST_PROMOTION = "YearsSinceLastPromotion"

CANONICAL_COLUMNS: List[str] = [
    EMPLOYEE_NUMBER,
    AGE,
    ATTRITION,
    DEPARTMENT,
    DISTANCE_FROM_HOME,
    EDUCATION_FIELD,
    ENVIRONMENT_SATISFACTION,
    GENDER,
    JOB_LEVEL,
    JOB_ROLE,
    MARITAL_STATUS,
    MONTHLY_INCOME,
    OVERTIME,
    PERFORMANCE_RATING,
    TRAINING_TIMES_LAST_YEAR,
    WORK_LIFE_BALANCE,
    YEARS_AT_COMPANY,
    YEARS_SINCE_LAST_PROMOTION,
]

STRING_COLUMNS = [DEPARTMENT, EDUCATION_FIELD, GENDER, JOB_ROLE, MARITAL_STATUS]
FLAG_COLUMNS = [ATTRITION, OVERTIME]

# Placeholder values that should be treated as null
NULL_PLACEHOLDERS = [
    '[NULL]', '[null]', 'NULL', 'null', 'None', 'none',
    'N/A', 'n/a', 'NA', 'na', 'NaN', 'nan',
    '', '-', '--', '.', 'undefined'
]

# Values accepted for boolean-like columns (compared lower-cased)
FLAG_TRUE = {"1", "1.0", "yes", "y", "true", "t", "left"}
FLAG_FALSE = {"0", "0.0", "no", "n", "false", "f", "stayed"}


def _alias_key(name: str) -> str:
    return "".join(ch for ch in str(name).lower() if ch.isalnum())


# Maps a squashed, lower-cased spelling to the canonical name, so that
# "Employee Number", "employee_number" and "EMPLOYEENUMBER" all resolve.
COLUMN_ALIASES: Dict[str, str] = {_alias_key(col): col for col in CANONICAL_COLUMNS}
COLUMN_ALIASES.update({
    "employeeid": EMPLOYEE_NUMBER,
    "empid": EMPLOYEE_NUMBER,
    "dept": DEPARTMENT,
    "salary": MONTHLY_INCOME,
    "monthlysalary": MONTHLY_INCOME,
    "tenure": YEARS_AT_COMPANY,
    "commutedistance": DISTANCE_FROM_HOME,
    "distance": DISTANCE_FROM_HOME,
    "educationfieldofstudy": EDUCATION_FIELD,
    "trainingtimes": TRAINING_TIMES_LAST_YEAR,
})


def normalize_column_names(df: pd.DataFrame) -> pd.DataFrame:
    """
    Rename known column spellings to their canonical EmployeeData names.
    Unknown columns are kept untouched. Returns a new DataFrame.
    """
    renames = {}
    for col in df.columns:
        cleaned = str(col).strip().strip('"')
        canonical = COLUMN_ALIASES.get(_alias_key(cleaned))
        if canonical and canonical not in renames.values():
            renames[col] = canonical
        elif cleaned != col:
            renames[col] = cleaned
    return df.rename(columns=renames)


def clean_string_column(series: pd.Series, default_value: Optional[str] = None) -> pd.Series:
    """
    Clean a string column by handling null/empty/placeholder values.

    Args:
        series: Pandas Series to clean
        default_value: Value to use for nulls (None = keep as null)

    Returns:
        Cleaned Series with null placeholders replaced
    """
    result = series.where(series.notna(), None)
    result = result.map(lambda v: v if v is None else str(v).strip().strip('"').strip("'"))
    result = result.map(lambda v: None if v is None or v in NULL_PLACEHOLDERS else v)

    if default_value is not None:
        result = result.fillna(default_value)

    return result


def clean_numeric_column(series: pd.Series) -> pd.Series:
    """
    Clean a numeric column by handling null/empty/placeholder values.
    Unparseable values become NaN so validation can report them.
    """
    if pd.api.types.is_numeric_dtype(series):
        return series
    cleaned = clean_string_column(series)
    return pd.to_numeric(cleaned, errors="coerce")


def normalize_flag(value) -> Optional[int]:
    """
    Normalize a boolean-like value (1/0, Yes/No, True/False, Left/Stayed) to 1 or 0.

    Returns None for nulls; other unrecognized values are returned unchanged so
    that validation rejects them with the original value in the message.
    """
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass

    if isinstance(value, bool):
        return int(value)

    text = str(value).strip().lower()
    if text in FLAG_TRUE:
        return 1
    if text in FLAG_FALSE:
        return 0
    return value


def prepare_frame(df: pd.DataFrame) -> pd.DataFrame:
    """
    Normalize a raw employee frame: canonical column names, null placeholders,
    numeric coercion and flag normalization. Does not drop invalid rows.
    """
    df = normalize_column_names(df)

    prepared = pd.DataFrame(index=df.index)
    for col in CANONICAL_COLUMNS:
        if col not in df.columns:
            continue
        if col in STRING_COLUMNS:
            prepared[col] = clean_string_column(df[col])
        elif col in FLAG_COLUMNS:
            prepared[col] = clean_string_column(df[col].astype(object)).map(normalize_flag)
        else:
            prepared[col] = clean_numeric_column(df[col])

    return prepared


def missing_columns(df: pd.DataFrame) -> List[str]:
    """Return canonical columns absent from the frame."""
    return [col for col in CANONICAL_COLUMNS if col not in df.columns]
