"""
Age bands used by the grouped attrition reports.
"""

import numbers
from collections.abc import Mapping
from typing import Optional

import pandas as pd

from hr_insights import config
from hr_insights.common.exceptions import InvalidRecordError
from hr_insights.dataset.columns import AGE

AGE_GROUP_COLUMN = "Age_Group"

# (label, lowest age, highest age), bounds inclusive.
# The 46-60 band keeps its historical "45-60" label, the dashboard filters on it.
AGE_BANDS = (
    ("18-25", 18, 25),
    ("26-35", 26, 35),
    ("36-45", 36, 45),
    ("45-60", 46, 60),
)
OVERFLOW_BAND = "60+"
AGE_BAND_LABELS = tuple(label for label, _, _ in AGE_BANDS) + (OVERFLOW_BAND,)


def bucketize_age(record, strict: Optional[bool] = None) -> str:
    """
    Classify an age into its band.

    Args:
        record: An age, a mapping with an "Age" key, or an EmployeeRecord
        strict: Reject ages below 18 instead of putting them in "60+", and reject
            fractional ages. Without it a fractional age falls in the band whose
            whole-year range it starts in (25.5 is "18-25").
            Defaults to the opposite of config.LEGACY_AGE_BANDS.

    Raises:
        InvalidRecordError: If the age is missing, not a number, below 18 or fractional in strict mode
    """
    if strict is None:
        strict = not config.LEGACY_AGE_BANDS

    if isinstance(record, Mapping):
        age = record.get(AGE)
    else:
        age = getattr(record, "age", record)

    if age is None or isinstance(age, bool) or not isinstance(age, numbers.Real) or pd.isna(age):
        raise InvalidRecordError("Age is missing or not a number", field_errors={AGE: repr(age)})

    if strict and not float(age).is_integer():
        raise InvalidRecordError(
            f"Age {age} is not a whole number of years",
            field_errors={AGE: "must be a whole number"}
        )

    # Each band covers [low, high + 1)
    for label, low, high in AGE_BANDS:
        if low <= age < high + 1:
            return label

    if strict and age < AGE_BANDS[0][1]:
        raise InvalidRecordError(
            f"Age {age} is below the youngest band",
            field_errors={AGE: f"must be at least {AGE_BANDS[0][1]}"}
        )
    return OVERFLOW_BAND


def age_band_series(ages: pd.Series, strict: Optional[bool] = None) -> pd.Series:
    """Map a Series of ages to their band labels."""
    bands = [bucketize_age(age, strict=strict) for age in ages.tolist()]
    return pd.Series(bands, index=ages.index, name=AGE_GROUP_COLUMN, dtype=object)
