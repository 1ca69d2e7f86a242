# hr_insights/dataset/validator.py
"""
Record Validation - Per-record checks before a snapshot is handed to reports.
Malformed records are either skipped and counted or abort the load.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
from pydantic import ValidationError

from hr_insights import config
from hr_insights.common.exceptions import InvalidRecordError
from hr_insights.dataset.columns import (
    CANONICAL_COLUMNS,
    EMPLOYEE_NUMBER,
    missing_columns,
    prepare_frame,
)
from hr_insights.dataset.schema import EmployeeRecord
from hr_insights.dataset.snapshot import EmployeeDataset

logger = logging.getLogger(__name__)

ON_INVALID_POLICIES = ("skip", "abort")


@dataclass
class ValidationResult:
    """Single validation check result."""
    check_name: str
    passed: bool
    message: str
    severity: str = "ERROR"  # ERROR, WARNING, INFO


@dataclass
class ValidationReport:
    """Collection of validation results."""
    layer: str
    results: List[ValidationResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results if r.severity == "ERROR")

    @property
    def error_count(self) -> int:
        return sum(1 for r in self.results if not r.passed and r.severity == "ERROR")

    @property
    def warning_count(self) -> int:
        return sum(1 for r in self.results if not r.passed and r.severity == "WARNING")

    def add(self, result: ValidationResult):
        self.results.append(result)
        status = "PASS" if result.passed else "FAIL"
        log_fn = logger.info if result.passed else (logger.error if result.severity == "ERROR" else logger.warning)
        log_fn(f"  [{status}] {result.check_name}: {result.message}")


def _field_errors(exc: ValidationError) -> Dict[str, str]:
    errors = {}
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "record"
        errors[location] = err["msg"]
    return errors


def _to_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Convert a frame to plain-Python dicts with None for missing values."""
    as_objects = df.astype(object)
    return as_objects.where(pd.notna(as_objects), None).to_dict(orient="records")


def validate_records(
    df: pd.DataFrame,
    on_invalid: Optional[str] = None
) -> Tuple[pd.DataFrame, List[InvalidRecordError]]:
    """
    Validate every record of a prepared frame.

    Args:
        df: Frame with canonical column names (see prepare_frame)
        on_invalid: "skip" to drop and count malformed records, "abort" to raise
            on the first one. Defaults to config.ON_INVALID_RECORD.

    Returns:
        Tuple of (frame of valid records, list of per-record errors)

    Raises:
        InvalidRecordError: On the first malformed record when aborting
        ValueError: If on_invalid is not a known policy
    """
    policy = (on_invalid or config.ON_INVALID_RECORD).lower()
    if policy not in ON_INVALID_POLICIES:
        raise ValueError(f"on_invalid must be one of {ON_INVALID_POLICIES}, got '{policy}'")

    absent = missing_columns(df)
    if absent:
        logger.warning(f"Source is missing columns {absent}; affected records will be rejected")

    valid_rows: List[Dict[str, Any]] = []
    errors: List[InvalidRecordError] = []
    seen_numbers = set()

    for position, record in enumerate(_to_records(df)):
        employee_number = record.get(EMPLOYEE_NUMBER)
        try:
            parsed = EmployeeRecord.model_validate(record)
        except ValidationError as e:
            error = InvalidRecordError(
                "Malformed employee record",
                row_index=position,
                employee_number=employee_number,
                field_errors=_field_errors(e),
                original_error=e,
            )
        else:
            if parsed.employee_number not in seen_numbers:
                seen_numbers.add(parsed.employee_number)
                valid_rows.append(parsed.to_row())
                continue
            error = InvalidRecordError(
                "Duplicate EmployeeNumber",
                row_index=position,
                employee_number=parsed.employee_number,
                field_errors={EMPLOYEE_NUMBER: "already used by an earlier record"},
            )

        if policy == "abort":
            logger.error(f"Aborting load: {error}")
            raise error
        logger.warning(f"Skipping record: {error}")
        errors.append(error)

    valid_df = pd.DataFrame(valid_rows, columns=CANONICAL_COLUMNS)
    return valid_df, errors


def build_dataset(
    raw_df: pd.DataFrame,
    source: str = "memory",
    on_invalid: Optional[str] = None
) -> EmployeeDataset:
    """
    Normalize and validate a raw frame into an immutable EmployeeDataset.

    Args:
        raw_df: Frame as read from the source (any known column spelling)
        source: Description of where the records came from
        on_invalid: Invalid-record policy, see validate_records

    Returns:
        EmployeeDataset holding the valid records and the skipped count
    """
    prepared = prepare_frame(raw_df)
    valid_df, errors = validate_records(prepared, on_invalid=on_invalid)

    dataset = EmployeeDataset(
        frame=valid_df,
        source=source,
        skipped=len(errors),
        errors=tuple(errors),
    )
    logger.info(f"Snapshot from {source}: {len(dataset)} valid records, {dataset.skipped} skipped")
    return dataset


def summarize_dataset(dataset: EmployeeDataset) -> ValidationReport:
    """
    Run summary checks over a loaded snapshot.

    Checks:
    - Row count > 0
    - No skipped records
    - Both attrition outcomes present (a dataset with only one makes every rate 0 or 100)
    """
    report = ValidationReport(layer=f"Snapshot - {dataset.source}")
    logger.info("Validating employee snapshot...")

    row_count = len(dataset)
    report.add(ValidationResult(
        check_name="Row Count",
        passed=row_count > 0,
        message=f"{row_count} records"
    ))

    report.add(ValidationResult(
        check_name="Skipped Records",
        passed=dataset.skipped == 0,
        message=f"{dataset.skipped} malformed records skipped",
        severity="WARNING"
    ))

    if row_count > 0:
        outcomes = set(dataset.frame["Attrition"].unique().tolist())
        report.add(ValidationResult(
            check_name="Attrition Outcomes",
            passed=outcomes == {0, 1},
            message=f"Attrition values present: {sorted(outcomes)}",
            severity="INFO"
        ))

    return report
