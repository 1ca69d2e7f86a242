"""Tests for column normalization, record validation and snapshot building."""

import pandas as pd
import pytest

from hr_insights import config
from hr_insights.common.exceptions import InvalidRecordError
from hr_insights.dataset.columns import (
    CANONICAL_COLUMNS,
    normalize_column_names,
    normalize_flag,
    prepare_frame,
)
from hr_insights.dataset.snapshot import EmployeeDataset
from hr_insights.dataset.validator import build_dataset, summarize_dataset, validate_records


def _build(rows, on_invalid="skip"):
    return build_dataset(pd.DataFrame(rows), on_invalid=on_invalid)


# ===================================================================
# Column helpers
# ===================================================================


class TestNormalizeColumnNames:
    def test_known_spellings(self):
        df = pd.DataFrame(columns=["employee_number", "Monthly Salary", " Dept ", "YEARSATCOMPANY"])
        renamed = normalize_column_names(df)
        assert list(renamed.columns) == ["EmployeeNumber", "MonthlyIncome", "Department", "YearsAtCompany"]

    def test_unknown_column_kept(self):
        df = pd.DataFrame(columns=["EmployeeNumber", "FavouriteColour"])
        assert list(normalize_column_names(df).columns) == ["EmployeeNumber", "FavouriteColour"]


class TestNormalizeFlag:
    @pytest.mark.parametrize("value", [1, "1", "Yes", "y", "TRUE", "Left", True])
    def test_true_values(self, value):
        assert normalize_flag(value) == 1

    @pytest.mark.parametrize("value", [0, "0", "No", "n", "false", "Stayed", False])
    def test_false_values(self, value):
        assert normalize_flag(value) == 0

    def test_null(self):
        assert normalize_flag(None) is None
        assert normalize_flag(float("nan")) is None

    def test_unrecognized_passes_through(self):
        assert normalize_flag("Maybe") == "Maybe"


class TestPrepareFrame:
    def test_placeholders_become_null(self, make_employee):
        df = pd.DataFrame([make_employee(1, Department="N/A", MonthlyIncome="NULL")]).astype(str)
        prepared = prepare_frame(df)
        assert pd.isna(prepared.loc[0, "Department"])
        assert pd.isna(prepared.loc[0, "MonthlyIncome"])

    def test_numeric_strings_parsed(self, make_employee):
        df = pd.DataFrame([make_employee(1)]).astype(str)
        prepared = prepare_frame(df)
        assert prepared.loc[0, "MonthlyIncome"] == 2000
        assert prepared.loc[0, "Attrition"] == 1


# ===================================================================
# Record validation
# ===================================================================


class TestValidateRecords:
    def test_fixture_is_valid(self, dataset):
        assert len(dataset) == 10
        assert dataset.skipped == 0
        assert list(dataset.frame.columns) == CANONICAL_COLUMNS

    def test_skip_counts_bad_records(self, raw_frame, make_employee):
        bad = pd.DataFrame([make_employee(11, PerformanceRating=5)])
        dataset = build_dataset(pd.concat([raw_frame, bad], ignore_index=True), on_invalid="skip")
        assert len(dataset) == 10
        assert dataset.skipped == 1
        assert dataset.errors[0].employee_number == 11
        assert "PerformanceRating" in dataset.errors[0].details["field_errors"]

    def test_abort_raises_first_bad_record(self, raw_frame, make_employee):
        bad = pd.DataFrame([make_employee(11, Attrition="Maybe"), make_employee(12, Age=16)])
        with pytest.raises(InvalidRecordError) as exc_info:
            build_dataset(pd.concat([raw_frame, bad], ignore_index=True), on_invalid="abort")
        assert exc_info.value.row_index == 10
        assert exc_info.value.employee_number == 11

    def test_duplicate_employee_number(self, make_employee):
        dataset = _build([
            make_employee(1, Department="Sales"),
            make_employee(1, Department="Human Resources"),
        ])
        assert len(dataset) == 1
        assert dataset.frame.loc[0, "Department"] == "Sales"
        assert dataset.skipped == 1

    def test_promotion_after_tenure_rejected(self, make_employee):
        dataset = _build([make_employee(1, YearsAtCompany=2, YearsSinceLastPromotion=3)])
        assert dataset.empty
        assert dataset.skipped == 1

    def test_under_age_rejected(self, make_employee):
        dataset = _build([make_employee(1, Age=16)])
        assert dataset.skipped == 1
        assert "Age" in dataset.errors[0].field_errors

    def test_under_age_accepted_with_legacy_bands(self, make_employee, monkeypatch):
        monkeypatch.setattr(config, "LEGACY_AGE_BANDS", True)
        dataset = _build([make_employee(1, Age=16)])
        assert len(dataset) == 1

    def test_negative_income_rejected(self, make_employee):
        assert _build([make_employee(1, MonthlyIncome=-1)]).skipped == 1

    def test_missing_value_rejected(self, make_employee):
        assert _build([make_employee(1, JobRole=None)]).skipped == 1

    def test_yes_no_attrition(self, make_employee):
        dataset = _build([
            make_employee(1, Attrition="Yes", OverTime="No"),
            make_employee(2, Attrition="No", OverTime="Yes"),
        ])
        assert dataset.frame["Attrition"].tolist() == [1, 0]
        assert dataset.frame["OverTime"].tolist() == [0, 1]

    def test_aliased_columns(self, make_employee):
        row = make_employee(1)
        row["Employee Number"] = row.pop("EmployeeNumber")
        row["salary"] = row.pop("MonthlyIncome")
        dataset = _build([row])
        assert dataset.frame.loc[0, "EmployeeNumber"] == 1
        assert dataset.frame.loc[0, "MonthlyIncome"] == 2000

    def test_missing_column_rejects_every_record(self, raw_frame):
        dataset = build_dataset(raw_frame.drop(columns=["Gender"]), on_invalid="skip")
        assert dataset.empty
        assert dataset.skipped == 10

    def test_unknown_policy(self, raw_frame):
        with pytest.raises(ValueError):
            validate_records(prepare_frame(raw_frame), on_invalid="ignore")

    def test_rating_range_from_config(self, make_employee, monkeypatch):
        monkeypatch.setitem(config.RATING_RANGES, "PerformanceRating", (1, 5))
        assert len(_build([make_employee(1, PerformanceRating=5)])) == 1


# ===================================================================
# Snapshot
# ===================================================================


class TestSnapshot:
    def test_view_is_a_copy(self, dataset):
        view = dataset.view()
        view.loc[0, "MonthlyIncome"] = 0
        assert dataset.frame.loc[0, "MonthlyIncome"] == 2000

    def test_frozen(self, dataset):
        with pytest.raises(AttributeError):
            dataset.skipped = 3

    def test_empty_snapshot(self):
        snapshot = EmployeeDataset.empty_snapshot()
        assert snapshot.empty
        assert len(snapshot) == 0
        assert list(snapshot.frame.columns) == CANONICAL_COLUMNS


class TestSummarizeDataset:
    def test_fixture_passes(self, dataset):
        report = summarize_dataset(dataset)
        assert report.passed
        assert report.warning_count == 0

    def test_empty_fails(self):
        report = summarize_dataset(EmployeeDataset.empty_snapshot())
        assert not report.passed
        assert report.error_count == 1

    def test_skipped_records_warn(self, raw_frame, make_employee):
        bad = pd.DataFrame([make_employee(11, Age=16)])
        dataset = build_dataset(pd.concat([raw_frame, bad], ignore_index=True), on_invalid="skip")
        report = summarize_dataset(dataset)
        assert report.passed
        assert report.warning_count == 1
