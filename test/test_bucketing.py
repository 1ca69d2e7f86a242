"""Tests for age band classification."""

import pandas as pd
import pytest

from hr_insights.common.exceptions import InvalidRecordError
from hr_insights.reports.bucketing import (
    AGE_BAND_LABELS,
    AGE_GROUP_COLUMN,
    age_band_series,
    bucketize_age,
)


class TestBucketizeAgeBoundaries:
    @pytest.mark.parametrize("age, band", [
        (18, "18-25"),
        (25, "18-25"),
        (26, "26-35"),
        (35, "26-35"),
        (36, "36-45"),
        (45, "36-45"),
        (46, "45-60"),
        (60, "45-60"),
        (61, "60+"),
        (90, "60+"),
    ])
    def test_literal_boundaries(self, age, band):
        assert bucketize_age(age) == band

    def test_accepts_record_mapping(self):
        assert bucketize_age({"Age": 30, "Department": "Sales"}) == "26-35"

    def test_accepts_object_with_age(self):
        class Employee:
            age = 47
        assert bucketize_age(Employee()) == "45-60"

    def test_numpy_integer(self):
        assert bucketize_age(pd.Series([33]).iloc[0]) == "26-35"


class TestBucketizeAgeOutOfRange:
    def test_strict_rejects_under_18(self):
        with pytest.raises(InvalidRecordError) as exc_info:
            bucketize_age(17, strict=True)
        assert "Age" in exc_info.value.field_errors

    def test_legacy_puts_under_18_in_overflow_band(self):
        assert bucketize_age(17, strict=False) == "60+"
        assert bucketize_age(0, strict=False) == "60+"

    @pytest.mark.parametrize("age", [25.5, 35.5, 60.25])
    def test_strict_rejects_fractional_age(self, age):
        with pytest.raises(InvalidRecordError) as exc_info:
            bucketize_age(age, strict=True)
        assert exc_info.value.field_errors == {"Age": "must be a whole number"}

    def test_whole_float_accepted_in_strict_mode(self):
        assert bucketize_age(30.0, strict=True) == "26-35"

    @pytest.mark.parametrize("age, band", [
        (25.5, "18-25"),
        (35.5, "26-35"),
        (45.9, "36-45"),
        (60.5, "45-60"),
        (61.0, "60+"),
        (17.5, "60+"),
    ])
    def test_legacy_fractional_age_stays_in_its_year(self, age, band):
        assert bucketize_age(age, strict=False) == band

    @pytest.mark.parametrize("age", [None, "thirty", float("nan"), True])
    def test_missing_or_non_numeric(self, age):
        with pytest.raises(InvalidRecordError):
            bucketize_age(age)


class TestAgeBandSeries:
    def test_keeps_index_and_name(self):
        ages = pd.Series([18, 40, 70], index=[10, 11, 12])
        bands = age_band_series(ages)
        assert list(bands.index) == [10, 11, 12]
        assert bands.name == AGE_GROUP_COLUMN
        assert bands.tolist() == ["18-25", "36-45", "60+"]

    def test_labels_sort_in_band_order(self):
        assert sorted(AGE_BAND_LABELS) == list(AGE_BAND_LABELS)

    def test_empty(self):
        assert age_band_series(pd.Series([], dtype="int64")).empty
