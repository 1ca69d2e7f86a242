"""Tests for the salary & performance mismatch reports."""

import pandas as pd
import pytest

from hr_insights.dataset.snapshot import EmployeeDataset
from hr_insights.dataset.validator import build_dataset
from hr_insights.reports.outliers import (
    LEFT,
    OutlierCriteria,
    compensation_outliers,
    long_tenure_low_pay_leavers,
    short_tenure_high_pay,
    underpaid_high_performers,
)


def _frame(rows):
    return build_dataset(pd.DataFrame(rows), on_invalid="abort").frame


class TestUnderpaidHighPerformers:
    def test_fixture(self, frame):
        table = underpaid_high_performers(frame)
        assert list(table.columns) == [
            "EmployeeNumber", "JobRole", "PerformanceRating", "MonthlyIncome", "YearsAtCompany",
        ]
        assert table["EmployeeNumber"].tolist() == [8, 3, 2]
        assert table["MonthlyIncome"].tolist() == [2200, 4000, 6000]

    def test_every_row_is_top_rated_and_stayed(self, frame):
        table = underpaid_high_performers(frame)
        matched = frame.set_index("EmployeeNumber").loc[table["EmployeeNumber"]]
        assert (matched["PerformanceRating"] == 4).all()
        assert (matched["Attrition"] == 0).all()
        assert (matched["MonthlyIncome"] <= frame["MonthlyIncome"].mean()).all()

    def test_income_equal_to_mean_is_included(self, make_employee):
        frame = _frame([
            make_employee(1, PerformanceRating=4, Attrition=0, MonthlyIncome=5000),
            make_employee(2, PerformanceRating=4, Attrition=0, MonthlyIncome=5000),
        ])
        assert underpaid_high_performers(frame)["EmployeeNumber"].tolist() == [1, 2]

    def test_ties_broken_by_employee_number(self, make_employee):
        frame = _frame([
            make_employee(5, PerformanceRating=4, Attrition=0, MonthlyIncome=1000),
            make_employee(3, PerformanceRating=4, Attrition=0, MonthlyIncome=1000),
            make_employee(9, PerformanceRating=3, Attrition=0, MonthlyIncome=30000),
        ])
        assert underpaid_high_performers(frame)["EmployeeNumber"].tolist() == [3, 5]

    def test_empty_dataset(self):
        assert underpaid_high_performers(EmployeeDataset.empty_snapshot().frame).empty


class TestLongTenureLowPayLeavers:
    def test_fixture(self, frame):
        table = long_tenure_low_pay_leavers(frame)
        assert list(table.columns) == [
            "EmployeeNumber", "Department", "JobRole", "YearsAtCompany", "MonthlyIncome",
        ]
        assert table["EmployeeNumber"].tolist() == [4, 9]
        assert table["YearsAtCompany"].tolist() == [9, 12]

    def test_stayers_excluded(self, frame):
        table = long_tenure_low_pay_leavers(frame)
        assert 3 not in table["EmployeeNumber"].tolist()


class TestShortTenureHighPay:
    def test_fixture(self, frame):
        table = short_tenure_high_pay(frame)
        assert table["EmployeeNumber"].tolist() == [7]
        assert table["MonthlyIncome"].tolist() == [9000]

    def test_ignores_attrition(self, make_employee):
        frame = _frame([
            make_employee(1, YearsAtCompany=0, YearsSinceLastPromotion=0, Attrition=1, MonthlyIncome=8000),
            make_employee(2, YearsAtCompany=0, YearsSinceLastPromotion=0, Attrition=0, MonthlyIncome=8000),
            make_employee(3, YearsAtCompany=5, Attrition=0, MonthlyIncome=1000),
        ])
        assert short_tenure_high_pay(frame)["EmployeeNumber"].tolist() == [1, 2]


class TestCompensationOutliers:
    def test_custom_criteria(self, frame):
        criteria = OutlierCriteria(
            threshold_column="DistanceFromHome",
            threshold_op=">=",
            threshold_value=10,
            income_op="<",
            attrition=LEFT,
        )
        table = compensation_outliers(frame, criteria, sort_by="DistanceFromHome")
        assert table["EmployeeNumber"].tolist() == [1, 9, 4]
        assert list(table.columns) == list(frame.columns)

    def test_unknown_operator(self):
        with pytest.raises(ValueError):
            OutlierCriteria("YearsAtCompany", "~", 1, "<")

    def test_input_not_mutated(self, frame):
        before = frame.copy()
        underpaid_high_performers(frame)
        pd.testing.assert_frame_equal(frame, before)
