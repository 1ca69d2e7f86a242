"""Shared fixtures: a small, hand-checked employee table."""

import pandas as pd
import pytest

from hr_insights.dataset.validator import build_dataset

COLUMNS = [
    "EmployeeNumber", "Age", "Attrition", "Department", "DistanceFromHome",
    "EducationField", "EnvironmentSatisfaction", "Gender", "JobLevel", "JobRole",
    "MaritalStatus", "MonthlyIncome", "OverTime", "PerformanceRating",
    "TrainingTimesLastYear", "WorkLifeBalance", "YearsAtCompany", "YearsSinceLastPromotion",
]

# Mean MonthlyIncome is exactly 7000; 4 of 10 employees left.
ROWS = [
    (1, 22, 1, "Sales", 10, "Marketing", 1, "Male", 1, "Sales Representative", "Single", 2000, 1, 3, 2, 1, 1, 0),
    (2, 30, 0, "Sales", 5, "Marketing", 3, "Female", 2, "Sales Executive", "Married", 6000, 0, 4, 3, 3, 5, 1),
    (3, 41, 0, "Research & Development", 2, "Life Sciences", 4, "Male", 3, "Research Scientist", "Married", 4000, 0, 4, 2, 3, 10, 4),
    (4, 35, 1, "Research & Development", 20, "Medical", 2, "Female", 1, "Laboratory Technician", "Single", 2500, 1, 3, 1, 2, 9, 7),
    (5, 50, 0, "Human Resources", 3, "Human Resources", 3, "Female", 4, "Manager", "Divorced", 15000, 0, 3, 3, 4, 20, 2),
    (6, 26, 0, "Research & Development", 8, "Life Sciences", 3, "Male", 2, "Research Scientist", "Single", 5000, 1, 3, 4, 3, 1, 0),
    (7, 58, 1, "Sales", 15, "Marketing", 2, "Male", 3, "Sales Executive", "Married", 9000, 1, 4, 2, 2, 1, 0),
    (8, 18, 0, "Research & Development", 1, "Medical", 4, "Female", 1, "Laboratory Technician", "Single", 2200, 0, 4, 3, 3, 0, 0),
    (9, 45, 1, "Sales", 12, "Marketing", 1, "Male", 2, "Sales Executive", "Divorced", 4500, 1, 3, 2, 1, 12, 6),
    (10, 61, 0, "Human Resources", 4, "Human Resources", 3, "Male", 5, "Manager", "Married", 19800, 0, 3, 2, 3, 15, 3),
]


def _employee(number: int = 1, **overrides) -> dict:
    """Create a valid employee row dict, overriding any column."""
    row = dict(zip(COLUMNS, ROWS[0]))
    row["EmployeeNumber"] = number
    row.update(overrides)
    return row


@pytest.fixture
def make_employee():
    return _employee


@pytest.fixture
def raw_frame() -> pd.DataFrame:
    return pd.DataFrame(ROWS, columns=COLUMNS)


@pytest.fixture
def dataset(raw_frame):
    return build_dataset(raw_frame, source="fixture", on_invalid="abort")


@pytest.fixture
def frame(dataset) -> pd.DataFrame:
    return dataset.frame
