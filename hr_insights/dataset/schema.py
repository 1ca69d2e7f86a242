"""Pydantic schema for a single EmployeeData record."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hr_insights import config


class EmployeeRecord(BaseModel):
    """One row of the EmployeeData table, validated against its invariants."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    employee_number: int = Field(..., alias="EmployeeNumber", description="Unique employee key")
    age: int = Field(..., alias="Age", ge=0)
    attrition: int = Field(..., alias="Attrition", description="1 = left, 0 = stayed")
    department: str = Field(..., alias="Department", min_length=1)
    distance_from_home: int = Field(..., alias="DistanceFromHome", ge=0)
    education_field: str = Field(..., alias="EducationField", min_length=1)
    environment_satisfaction: int = Field(..., alias="EnvironmentSatisfaction")
    gender: str = Field(..., alias="Gender", min_length=1)
    job_level: int = Field(..., alias="JobLevel", ge=1)
    job_role: str = Field(..., alias="JobRole", min_length=1)
    marital_status: str = Field(..., alias="MaritalStatus", min_length=1)
    monthly_income: float = Field(..., alias="MonthlyIncome", ge=0, allow_inf_nan=False)
    overtime: int = Field(..., alias="OverTime")
    performance_rating: int = Field(..., alias="PerformanceRating")
    training_times_last_year: int = Field(..., alias="TrainingTimesLastYear", ge=0)
    work_life_balance: int = Field(..., alias="WorkLifeBalance")
    years_at_company: int = Field(..., alias="YearsAtCompany", ge=0)
    years_since_last_promotion: int = Field(..., alias="YearsSinceLastPromotion", ge=0)

    @field_validator("attrition", "overtime")
    @classmethod
    def check_flag(cls, value: int) -> int:
        if value not in (0, 1):
            raise ValueError("must be 0 or 1")
        return value

    @field_validator("performance_rating", "work_life_balance", "environment_satisfaction")
    @classmethod
    def check_rating(cls, value: int, info) -> int:
        alias = cls.model_fields[info.field_name].alias
        low, high = config.RATING_RANGES[alias]
        if not low <= value <= high:
            raise ValueError(f"must be between {low} and {high}")
        return value

    @field_validator("age")
    @classmethod
    def check_age(cls, value: int) -> int:
        if not config.LEGACY_AGE_BANDS and value < config.MIN_EMPLOYEE_AGE:
            raise ValueError(f"must be at least {config.MIN_EMPLOYEE_AGE}")
        return value

    @model_validator(mode="after")
    def check_promotion_within_tenure(self) -> "EmployeeRecord":
        if self.years_since_last_promotion > self.years_at_company:
            raise ValueError("YearsSinceLastPromotion cannot exceed YearsAtCompany")
        return self

    def to_row(self) -> Dict[str, Any]:
        """Return the record keyed by canonical column names."""
        return self.model_dump(by_alias=True)
