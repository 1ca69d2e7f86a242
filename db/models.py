# db/models.py
"""
Source table model - the EmployeeData table the reports are computed from.
Read-only for this project; column names match the table exactly.
"""

from sqlalchemy import Column, Integer, String, Float
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class EmployeeData(Base):
    """One row per employee, as exported for the HR dashboard."""

    __tablename__ = "EmployeeData"

    employee_number = Column("EmployeeNumber", Integer, primary_key=True, autoincrement=False)

    # Categorical attributes
    department = Column("Department", String, nullable=False)
    job_role = Column("JobRole", String, nullable=False)
    job_level = Column("JobLevel", Integer, nullable=False)
    gender = Column("Gender", String, nullable=False)
    marital_status = Column("MaritalStatus", String, nullable=False)
    education_field = Column("EducationField", String, nullable=False)
    overtime = Column("OverTime", Integer, nullable=False, doc="1 = works overtime")
    attrition = Column("Attrition", Integer, nullable=False, doc="1 = left, 0 = stayed")

    # Ordinal ratings
    performance_rating = Column("PerformanceRating", Integer, nullable=False)
    work_life_balance = Column("WorkLifeBalance", Integer, nullable=False)
    environment_satisfaction = Column("EnvironmentSatisfaction", Integer, nullable=False)

    # Numeric measures
    age = Column("Age", Integer, nullable=False)
    monthly_income = Column("MonthlyIncome", Float, nullable=False)
    years_at_company = Column("YearsAtCompany", Integer, nullable=False)
    years_since_last_promotion = Column("YearsSinceLastPromotion", Integer, nullable=False)
    distance_from_home = Column("DistanceFromHome", Integer, nullable=False)
    training_times_last_year = Column("TrainingTimesLastYear", Integer, nullable=False)

    def __repr__(self):
        return f"<EmployeeData(emp_no={self.employee_number}, dept={self.department}, attrition={self.attrition})>"
