"""
Shared fixtures for the org audit tests.

The sample roster is a five-person organization:

    Joe (123, root)
    ├── Martin (124)
    │   └── Alice (300)
    │       └── Brett (305)
    └── Bob (125)
"""
from decimal import Decimal

import pytest

from orgaudit.config import AnalysisConfig
from orgaudit.domains.org.models import Employee

SAMPLE_CSV = """id,firstName,lastName,salary,managerId
123,Joe,Doe,70000
124,Martin,Chekov,45000,123
125,Bob,Ronstad,47000,123
300,Alice,Hasacat,50000,124
305,Brett,Hardleaf,34000,300
"""


def make_employee(emp_id, salary="50000", manager_id=None, first="First", last="Last"):
    return Employee(emp_id, first, last, Decimal(salary), manager_id)


@pytest.fixture
def employees() -> list[Employee]:
    return [
        Employee(123, "Joe", "Doe", Decimal("70000"), None),
        Employee(124, "Martin", "Chekov", Decimal("45000"), 123),
        Employee(125, "Bob", "Ronstad", Decimal("47000"), 123),
        Employee(300, "Alice", "Hasacat", Decimal("50000"), 124),
        Employee(305, "Brett", "Hardleaf", Decimal("34000"), 300),
    ]


@pytest.fixture
def by_name(employees) -> dict[str, Employee]:
    return {e.first_name: e for e in employees}


@pytest.fixture
def config() -> AnalysisConfig:
    return AnalysisConfig(
        hierarchy_depth_threshold=4,
        low_salary_ratio=Decimal("1.2"),
        high_salary_ratio=Decimal("1.5"),
    )


@pytest.fixture
def roster_csv(tmp_path):
    path = tmp_path / "employees.csv"
    path.write_text(SAMPLE_CSV)
    return path
