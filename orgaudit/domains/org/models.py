"""Employee records, salary findings and the pandera schema for raw rosters."""

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

import pandera as pa
from pandera import Column, Check

from orgaudit.utils.types import EmployeeID, SalaryAmount

ROSTER_COLUMNS = ["id", "firstName", "lastName", "salary", "managerId"]

_INTEGER_PATTERN = r"^-?\d+$"
_AMOUNT_PATTERN = r"^\d+(\.\d+)?$"


@dataclass(frozen=True)
class Employee:
    """One person in the organization.

    Equality and hashing cover every field, so two records only collapse
    into the same mapping key when they are identical in full.
    """

    id: EmployeeID
    first_name: str
    last_name: str
    salary: SalaryAmount
    manager_id: EmployeeID | None = None

    @property
    def is_root(self) -> bool:
        return self.manager_id is None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return f"{self.full_name} (id={self.id})"


class DiscrepancyType(StrEnum):
    BELOW = "below"
    ABOVE = "above"


@dataclass(frozen=True)
class SalaryDiscrepancy:
    type: DiscrepancyType
    amount: Decimal


# Raw rosters are read as strings so salaries reach Decimal untouched.
roster_schema = pa.DataFrameSchema(
    {
        "id": Column(checks=Check.str_matches(_INTEGER_PATTERN), nullable=False),
        "firstName": Column(checks=Check.str_length(min_value=1), nullable=False),
        "lastName": Column(checks=Check.str_length(min_value=1), nullable=False),
        "salary": Column(checks=Check.str_matches(_AMOUNT_PATTERN), nullable=False),
        "managerId": Column(checks=Check.str_matches(_INTEGER_PATTERN), nullable=True),
    },
    strict=False,
    coerce=False,
)
