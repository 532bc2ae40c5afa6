"""Shared type definitions for the org audit pipeline."""

from typing import TypeAlias
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from pathlib import Path


EmployeeID: TypeAlias = int
SalaryAmount: TypeAlias = Decimal
DepthExcess: TypeAlias = int
FilePath: TypeAlias = str | Path
ValidationOutcome: TypeAlias = dict[str, bool | str | list[str]]


class OutputFormat(StrEnum):
    TEXT = "text"
    TABLE = "table"
    JSON = "json"


@dataclass(frozen=True)
class HierarchySummary:
    headcount: int
    manager_count: int
    root_count: int
    dangling_count: int
    max_depth: int
