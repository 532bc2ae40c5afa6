"""Ingest employee rosters exported as CSV."""

import logging
from decimal import Decimal
from pathlib import Path

import pandas as pd

from orgaudit.domains.org.models import ROSTER_COLUMNS, Employee, roster_schema
from orgaudit.errors import IngestionError
from orgaudit.utils.io import read_text_csv
from orgaudit.utils.types import FilePath
from orgaudit.utils.validators import validate_dataframe, validate_unique

logger = logging.getLogger(__name__)


def _optional_id(value: str | float | None) -> int | None:
    return None if pd.isna(value) else int(value)


def frame_to_employees(df: pd.DataFrame) -> list[Employee]:
    """Convert a validated roster frame into Employee records, in row order."""
    return [
        Employee(
            id=int(row["id"]),
            first_name=row["firstName"],
            last_name=row["lastName"],
            salary=Decimal(row["salary"]),
            manager_id=_optional_id(row["managerId"]),
        )
        for row in df[ROSTER_COLUMNS].to_dict("records")
    ]


def load_roster_frame(path: FilePath) -> pd.DataFrame:
    """Read and validate a roster CSV, returning the raw text frame."""
    path = Path(path)
    if not path.is_file():
        raise IngestionError(f"Employee report not found: {path}")

    try:
        df = read_text_csv(path, ROSTER_COLUMNS)
    except (OSError, ValueError) as exc:
        raise IngestionError(f"Could not read employee report {path}: {exc}") from exc

    if df.empty:
        return df

    match validate_dataframe(df, roster_schema):
        case {"valid": True}:
            pass
        case {"errors": errors}:
            raise IngestionError(
                f"Employee report {path} failed validation:\n" + "\n".join(errors)
            )

    match validate_unique(df, ["id"]):
        case {"valid": False, "errors": errors}:
            for error in errors:
                logger.warning("%s in %s", error, path.name)
        case _:
            pass

    return df


def read_employees_csv(path: FilePath) -> list[Employee]:
    """Load an employee roster from ``id,firstName,lastName,salary,managerId`` CSV.

    The header line is skipped and fields are read by position, so header
    wording does not matter. ``managerId`` may be left empty or omitted for
    employees without a manager. Header-only files yield an empty roster.
    """
    df = load_roster_frame(path)
    employees = [] if df.empty else frame_to_employees(df)
    logger.info("Ingested %d employee records from %s", len(employees), Path(path).name)
    return employees
