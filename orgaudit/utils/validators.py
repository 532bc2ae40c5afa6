"""Data validation utilities using pandera."""

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

from orgaudit.utils.types import ValidationOutcome


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationOutcome:
    """Validate a DataFrame against a pandera schema, collecting every failure."""
    try:
        schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": []}
    except pa.errors.SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val, "index": idx}:
                    errors.append(f"Row {idx}: column '{col}' failed check '{check}': {val}")
                case {"column": col, "check": check, "failure_case": val}:
                    errors.append(f"Column '{col}' failed check '{check}': {val}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        return {"valid": False, "status": "error", "errors": errors}


def validate_unique(df: pd.DataFrame, columns: list[str]) -> ValidationOutcome:
    """Check that specified columns form a unique key."""
    duplicates = df.duplicated(subset=columns, keep=False)
    dup_count = int(duplicates.sum())

    match dup_count:
        case 0:
            return {"valid": True, "status": "ok", "errors": []}
        case n:
            return {
                "valid": False,
                "status": "error",
                "errors": [f"Found {n} duplicate rows on columns {columns}"],
            }
