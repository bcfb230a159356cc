"""Data validation utilities using pandera."""

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

type ValidationResult = dict[str, str | bool | list[str] | pd.DataFrame | None]


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationResult:
    """Validate a DataFrame against a pandera schema.

    On success the coerced frame is returned under ``data``; on failure
    ``errors`` holds one message per failure case.
    """
    try:
        validated = schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": [], "data": validated}
    except pa.errors.SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val}:
                    errors.append(f"Column '{col}' failed check '{check}': {val}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        return {"valid": False, "status": "error", "errors": errors, "data": None}


def validate_required_columns(df: pd.DataFrame, columns: list[str]) -> ValidationResult:
    """Check that the frame carries every column the report needs."""
    missing = [col for col in columns if col not in df.columns]

    match missing:
        case []:
            return {"valid": True, "status": "ok", "errors": [], "data": df}
        case cols:
            return {
                "valid": False,
                "status": "error",
                "errors": [f"Missing required columns: {cols}"],
                "data": None,
            }
