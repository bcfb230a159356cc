"""Collaborators the report pipeline talks to: record stores and the upload gateway.

The protocols are what the pipeline depends on. The frame-backed stores and
the gateways below are the concrete implementations used by the CLI.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Protocol

import pandas as pd
from rich.console import Console

from salesreport.report.models import (
    REPORT_DATA_SCHEMA,
    SALES_SCHEMA,
    ReportRow,
    SalesRecord,
)
from salesreport.utils.io import FilePath, read_csv_file, write_text_output
from salesreport.utils.validators import validate_dataframe, validate_required_columns

logger = logging.getLogger(__name__)

SALES_COLUMNS = ["sales_id", "effective_from", "effective_to"]
REPORT_DATA_COLUMNS = ["sales_id", "type", "confidential"]

FLAG_VALUES = {
    "true": True, "yes": True, "y": True, "1": True,
    "false": False, "no": False, "n": False, "0": False,
}


class SalesNotFoundError(LookupError):
    """Raised when no sales record exists for the requested id."""


class SalesStore(Protocol):
    def get_sales_by_sales_id(self, sales_id: str) -> SalesRecord: ...


class ReportDataStore(Protocol):
    def get_report_data(self, record: SalesRecord) -> list[ReportRow]: ...


class UploadGateway(Protocol):
    def upload_document(self, payload: str) -> None: ...


def _text(value) -> str:
    return "" if pd.isna(value) else str(value)


def _parse_flag(value: str) -> bool | str:
    # Unrecognised values are passed through so schema validation rejects them
    return FLAG_VALUES.get(value.strip().lower(), value)


def _timestamp(value) -> datetime | None:
    if pd.isna(value):
        return None
    return pd.Timestamp(value).to_pydatetime()


def _load_frame(path: FilePath, columns: list[str], schema, **read_kwargs) -> pd.DataFrame:
    raw = read_csv_file(path, dtype={"sales_id": str}, **read_kwargs)

    for result in (validate_required_columns(raw, columns), validate_dataframe(raw, schema)):
        match result:
            case {"valid": False, "errors": errs}:
                raise ValueError(f"Invalid source {path}: " + "; ".join(errs[:3]))
            case {"valid": True, "data": frame}:
                raw = frame

    logger.info(f"Loaded {len(raw)} rows from {path}")
    return raw


def load_sales_frame(path: FilePath) -> pd.DataFrame:
    return _load_frame(path, SALES_COLUMNS, SALES_SCHEMA)


def load_report_data_frame(path: FilePath) -> pd.DataFrame:
    return _load_frame(
        path, REPORT_DATA_COLUMNS, REPORT_DATA_SCHEMA, converters={"confidential": _parse_flag}
    )


class FrameSalesStore:
    """Sales records looked up by id in a validated DataFrame."""

    def __init__(self, frame: pd.DataFrame):
        self._frame = frame

    def get_sales_by_sales_id(self, sales_id: str) -> SalesRecord:
        matches = self._frame[self._frame["sales_id"] == sales_id]
        if matches.empty:
            raise SalesNotFoundError(f"No sales record for id: {sales_id}")

        row = matches.iloc[0]
        return SalesRecord(
            sales_id=str(row["sales_id"]),
            effective_from=_timestamp(row["effective_from"]),
            effective_to=_timestamp(row["effective_to"]),
            sales_name=_text(row.get("sales_name")),
        )


class FrameReportDataStore:
    """Report rows for a sales record, in the order they appear in the frame."""

    def __init__(self, frame: pd.DataFrame):
        self._frame = frame

    def get_report_data(self, record: SalesRecord) -> list[ReportRow]:
        subset = self._frame[self._frame["sales_id"] == record.sales_id]
        rows = [
            ReportRow(
                type=_text(rec["type"]),
                confidential=bool(rec["confidential"]),
                sales_id=_text(rec["sales_id"]),
                sales_name=_text(rec.get("sales_name")) or record.sales_name,
                activity=_text(rec.get("activity")),
                time=_timestamp(rec.get("time")),
            )
            for rec in subset.to_dict("records")
        ]
        logger.debug(f"Fetched {len(rows)} report rows for {record.sales_id}")
        return rows


class DirectoryUploadGateway:
    """Uploads documents by writing them into a content directory."""

    def __init__(self, output_dir: FilePath):
        self.output_dir = Path(output_dir)

    def upload_document(self, payload: str) -> None:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        path = write_text_output(payload, self.output_dir / f"sales_activity_{stamp}.xml")
        logger.info(f"Uploaded report document to {path}")


class PreviewUploadGateway:
    """Dry-run gateway: prints the document instead of uploading it."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def upload_document(self, payload: str) -> None:
        self.console.print("[yellow]Dry run: document not uploaded[/yellow]")
        self.console.print(payload, markup=False, highlight=False)
