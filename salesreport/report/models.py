"""Sales report records and the pandera schemas their source frames must satisfy."""

from dataclasses import dataclass
from datetime import datetime

from pandera import Check, Column, DataFrameSchema

SALES_ACTIVITY = "SalesActivity"


@dataclass(frozen=True)
class SalesRecord:
    sales_id: str
    effective_from: datetime
    effective_to: datetime
    sales_name: str = ""


@dataclass(frozen=True)
class ReportRow:
    type: str
    confidential: bool
    sales_id: str = ""
    sales_name: str = ""
    activity: str = ""
    time: datetime | None = None

    def cells(self) -> list[str]:
        """Render the row's display values in header order."""
        stamp = self.time.isoformat(sep=" ") if self.time is not None else ""
        return [self.sales_id, self.sales_name, self.activity, stamp]


# One row per sales record; the effective window must not be inverted
SALES_SCHEMA = DataFrameSchema(
    columns={
        "sales_id": Column(str, Check.str_length(min_value=1), unique=True),
        "sales_name": Column(str, nullable=True, required=False),
        "effective_from": Column("datetime64[ns]"),
        "effective_to": Column("datetime64[ns]"),
    },
    checks=[
        Check(lambda df: df["effective_from"] <= df["effective_to"],
              name="effective_window_ordered"),
    ],
    strict=False,
    coerce=True,
)

# The confidential flag is never coerced: any value the reader could not parse
# as a boolean leaves the column non-bool and fails validation
REPORT_DATA_SCHEMA = DataFrameSchema(
    columns={
        "sales_id": Column(str, Check.str_length(min_value=1), coerce=True),
        "type": Column(str, coerce=True),
        "confidential": Column(bool),
        "sales_name": Column(str, nullable=True, required=False, coerce=True),
        "activity": Column(str, nullable=True, required=False, coerce=True),
        "time": Column("datetime64[ns]", nullable=True, required=False, coerce=True),
    },
    strict=False,
)
