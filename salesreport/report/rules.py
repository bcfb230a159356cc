"""Per-stage decisions of the sales activity report.

Each function is pure: it reads its arguments and returns a new value
without touching the records or rows it was given.
"""

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from salesreport.report.models import SALES_ACTIVITY, ReportRow, SalesRecord

type RowPredicate = Callable[[bool, ReportRow], bool]

logger = logging.getLogger(__name__)

NAT_TRADE_HEADERS = ("Sales ID", "Sales Name", "Activity", "Time")
LOCAL_HEADERS = ("Sales ID", "Sales Name", "Activity", "Local Time")


def is_sales_id_valid(sales_id: str | None) -> bool:
    return sales_id is not None


def is_sales_out_of_effective_date(record: SalesRecord, now: datetime) -> bool:
    """True when ``now`` falls outside the half-open window [from, to)."""
    return now < record.effective_from or now >= record.effective_to


def is_sales_report_data_valid(is_supervisor: bool, row: ReportRow) -> bool:
    """Decide whether a report row may appear in the report.

    Only SalesActivity rows are reported. Confidential ones are visible to
    supervisors only; ``row.confidential`` is not read for other types.
    """
    if row.type != SALES_ACTIVITY:
        return False
    if row.confidential:
        return is_supervisor
    return True


def filter_report_data(
    is_supervisor: bool,
    rows: Sequence[ReportRow],
    is_valid: RowPredicate = is_sales_report_data_valid,
) -> list[ReportRow]:
    kept = [row for row in rows if is_valid(is_supervisor, row)]
    logger.debug(f"Kept {len(kept)} of {len(rows)} report rows (supervisor={is_supervisor})")
    return kept


def limit_report_data(max_rows: int, rows: Sequence[ReportRow]) -> list[ReportRow]:
    if max_rows < 0:
        raise ValueError(f"max_rows must be non-negative, got {max_rows}")
    return list(rows[:max_rows])


def get_report_headers(is_nat_trade: bool) -> list[str]:
    # National-trade reports show trade time, everything else local time
    return list(NAT_TRADE_HEADERS if is_nat_trade else LOCAL_HEADERS)
