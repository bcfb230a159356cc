"""Sales activity report pipeline.

Runs the report stages strictly in order and stops at the first negative
outcome:

    validate id -> fetch sales -> effective-date check -> fetch report data
    -> filter -> limit -> headers -> render -> upload

Each collaborator and stage is invoked at most once per report, and never
after a stop. Stages are injected through ``ReportStages`` so any one of them
can be swapped without touching the orchestration.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from salesreport.report.document import SalesActivityReport, generate_report
from salesreport.report.models import ReportRow, SalesRecord
from salesreport.report.rules import (
    filter_report_data,
    get_report_headers,
    is_sales_id_valid,
    is_sales_out_of_effective_date,
    limit_report_data,
)
from salesreport.report.stores import ReportDataStore, SalesStore, UploadGateway

type Clock = Callable[[], datetime]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportStages:
    validate_sales_id: Callable[[str | None], bool] = is_sales_id_valid
    is_out_of_effective_date: Callable[[SalesRecord, datetime], bool] = is_sales_out_of_effective_date
    filter_rows: Callable[[bool, list[ReportRow]], list[ReportRow]] = filter_report_data
    limit_rows: Callable[[int, list[ReportRow]], list[ReportRow]] = limit_report_data
    headers: Callable[[bool], list[str]] = get_report_headers
    render: Callable[[list[str], list[ReportRow]], SalesActivityReport] = generate_report


class ReportPipeline:
    def __init__(
        self,
        sales_store: SalesStore,
        report_data_store: ReportDataStore,
        upload_gateway: UploadGateway,
        stages: ReportStages | None = None,
        clock: Clock = datetime.now,
    ):
        self.sales_store = sales_store
        self.report_data_store = report_data_store
        self.upload_gateway = upload_gateway
        self.stages = stages or ReportStages()
        self.clock = clock

    def get_sales_by_sales_id(self, sales_id: str) -> SalesRecord:
        return self.sales_store.get_sales_by_sales_id(sales_id)

    def get_report_data_by_sales(self, record: SalesRecord) -> list[ReportRow]:
        return self.report_data_store.get_report_data(record)

    def upload_report_as_xml(self, report: SalesActivityReport) -> str:
        payload = report.to_xml()
        self.upload_gateway.upload_document(payload)
        return payload

    def generate_sales_activity_report(
        self,
        sales_id: str | None,
        max_rows: int,
        is_nat_trade: bool,
        is_supervisor: bool,
    ) -> SalesActivityReport | None:
        """Build and upload the activity report for one sales record.

        Returns the uploaded report, or None when the id is missing or the
        record is not in effect. Store and gateway errors propagate.
        """
        stages = self.stages

        if not stages.validate_sales_id(sales_id):
            logger.info("No sales id given; skipping report")
            return None

        record = self.get_sales_by_sales_id(sales_id)
        if stages.is_out_of_effective_date(record, self.clock()):
            logger.info(f"Sales {sales_id} is out of its effective date; skipping report")
            return None

        report_data = self.get_report_data_by_sales(record)
        filtered = stages.filter_rows(is_supervisor, report_data)
        limited = stages.limit_rows(max_rows, filtered)
        headers = stages.headers(is_nat_trade)
        report = stages.render(headers, limited)

        self.upload_report_as_xml(report)
        logger.info(
            f"Uploaded report for {sales_id}: {len(limited)} of {len(report_data)} rows"
        )
        return report

    generate = generate_sales_activity_report
