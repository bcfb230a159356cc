"""Sales activity report — rules, rendering, collaborators, and the pipeline."""

from salesreport.report.document import SalesActivityReport, generate_report
from salesreport.report.models import SALES_ACTIVITY, ReportRow, SalesRecord
from salesreport.report.pipeline import ReportPipeline, ReportStages
from salesreport.report.stores import (
    DirectoryUploadGateway,
    FrameReportDataStore,
    FrameSalesStore,
    PreviewUploadGateway,
    SalesNotFoundError,
    load_report_data_frame,
    load_sales_frame,
)
