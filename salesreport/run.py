"""Command-line runner — generates and uploads one sales activity report."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from salesreport.config import ReportConfig, load_report_config
from salesreport.report import (
    DirectoryUploadGateway,
    FrameReportDataStore,
    FrameSalesStore,
    PreviewUploadGateway,
    ReportPipeline,
    SalesActivityReport,
    SalesNotFoundError,
    load_report_data_frame,
    load_sales_frame,
)

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a sales activity report")
    parser.add_argument("sales_id", nargs="?", default=None, help="Sales record to report on")
    parser.add_argument("--env", default="production",
                        choices=["production", "staging", "development"])
    parser.add_argument("--sales", type=Path, help="CSV of sales records")
    parser.add_argument("--report-data", type=Path, help="CSV of report data rows")
    parser.add_argument("--max-rows", type=int, help="Maximum rows in the report")
    parser.add_argument("--nat-trade", action=argparse.BooleanOptionalAction, default=None,
                        help="Label the time column as national-trade time")
    parser.add_argument("--supervisor", action=argparse.BooleanOptionalAction, default=None,
                        help="Include confidential sales activity")
    parser.add_argument("--output-dir", type=Path, help="Directory documents are uploaded to")
    parser.add_argument("--dry-run", action="store_true", help="Print the document, don't upload")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def resolve_config(args: argparse.Namespace) -> ReportConfig:
    """Environment config with any command-line flags layered on top."""
    config = load_report_config(args.env)
    flags = {
        "sales_path": args.sales,
        "report_data_path": args.report_data,
        "max_rows": args.max_rows,
        "is_nat_trade": args.nat_trade,
        "is_supervisor": args.supervisor,
        "output_dir": args.output_dir,
    }
    return replace(config, **{k: v for k, v in flags.items() if v is not None})


def build_pipeline(config: ReportConfig, dry_run: bool = False) -> ReportPipeline:
    gateway = PreviewUploadGateway(console) if dry_run else DirectoryUploadGateway(config.output_dir)
    return ReportPipeline(
        sales_store=FrameSalesStore(load_sales_frame(config.sales_path)),
        report_data_store=FrameReportDataStore(load_report_data_frame(config.report_data_path)),
        upload_gateway=gateway,
    )


def print_report(report: SalesActivityReport) -> None:
    table = Table(title="Sales Activity Report")
    for header in report.headers:
        table.add_column(header)

    for row in report.to_frame().itertuples(index=False):
        table.add_row(*[str(value) for value in row])

    console.print(table)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        config = resolve_config(args)
        pipeline = build_pipeline(config, dry_run=args.dry_run)
        report = pipeline.generate_sales_activity_report(
            args.sales_id,
            config.max_rows,
            config.is_nat_trade,
            config.is_supervisor,
        )
    except SalesNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        return 1
    except (OSError, ValueError) as exc:
        console.print(f"[red]ERROR: {exc}[/red]")
        return 1

    match report:
        case None:
            console.print("[yellow]No report generated (missing id or sales not in effect)[/yellow]")
        case SalesActivityReport(rows=rows):
            print_report(report)
            console.print(f"[bold green]Report uploaded with {len(rows)} rows.[/bold green]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
