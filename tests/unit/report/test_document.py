"""Unit tests for report rendering."""

import xml.etree.ElementTree as ET
from datetime import datetime

from salesreport.report.document import generate_report
from salesreport.report.models import ReportRow
from salesreport.report.rules import get_report_headers


def _row(activity: str) -> ReportRow:
    return ReportRow(
        type="SalesActivity",
        confidential=False,
        sales_id="S01",
        sales_name="Ada",
        activity=activity,
        time=datetime(2026, 10, 19, 9, 30),
    )


def test_to_xml_lists_headers_then_rows_in_order() -> None:
    """Header labels and data rows keep their order in the document."""
    report = generate_report(get_report_headers(False), [_row("call"), _row("visit")])

    root = ET.fromstring(report.to_xml().encode("utf-8"))

    assert root.tag == "SalesActivityReport"
    assert [h.text for h in root.find("headers")] == [
        "Sales ID", "Sales Name", "Activity", "Local Time",
    ]
    rows = root.find("rows").findall("item")
    assert [row.findtext("type") for row in rows] == ["SalesActivity", "SalesActivity"]
    assert [[c.text for c in row.find("cells")] for row in rows] == [
        ["S01", "Ada", "call", "2026-10-19 09:30:00"],
        ["S01", "Ada", "visit", "2026-10-19 09:30:00"],
    ]


def test_to_xml_with_no_rows_still_carries_headers() -> None:
    """An empty report still names its columns."""
    root = ET.fromstring(generate_report(get_report_headers(True), []).to_xml().encode("utf-8"))

    assert len(root.find("headers")) == 4
    assert len(root.find("rows")) == 0


def test_row_without_time_renders_empty_cell() -> None:
    """Missing timestamps render as an empty cell rather than failing."""
    row = ReportRow(type="SalesActivity", confidential=False, activity="note")

    assert row.cells() == ["", "", "note", ""]


def test_generate_report_copies_inputs() -> None:
    """Later changes to the caller's lists do not leak into the report."""
    headers = get_report_headers(True)
    rows = [_row("call")]
    report = generate_report(headers, rows)

    headers.append("Extra")
    rows.clear()

    assert len(report.headers) == 4
    assert len(report.rows) == 1


def test_to_frame_uses_header_labels() -> None:
    """The tabular view is keyed by the report's header labels."""
    frame = generate_report(get_report_headers(True), [_row("call")]).to_frame()

    assert list(frame.columns) == ["Sales ID", "Sales Name", "Activity", "Time"]
    assert frame.iloc[0]["Activity"] == "call"


def test_to_payload_orders_headers_before_rows() -> None:
    """The document payload lists headers first, then each row's cells."""
    payload = generate_report(get_report_headers(True), [_row("call")]).to_payload()

    assert list(payload) == ["headers", "rows"]
    assert payload["rows"] == [
        {"type": "SalesActivity", "cells": ["S01", "Ada", "call", "2026-10-19 09:30:00"]},
    ]
