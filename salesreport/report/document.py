"""Render a sales activity report into its uploadable XML document."""

from collections.abc import Sequence
from dataclasses import dataclass

import dicttoxml
import pandas as pd

from salesreport.report.models import ReportRow

REPORT_ROOT = "SalesActivityReport"


@dataclass(frozen=True)
class SalesActivityReport:
    headers: tuple[str, ...]
    rows: tuple[ReportRow, ...]

    def to_payload(self) -> dict:
        """Headers, then rows of cells, in report order."""
        return {
            "headers": list(self.headers),
            "rows": [{"type": row.type, "cells": row.cells()} for row in self.rows],
        }

    def to_xml(self) -> str:
        """Serialize the report as an XML document string."""
        return dicttoxml.dicttoxml(
            self.to_payload(), custom_root=REPORT_ROOT, attr_type=False
        ).decode("utf-8")

    def to_frame(self) -> pd.DataFrame:
        """Tabular view of the report keyed by header label."""
        return pd.DataFrame([row.cells() for row in self.rows], columns=list(self.headers))


def generate_report(headers: Sequence[str], rows: Sequence[ReportRow]) -> SalesActivityReport:
    return SalesActivityReport(headers=tuple(headers), rows=tuple(rows))
