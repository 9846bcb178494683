"""
Excel export of calculation records: a summary sheet and a breakdown sheet.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill

from en14960.models import PlayAreaValidation
from en14960.reports.simple_text_report import format_value
from en14960.services.traceability import CalculationRecord

_LOG = logging.getLogger(__name__)

SUMMARY_COLUMNS = ["Calculation", "Calculated", "Inputs", "Result", "Status"]
BREAKDOWN_COLUMNS = ["Calculation", "Step", "Label", "Explanation"]


def _style_header(ws) -> None:
    header_fill = PatternFill(fill_type="solid", fgColor="4472C4")
    header_font = Font(bold=True, color="FFFFFF")
    header_alignment = Alignment(horizontal="center", vertical="center")
    for cell in ws[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = header_alignment


def _style_body_table(ws, *, start_row: int = 2, first_col_bold: bool = True, stripe: bool = True) -> None:
    """Zebra striping, bold first column and wrapped text."""
    stripe_fill = PatternFill(fill_type="solid", fgColor="F5F5F5")
    for row in ws.iter_rows(min_row=start_row, max_row=ws.max_row, min_col=1, max_col=ws.max_column):
        if first_col_bold and row and row[0].value not in (None, ""):
            row[0].font = Font(bold=True)
        for cell in row:
            if stripe and cell.row % 2 == 0:
                cell.fill = stripe_fill
            cell.alignment = Alignment(horizontal="left", vertical="center", wrap_text=True)


def _format_inputs(inputs: dict) -> str:
    return ", ".join(f"{name}={value}" for name, value in inputs.items())


def build_frames(records: Iterable[CalculationRecord]) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Summary and breakdown tables for ``records``."""
    summary_rows: list[dict] = []
    breakdown_rows: list[dict] = []

    for record in records:
        response = record.response
        if isinstance(response, PlayAreaValidation):
            result = "; ".join(response.errors)
            status = "VALID" if response.valid else "INVALID"
            steps = [(name, str(value)) for name, value in response.measurements.items()]
        else:
            result = format_value(response)
            status = ""
            steps = list(response.breakdown)

        summary_rows.append(
            {
                "Calculation": record.calculator,
                "Calculated": record.timestamp.isoformat(timespec="seconds"),
                "Inputs": _format_inputs(record.inputs),
                "Result": result,
                "Status": status,
            }
        )
        for index, (label, text) in enumerate(steps, start=1):
            breakdown_rows.append(
                {
                    "Calculation": record.calculator,
                    "Step": index,
                    "Label": label,
                    "Explanation": text,
                }
            )

    return (
        pd.DataFrame(summary_rows, columns=SUMMARY_COLUMNS),
        pd.DataFrame(breakdown_rows, columns=BREAKDOWN_COLUMNS),
    )


def export_records_to_excel(records: Iterable[CalculationRecord], filepath: Path) -> None:
    df_summary, df_breakdown = build_frames(records)

    with pd.ExcelWriter(str(filepath), engine="openpyxl") as writer:
        df_summary.to_excel(writer, sheet_name="Summary", index=False)
        ws_summary = writer.sheets["Summary"]
        ws_summary.column_dimensions["A"].width = 28
        ws_summary.column_dimensions["B"].width = 22
        ws_summary.column_dimensions["C"].width = 48
        ws_summary.column_dimensions["D"].width = 48
        ws_summary.column_dimensions["E"].width = 10
        _style_header(ws_summary)
        _style_body_table(ws_summary, start_row=2, first_col_bold=True, stripe=True)
        ws_summary.freeze_panes = "A2"

        df_breakdown.to_excel(writer, sheet_name="Breakdown", index=False)
        ws_breakdown = writer.sheets["Breakdown"]
        ws_breakdown.column_dimensions["A"].width = 28
        ws_breakdown.column_dimensions["B"].width = 6
        ws_breakdown.column_dimensions["C"].width = 28
        ws_breakdown.column_dimensions["D"].width = 60
        _style_header(ws_breakdown)
        _style_body_table(ws_breakdown, start_row=2, first_col_bold=False, stripe=True)
        ws_breakdown.freeze_panes = "A2"

    _LOG.info("Excel report with %d calculation(s) written to %s", len(df_summary), filepath)
