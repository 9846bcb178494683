"""
PDF inspection report for a set of calculation records.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import (
    BaseDocTemplate,
    Frame,
    PageTemplate,
    Paragraph,
    Spacer,
    Table,
    TableStyle,
)

from en14960.models import PlayAreaValidation
from en14960.reports.simple_text_report import format_value
from en14960.services.traceability import CalculationRecord

_LOG = logging.getLogger(__name__)

_TABLE_STYLE = [
    ("BACKGROUND", (0, 0), (-1, 0), "#4472C4"),
    ("TEXTCOLOR", (0, 0), (-1, 0), "white"),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, 0), 10),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
    ("BACKGROUND", (0, 1), (-1, -1), "#F5F5F5"),
    ("GRID", (0, 0), (-1, -1), 0.4, "#BBBBBB"),
    ("FONTNAME", (0, 1), (0, -1), "Helvetica-Bold"),
    ("FONTSIZE", (0, 1), (-1, -1), 9),
    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ("LEFTPADDING", (0, 0), (-1, -1), 6),
    ("RIGHTPADDING", (0, 0), (-1, -1), 6),
    ("TOPPADDING", (0, 0), (-1, -1), 3),
    ("BOTTOMPADDING", (0, 1), (-1, -1), 3),
]


def _fmt(value: object) -> str:
    """Safely format input values for PDF tables."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    try:
        return format(float(value), "g")
    except (TypeError, ValueError):
        return str(value)


def _section_title(text: str, styles) -> Paragraph:
    return Paragraph(f"<b>{escape(text)}</b>", styles["Heading3"])


def _table(rows: list[list[object]], col_widths: list[float]) -> Table:
    table = Table(rows, colWidths=col_widths, repeatRows=1)
    table.setStyle(TableStyle(_TABLE_STYLE))
    return table


def _cell(text: str, styles) -> Paragraph:
    return Paragraph(escape(text), styles["BodyText"])


def _record_flowables(record: CalculationRecord, styles) -> list:
    story: list = []
    story.append(_section_title(record.calculator, styles))
    story.append(
        Paragraph(
            f"Calculated: {record.timestamp.isoformat(timespec='seconds')}",
            styles["Normal"],
        )
    )
    story.append(Spacer(1, 0.2 * cm))

    if record.inputs:
        input_rows: list[list[object]] = [["Input", "Value"]]
        input_rows.extend([name, _fmt(value)] for name, value in record.inputs.items())
        story.append(_table(input_rows, [8 * cm, 8 * cm]))
        story.append(Spacer(1, 0.3 * cm))

    response = record.response
    if isinstance(response, PlayAreaValidation):
        status = "VALID" if response.valid else "INVALID"
        story.append(Paragraph(f"<b>Status:</b> {status}", styles["Normal"]))
        for error in response.errors:
            story.append(Paragraph(f"• {escape(error)}", styles["Normal"]))
        if response.measurements:
            rows: list[list[object]] = [["Measurement", "Value"]]
            rows.extend([name, _fmt(value)] for name, value in response.measurements.items())
            story.append(Spacer(1, 0.2 * cm))
            story.append(_table(rows, [8 * cm, 8 * cm]))
    else:
        story.append(
            Paragraph(f"<b>Result:</b> {escape(format_value(response))}", styles["Normal"])
        )
        if response.breakdown:
            rows = [["Step", "Explanation"]]
            rows.extend([label, _cell(text, styles)] for label, text in response.breakdown)
            story.append(Spacer(1, 0.2 * cm))
            story.append(_table(rows, [5 * cm, 11 * cm]))

    story.append(Spacer(1, 0.6 * cm))
    return story


def export_records_to_pdf(
    records: Iterable[CalculationRecord],
    filepath: Path,
    title: str = "EN 14960 Inspection Calculations",
) -> None:
    """Write one section per record: inputs, result and derivation steps."""
    doc = BaseDocTemplate(
        str(filepath),
        pagesize=A4,
        rightMargin=2.2 * cm,
        leftMargin=2.2 * cm,
        topMargin=2.0 * cm,
        bottomMargin=2.0 * cm,
    )
    doc.title = title
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "CustomTitle",
        parent=styles["Heading1"],
        fontSize=16,
        leading=20,
        spaceAfter=6,
    )
    styles["Heading3"].spaceBefore = 6
    styles["Heading3"].spaceAfter = 2

    def _draw_page_frame(canvas, _doc) -> None:
        width, height = canvas._pagesize
        margin = 0.7 * cm
        canvas.saveState()
        canvas.setStrokeColor(colors.HexColor("#000000"))
        canvas.setLineWidth(0.7)
        canvas.rect(margin, margin, width - 2 * margin, height - 2 * margin, stroke=1, fill=0)
        canvas.restoreState()

    frame = Frame(doc.leftMargin, doc.bottomMargin, doc.width, doc.height, id="main_frame")
    doc.addPageTemplates([PageTemplate(id="Portrait", frames=[frame], onPage=_draw_page_frame)])

    story: list = [Paragraph(escape(title), title_style), Spacer(1, 0.3 * cm)]
    count = 0
    for record in records:
        story.extend(_record_flowables(record, styles))
        count += 1
    if count == 0:
        story.append(Paragraph("No calculations recorded.", styles["Normal"]))

    doc.build(story)
    _LOG.info("PDF report with %d calculation(s) written to %s", count, filepath)
