"""
Reporting utilities (text/PDF/Excel) for en14960 calculation results.
"""

from en14960.reports.simple_text_report import (
    build_breakdown_text,
    build_inspection_summary_text,
    build_play_area_text,
)
from en14960.reports.pdf_report import export_records_to_pdf
from en14960.reports.excel_report import export_records_to_excel

__all__ = [
    "build_breakdown_text",
    "build_inspection_summary_text",
    "build_play_area_text",
    "export_records_to_pdf",
    "export_records_to_excel",
]
