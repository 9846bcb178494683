"""Tests for traceability records and report rendering."""

from __future__ import annotations

from datetime import timezone

import pandas as pd

from en14960.models import CalculatorResponse, PlayAreaValidation
from en14960.reports import (
    build_breakdown_text,
    build_inspection_summary_text,
    build_play_area_text,
    export_records_to_excel,
    export_records_to_pdf,
)
from en14960.reports.excel_report import build_frames
from en14960.services import user_capacity_calculator
from en14960.services.traceability import create_record


class TestTraceability:
    def test_create_record(self, sample_response):
        record = create_record("Runout", {"platform_height": 2.0}, sample_response)
        assert record.timestamp.tzinfo is timezone.utc
        assert record.inputs == {"platform_height": 2.0}

        data = record.to_dict()
        assert data["calculator"] == "Runout"
        assert data["result"]["value"] == 42


class TestTextReport:
    def test_breakdown_text(self, sample_response):
        text = build_breakdown_text("Slide", sample_response)
        assert text.splitlines() == [
            "Slide",
            "Result: 42m",
            "  - Step 1: Value 1",
            "  - Step 2: Value 2",
        ]

    def test_empty_explanation(self):
        response = CalculatorResponse(value={"users_1000mm": 0}, breakdown=[("Invalid dimensions", "")])
        text = build_breakdown_text("Capacity", response)
        assert "Result: users_1000mm: 0" in text
        assert text.endswith("  - Invalid dimensions")

    def test_capacity_text(self):
        text = build_breakdown_text("Capacity", user_capacity_calculator.calculate(10, 10))
        assert "users_1200mm: 75" in text
        assert "  - 1.2m users: 100 ÷ 1.3 = 75 users" in text

    def test_play_area_text(self):
        validation = PlayAreaValidation(valid=False, errors=["Too big"], measurements={"total_play_area": 4.0})
        lines = build_play_area_text(validation).splitlines()
        assert lines[1] == "Status: INVALID"
        assert "  ! Too big" in lines
        assert "  total_play_area: 4.0" in lines

    def test_inspection_summary(self, sample_records):
        text = build_inspection_summary_text(sample_records)
        assert text.count("Calculated: ") == 3
        assert "Result: 8" in text
        assert "Status: INVALID" in text


class TestExports:
    def test_pdf_export(self, sample_records, tmp_path):
        path = tmp_path / "inspection.pdf"
        export_records_to_pdf(sample_records, path)
        assert path.read_bytes().startswith(b"%PDF")

    def test_pdf_export_empty(self, tmp_path):
        path = tmp_path / "empty.pdf"
        export_records_to_pdf([], path)
        assert path.exists()

    def test_frames(self, sample_records):
        summary, breakdown = build_frames(sample_records)
        assert list(summary["Calculation"]) == ["Anchors", "Slide runout", "Play area"]
        assert summary.loc[2, "Status"] == "INVALID"
        anchors = breakdown[breakdown["Calculation"] == "Anchors"]
        assert list(anchors["Step"]) == [1, 2, 3, 4, 5]
        assert anchors.iloc[-1]["Explanation"] == "(2 + 2) × 2 = 8"

    def test_excel_export(self, sample_records, tmp_path):
        path = tmp_path / "inspection.xlsx"
        export_records_to_excel(sample_records, path)
        sheets = pd.read_excel(path, sheet_name=None)
        assert set(sheets) == {"Summary", "Breakdown"}
        assert len(sheets["Summary"]) == 3
        assert "Slide runout" in set(sheets["Breakdown"]["Calculation"])
