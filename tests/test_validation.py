"""Tests for the batch summary report."""

from __future__ import annotations

import json

import pandas as pd
import pytest

from lab_report_parser.validation import ValidationReport


class TestSummary:
    """Test summary statistics."""

    def test_counts(self, sample_results):
        summary = ValidationReport(sample_results).get_summary()

        assert summary["total_reports"] == 3
        assert summary["synthesized_reports"] == 1
        assert summary["empty_reports"] == 1
        assert summary["total_parameters"] == 23
        assert sum(summary["status_counts"].values()) == 23
        assert summary["abnormal_by_parameter"]["Hemoglobin"] >= 1

    def test_no_results(self):
        summary = ValidationReport([]).get_summary()

        assert summary["total_reports"] == 0
        assert summary["average_parameters"] == 0
        assert summary["status_counts"] == {"normal": 0, "high": 0, "low": 0}

    def test_problematic_results(self, sample_results):
        problematic = ValidationReport(sample_results).get_problematic_results()
        sources = [r.source_name for r in problematic]

        assert "report.txt" in sources
        assert "blank.txt" in sources


class TestReports:
    """Test rendered and saved reports."""

    def test_text_report(self, sample_results):
        text = ValidationReport(sample_results).generate_text_report()

        assert "EXTRACTION REPORT" in text
        assert "Total Reports: 3" in text
        assert "Hemoglobin: 11.2 g/dL (low, normal 13.0-17.0)" in text
        assert "blank.txt" in text
        assert text.endswith("=" * 80)

    def test_json_report(self, sample_results):
        data = ValidationReport(sample_results).generate_json_report()

        first = data["problematic_reports"][0]
        assert first["source"] == "report.txt"
        assert first["abnormal"][0]["parameter"] == "Hemoglobin"

    def test_dataframe(self, sample_results):
        df = ValidationReport(sample_results).to_dataframe()

        assert len(df) == 3
        assert df.iloc[0]["Low"] == 1
        assert df.iloc[0]["Abnormal"] == "Hemoglobin"
        assert df.iloc[2]["Abnormal"] == "None"

    @pytest.mark.parametrize("output_format", ["text", "json", "excel"])
    def test_save_report(self, sample_results, tmp_path, output_format):
        suffix = {"text": ".txt", "json": ".json", "excel": ".xlsx"}[output_format]
        path = tmp_path / f"report{suffix}"
        ValidationReport(sample_results).save_report(path, output_format=output_format)

        assert path.exists()
        if output_format == "json":
            assert json.loads(path.read_text())["summary"]["total_reports"] == 3
        if output_format == "excel":
            assert len(pd.read_excel(path)) == 3

    def test_unsupported_format(self, sample_results, tmp_path):
        with pytest.raises(ValueError, match="Unsupported format"):
            ValidationReport(sample_results).save_report(tmp_path / "r.html", "html")
