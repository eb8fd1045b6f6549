"""Tests for JSON, CSV and Excel export."""

from __future__ import annotations

import json

import pandas as pd

from lab_report_parser.export_service import ExportService
from lab_report_parser.io import ExcelHandler
from lab_report_parser.models import OUTPUT_COLUMNS


class TestDataFrame:
    """Test flattening results into a table."""

    def test_columns_and_rows(self, sample_results):
        df = ExportService.results_to_dataframe(sample_results)

        assert list(df.columns) == OUTPUT_COLUMNS
        assert len(df) == 2 + 21
        assert df.iloc[0]["Parameter"] == "Hemoglobin"
        assert df.iloc[0]["Status"] == "low"
        assert df.iloc[0]["Synthesized"] == "No"
        assert set(df.iloc[2:]["Synthesized"]) == {"Yes"}

    def test_empty_results(self):
        df = ExportService.results_to_dataframe([])

        assert df.empty
        assert list(df.columns) == OUTPUT_COLUMNS


class TestJsonExport:
    """Test JSON export."""

    def test_export(self, sample_results, tmp_path):
        path = tmp_path / "out" / "results.json"
        ExportService.export_results_to_json(sample_results, path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["total_reports"] == 3
        assert data["summary"] == {
            "synthesized_reports": 1,
            "empty_reports": 1,
            "total_parameters": 23,
            "abnormal_parameters": 1
            + sum(
                1 for p in sample_results[1].parameters if p.status.value != "normal"
            ),
        }
        assert data["reports"][0]["parameters"][0]["normalRange"] == "13.0-17.0"
        assert data["reports"][2]["error"] == "No health parameters detected"

    def test_compact_export(self, sample_results, tmp_path):
        path = tmp_path / "results.json"
        ExportService.export_results_to_json(sample_results, path, pretty=False)

        assert "\n" not in path.read_text(encoding="utf-8")


class TestCsvAndExcelExport:
    """Test tabular exports."""

    def test_csv(self, sample_results, tmp_path):
        path = tmp_path / "results.csv"
        written = ExportService.export_results_to_csv(sample_results, path)

        df = pd.read_csv(path, dtype=str)
        assert len(df) == len(written) == 23
        assert list(df.columns) == OUTPUT_COLUMNS
        assert df.iloc[1]["Parameter"] == "ESR"
        assert df.iloc[1]["Value"] == "12"

    def test_excel(self, sample_results, tmp_path):
        path = tmp_path / "results.xlsx"
        df = ExportService.results_to_dataframe(sample_results)
        ExcelHandler().write_excel(df, path)

        read_back = pd.read_excel(path, sheet_name="Parameters", dtype=str)
        assert list(read_back.columns) == OUTPUT_COLUMNS
        assert len(read_back) == 23

    def test_data_summary(self, sample_results):
        df = ExportService.results_to_dataframe(sample_results)
        summary = ExcelHandler.get_data_summary(df)

        assert summary["total_rows"] == 23
        assert summary["reports"] == 2
        assert summary["abnormal"] >= 1

    def test_data_summary_empty(self):
        df = ExportService.results_to_dataframe([])
        assert ExcelHandler.get_data_summary(df) == {
            "total_rows": 0,
            "reports": 0,
            "abnormal": 0,
        }
