"""Tests for report processing and the demo fallback."""

from __future__ import annotations

import logging

import pytest

from lab_report_parser.domain import ParameterStatus
from lab_report_parser.exceptions import DataValidationError
from lab_report_parser.models import ExtractionSettings
from lab_report_parser.processor import (
    NO_PARAMETERS_DETAILS,
    NO_PARAMETERS_ERROR,
    NO_PARAMETERS_SUGGESTION,
    ReportProcessor,
)

REPORT_TEXT = """
CITY DIAGNOSTICS
Hemoglobin: 14.5 g/dL
WBC Count: 7500 /cumm
Total Cholesterol: 245 mg/dL
"""


@pytest.fixture
def processor():
    return ReportProcessor()


@pytest.fixture
def report_file(tmp_path):
    path = tmp_path / "report.txt"
    path.write_text(REPORT_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "scan.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 64)
    return path


class TestProcessText:
    """Test extraction from text that is already available."""

    def test_successful_extraction(self, processor):
        result = processor.process_text(REPORT_TEXT, source_name="report")

        assert [p.parameter for p in result.parameters] == [
            "Hemoglobin",
            "WBC Count",
            "Total Cholesterol",
        ]
        assert not result.synthesized
        assert result.note == "Successfully extracted 3 health parameters"
        assert result.error is None

    def test_excerpt_is_truncated(self, processor):
        text = REPORT_TEXT + "x" * 2000
        result = processor.process_text(text)

        assert result.extracted_text == text[:1000]

    def test_empty_result_carries_guidance(self, processor):
        text = "lorem ipsum " * 60
        result = processor.process_text(text)

        assert result.is_empty
        assert result.error == NO_PARAMETERS_ERROR
        assert result.details == NO_PARAMETERS_DETAILS
        assert result.suggestion == NO_PARAMETERS_SUGGESTION
        assert result.extracted_text == text[:500]

    def test_non_string_input(self, processor):
        result = processor.process_text(None)

        assert result.is_empty
        assert result.extracted_text == ""

    def test_custom_catalog(self):
        from lab_report_parser.patterns import build_catalog

        processor = ReportProcessor(catalog=build_catalog({"Hemoglobin": "15.0-17.0"}))
        result = processor.process_text(REPORT_TEXT)

        assert result.parameters[0].status == ParameterStatus.LOW
        assert result.parameters[0].normal_range == "15.0-17.0"


class TestProcessArtifact:
    """Test the fallback for artifacts without usable text."""

    def test_missing_text_uses_demo(self, processor, caplog):
        with caplog.at_level(logging.WARNING):
            result = processor.process_artifact("scan.png", 2048)

        assert result.synthesized
        assert len(result.parameters) == 21
        assert result.note == "Demo Mode: Generated 21 sample health parameters"
        assert "using demo mode" in caplog.text

    def test_short_text_uses_demo(self, processor):
        result = processor.process_artifact("scan.png", 2048, text="Hb 14")

        assert result.synthesized

    def test_usable_text_is_parsed(self, processor):
        result = processor.process_artifact("report.pdf", 4096, text=REPORT_TEXT)

        assert not result.synthesized
        assert len(result.parameters) == 3

    def test_demo_is_reproducible(self, processor):
        first = processor.process_artifact("scan.png", 2048)
        second = processor.process_artifact("scan.png", 2048)

        assert first == second

    def test_size_limit(self, processor):
        with pytest.raises(DataValidationError, match="File too large"):
            processor.process_artifact("huge.pdf", 10 * 1024 * 1024 + 1)

    def test_size_at_limit_is_accepted(self, processor):
        result = processor.process_artifact("big.pdf", 10 * 1024 * 1024)
        assert result.synthesized

    def test_nudge_setting(self):
        nudged = ReportProcessor().process_artifact("diabetes_report.pdf", 81)
        plain = ReportProcessor(
            settings=ExtractionSettings(nudge_demo_values=False)
        ).process_artifact("diabetes_report.pdf", 81)

        glucose = {p.parameter: p for p in nudged.parameters}["Blood Glucose"]
        plain_glucose = {p.parameter: p for p in plain.parameters}["Blood Glucose"]
        assert glucose.status == ParameterStatus.HIGH
        assert plain_glucose.status == ParameterStatus.NORMAL


class TestProcessFile:
    """Test processing files from disk."""

    def test_text_file(self, processor, report_file):
        result = processor.process_file(report_file)

        assert result.source_name == "report.txt"
        assert not result.synthesized
        assert len(result.parameters) == 3

    def test_image_without_backend_uses_demo(self, processor, image_file, caplog):
        with caplog.at_level(logging.WARNING):
            result = processor.process_file(image_file)

        assert result.synthesized
        assert result.source_name == "scan.png"
        assert "Text extraction failed" in caplog.text

    def test_force_demo(self, processor, report_file):
        result = processor.process_file(report_file, force_demo=True)

        assert result.synthesized
        assert len(result.parameters) == 21

    def test_custom_text_extractor(self, image_file):
        processor = ReportProcessor(
            text_extractor=lambda path: "Hemoglobin: 9.0 g/dL from the scanner"
        )
        result = processor.process_file(image_file)

        assert not result.synthesized
        assert result.parameters[0].status == ParameterStatus.LOW

    def test_unsupported_type(self, processor, tmp_path):
        path = tmp_path / "report.docx"
        path.write_bytes(b"data")

        with pytest.raises(DataValidationError, match="Unsupported file type"):
            processor.process_file(path)

    def test_missing_file(self, processor, tmp_path):
        with pytest.raises(FileNotFoundError):
            processor.process_file(tmp_path / "missing.txt")

    def test_file_too_large(self, report_file):
        processor = ReportProcessor(settings=ExtractionSettings(max_file_size=10))

        with pytest.raises(DataValidationError, match="File too large"):
            processor.process_file(report_file)
