"""Shared fixtures."""

from __future__ import annotations

import pytest

from lab_report_parser.domain import ExtractionResult
from lab_report_parser.processor import ReportProcessor


@pytest.fixture
def sample_results() -> list[ExtractionResult]:
    """One parsed report, one demo report and one report with nothing recognized."""
    processor = ReportProcessor()
    return [
        processor.process_text(
            "Hemoglobin: 11.2 g/dL\nESR: 12 mm/hr", source_name="report.txt"
        ),
        processor.process_artifact("scan.png", 2048),
        processor.process_text("Patient name only, no results", source_name="blank.txt"),
    ]
