"""Tests for demo report generation."""

from __future__ import annotations

from lab_report_parser.domain import ParameterStatus
from lab_report_parser.extractors import extract_parameters
from lab_report_parser.patterns import DEFAULT_CATALOG
from lab_report_parser.synthesizer import (
    DEMO_MARKER,
    demo_values,
    derive_seed,
    derive_variance,
    is_synthesized,
    synthesize_report,
)


def _status(text, name):
    return {p.parameter: p.status for p in extract_parameters(text)}[name]


class TestSeedDerivation:
    """Test seed and variance derivation."""

    def test_seed(self):
        assert derive_seed("report.pdf", 1000) == 1010

    def test_variance(self):
        assert derive_variance(1010) == 0.1
        assert derive_variance(100) == 0.0
        assert 0 <= derive_variance(123_456_789) < 1


class TestSynthesizeReport:
    """Test the generated report text."""

    def test_reproducible(self):
        assert synthesize_report("report.pdf", 1000) == synthesize_report("report.pdf", 1000)

    def test_different_artifacts_differ(self):
        assert synthesize_report("report.pdf", 1000) != synthesize_report("report.pdf", 1001)

    def test_contains_marker(self):
        text = synthesize_report("scan.png", 2048)

        assert DEMO_MARKER in text
        assert is_synthesized(text)
        assert "File: scan.png" in text

    def test_every_catalog_parameter_extracted(self):
        parameters = extract_parameters(synthesize_report("report.pdf", 1000))

        assert [p.parameter for p in parameters] == [d.name for d in DEFAULT_CATALOG]

    def test_values_follow_variance(self):
        values = demo_values("report.pdf", 0.0)

        assert values["hemoglobin"] == "13.5"
        assert values["platelets"] == "250"
        assert values["cholesterol"] == "185"
        assert values["glucose"] == "90"


class TestKeywordNudging:
    """Test file name keywords pushing values out of range."""

    def test_diabetes_raises_glucose(self):
        # len("diabetes_report.pdf") + 81 == 100, so variance is 0
        text = synthesize_report("diabetes_report.pdf", 81)

        assert _status(text, "Blood Glucose") == ParameterStatus.HIGH
        assert is_synthesized(text)

    def test_nudge_disabled(self):
        text = synthesize_report("diabetes_report.pdf", 81, nudge=False)

        assert _status(text, "Blood Glucose") == ParameterStatus.NORMAL

    def test_lipid_raises_cholesterol(self):
        text = synthesize_report("lipid_panel.pdf", 85)

        assert _status(text, "Total Cholesterol") == ParameterStatus.HIGH
        assert _status(text, "LDL Cholesterol") == ParameterStatus.HIGH

    def test_anemia_lowers_hemoglobin(self):
        text = synthesize_report("anemia.png", 90)

        assert _status(text, "Hemoglobin") == ParameterStatus.LOW

    def test_infection_raises_wbc_and_crp(self):
        text = synthesize_report("infection.jpg", 87)

        assert _status(text, "WBC Count") == ParameterStatus.HIGH
        assert _status(text, "C-Reactive Protein") == ParameterStatus.HIGH


def test_is_synthesized_on_real_text():
    assert not is_synthesized("Hemoglobin: 13.5 g/dL")
    assert not is_synthesized("")
    assert not is_synthesized(None)
