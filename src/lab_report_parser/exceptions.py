"""Custom exceptions for the lab report parser."""

from __future__ import annotations


class LabReportParserError(Exception):
    """Base exception for lab report parser errors."""

    pass


class DataValidationError(LabReportParserError):
    """Raised when an input artifact is rejected before extraction."""

    pass


class FileProcessingError(LabReportParserError):
    """Raised when text cannot be obtained from an input artifact."""

    pass


class ConfigurationError(LabReportParserError):
    """Raised when reference range configuration is invalid."""

    pass
