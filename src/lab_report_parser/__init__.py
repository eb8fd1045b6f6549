"""Lab Report Parser - extract and classify health parameters from lab report text."""

from .cli import main
from .domain import ExtractedParameter, ExtractionResult, ParameterStatus
from .exceptions import (
    ConfigurationError,
    DataValidationError,
    FileProcessingError,
    LabReportParserError,
)
from .export_service import ExportService
from .extractors import extract_parameters, normalize_text
from .io import ExcelHandler, read_report_text
from .models import ExtractionSettings, ParameterDefinition, ReferenceRange, UnitRescale
from .patterns import DEFAULT_CATALOG, CatalogBuilder, build_catalog
from .processor import ReportProcessor
from .synthesizer import DEMO_MARKER, is_synthesized, synthesize_report
from .validation import ValidationReport

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_CATALOG",
    "DEMO_MARKER",
    "CatalogBuilder",
    "ConfigurationError",
    "DataValidationError",
    "ExcelHandler",
    "ExportService",
    "ExtractedParameter",
    "ExtractionResult",
    "ExtractionSettings",
    "FileProcessingError",
    "LabReportParserError",
    "ParameterDefinition",
    "ParameterStatus",
    "ReferenceRange",
    "ReportProcessor",
    "UnitRescale",
    "ValidationReport",
    "build_catalog",
    "extract_parameters",
    "is_synthesized",
    "main",
    "normalize_text",
    "read_report_text",
    "synthesize_report",
]
