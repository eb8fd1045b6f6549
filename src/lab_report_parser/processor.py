"""Report processing: text acquisition, demo fallback and extraction."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .domain import ExtractedParameter, ExtractionResult
from .exceptions import DataValidationError, FileProcessingError
from .extractors import extract_parameters
from .io import read_report_text
from .models import SUPPORTED_SUFFIXES, ExtractionSettings
from .patterns import DEFAULT_CATALOG, Catalog
from .synthesizer import is_synthesized, synthesize_report

logger = logging.getLogger(__name__)

TextExtractor = Callable[[Path], str]

NO_PARAMETERS_ERROR = "No health parameters detected"
NO_PARAMETERS_DETAILS = (
    "Could not find recognizable health parameters in the document."
)
NO_PARAMETERS_SUGGESTION = (
    "Please ensure the document contains clear health parameter values and "
    "try again with a clearer image."
)


class ReportProcessor:
    """Turn uploaded artifacts or raw text into extraction results."""

    def __init__(
        self,
        catalog: Catalog | None = None,
        settings: ExtractionSettings | None = None,
        text_extractor: TextExtractor | None = None,
    ):
        """
        Initialize the processor.

        Args:
            catalog: Parameter definitions (default: DEFAULT_CATALOG)
            settings: Size and excerpt limits
            text_extractor: Callable returning the text of a file; raises
                FileProcessingError when no text can be obtained. Defaults to
                reading plain text files.
        """
        self.catalog = DEFAULT_CATALOG if catalog is None else catalog
        self.settings = settings or ExtractionSettings()
        self.text_extractor = text_extractor or read_report_text

    def process_text(
        self, raw_text: str, source_name: str = "<text>"
    ) -> ExtractionResult:
        """Extract parameters from text that is already available."""
        if not isinstance(raw_text, str):
            raw_text = ""
        parameters = extract_parameters(raw_text, self.catalog)
        return self._build_result(source_name, raw_text, parameters)

    def process_artifact(
        self, artifact_name: str, artifact_size: int, text: str | None = None
    ) -> ExtractionResult:
        """
        Process an artifact whose text may or may not have been obtained.

        Missing or too-short text falls back to a demo report derived from the
        artifact's name and size.

        Raises:
            DataValidationError: If the artifact exceeds the size limit
        """
        self._check_size(artifact_name, artifact_size)

        if not self._has_usable_text(text):
            logger.warning("No usable text for %s, using demo mode", artifact_name)
            text = synthesize_report(
                artifact_name,
                artifact_size,
                nudge=self.settings.nudge_demo_values,
            )

        return self.process_text(text, source_name=artifact_name)

    def process_file(
        self, file_path: str | Path, force_demo: bool = False
    ) -> ExtractionResult:
        """
        Process a report file from disk.

        Raises:
            FileNotFoundError: If the file does not exist
            DataValidationError: If the format is unsupported or the file too large
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Input file not found: {file_path}")

        if file_path.suffix.lower() not in SUPPORTED_SUFFIXES:
            raise DataValidationError(
                f"Unsupported file type: {file_path.suffix or '(none)'}. "
                "Please upload PDF, image or text files only"
            )

        size = file_path.stat().st_size
        logger.info("Processing: %s (%d bytes)", file_path.name, size)
        self._check_size(file_path.name, size)

        text = None
        if not force_demo:
            try:
                text = self.text_extractor(file_path)
            except FileProcessingError as e:
                logger.warning("Text extraction failed, using demo mode: %s", e)

        return self.process_artifact(file_path.name, size, text)

    def _check_size(self, artifact_name: str, artifact_size: int) -> None:
        limit = self.settings.max_file_size
        if artifact_size > limit:
            raise DataValidationError(
                f"File too large: {artifact_name} "
                f"(max {limit // (1024 * 1024)}MB)"
            )

    def _has_usable_text(self, text: str | None) -> bool:
        return text is not None and len(text.strip()) >= self.settings.min_text_length

    def _build_result(
        self,
        source_name: str,
        raw_text: str,
        parameters: list[ExtractedParameter],
    ) -> ExtractionResult:
        synthesized = is_synthesized(raw_text)

        if not parameters:
            logger.warning("No health parameters detected in %s", source_name)
            return ExtractionResult(
                source_name=source_name,
                synthesized=synthesized,
                extracted_text=raw_text[: self.settings.empty_excerpt_length],
                error=NO_PARAMETERS_ERROR,
                details=NO_PARAMETERS_DETAILS,
                suggestion=NO_PARAMETERS_SUGGESTION,
            )

        if synthesized:
            note = f"Demo Mode: Generated {len(parameters)} sample health parameters"
        else:
            note = f"Successfully extracted {len(parameters)} health parameters"

        return ExtractionResult(
            source_name=source_name,
            parameters=parameters,
            synthesized=synthesized,
            extracted_text=raw_text[: self.settings.excerpt_length],
            note=note,
        )
