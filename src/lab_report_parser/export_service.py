"""Service for exporting extraction results to JSON, CSV and tables."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from .domain import ExtractionResult
from .models import OUTPUT_COLUMNS

logger = logging.getLogger(__name__)


class ExportService:
    """Service for exporting results to various formats."""

    @staticmethod
    def results_to_dataframe(results: list[ExtractionResult]) -> pd.DataFrame:
        """Flatten results into one row per parameter, in OUTPUT_COLUMNS order."""
        rows = [row for result in results for row in result.to_rows()]
        return pd.DataFrame(rows, columns=OUTPUT_COLUMNS)

    @staticmethod
    def export_results_to_json(
        results: list[ExtractionResult],
        output_path: str | Path,
        pretty: bool = True,
    ) -> None:
        """
        Export results to a single JSON file.

        Args:
            results: Extraction results to export
            output_path: Path to output JSON file
            pretty: Pretty-print JSON with indentation

        Raises:
            PermissionError: If output file cannot be written
            IOError: If there's an error writing the file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        logger.info("Exporting %d reports to JSON: %s", len(results), output_path)

        export_data: dict[str, Any] = {
            "version": "1.0",
            "total_reports": len(results),
            "reports": [result.to_json_dict() for result in results],
            "summary": {
                "synthesized_reports": sum(1 for r in results if r.synthesized),
                "empty_reports": sum(1 for r in results if r.is_empty),
                "total_parameters": sum(len(r.parameters) for r in results),
                "abnormal_parameters": sum(
                    len(r.abnormal_parameters()) for r in results
                ),
            },
        }

        try:
            with output_path.open("w", encoding="utf-8") as f:
                if pretty:
                    json.dump(export_data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(export_data, f, ensure_ascii=False)

            logger.info(
                "Successfully exported %d reports to %s", len(results), output_path
            )
        except PermissionError:
            logger.error("Permission denied writing to %s. Is the file open?", output_path)
            raise
        except Exception as e:
            logger.error("Error writing JSON file %s: %s", output_path, e)
            raise

    @staticmethod
    def export_results_to_csv(
        results: list[ExtractionResult], output_path: str | Path
    ) -> pd.DataFrame:
        """Export one row per parameter to CSV and return the written table."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        df = ExportService.results_to_dataframe(results)
        logger.info("Exporting %d parameter rows to CSV: %s", len(df), output_path)
        df.to_csv(output_path, index=False)
        return df
