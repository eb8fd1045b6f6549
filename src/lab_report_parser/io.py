"""I/O operations for reading report text and writing Excel files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl.utils import get_column_letter

from .exceptions import FileProcessingError
from .models import TEXT_SUFFIXES

logger = logging.getLogger(__name__)


def read_report_text(file_path: str | Path) -> str:
    """
    Read report text from a plain text file.

    This is the default text source of the report processor. Scanned images
    and PDFs need an OCR or PDF text backend, which is supplied by the caller.

    Raises:
        FileProcessingError: If the file is not a UTF-8 plain text file
    """
    file_path = Path(file_path)

    if file_path.suffix.lower() not in TEXT_SUFFIXES:
        raise FileProcessingError(
            f"No text extraction backend for {file_path.suffix} files: {file_path}"
        )

    try:
        logger.info("Reading report text: %s", file_path)
        return file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FileProcessingError(f"File is not UTF-8 text: {file_path}") from e
    except OSError as e:
        raise FileProcessingError(f"Could not read {file_path}: {e}") from e


class ExcelHandler:
    """Handles Excel output of extracted parameter tables."""

    def __init__(self, max_width: int = 60):
        """Initialize with maximum column width setting."""
        self.max_width = max_width

    def write_excel(
        self,
        df: pd.DataFrame,
        file_path: str | Path,
        sheet_name: str = "Parameters",
    ) -> None:
        """Write DataFrame to Excel file with auto-sized columns."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            logger.info("Writing Excel file: %s", file_path)
            with pd.ExcelWriter(file_path, engine="openpyxl") as writer:
                df.to_excel(writer, sheet_name=sheet_name, index=False)
                self._autosize_columns(writer, df, sheet_name)
            logger.info("Successfully wrote %d rows to %s", len(df), file_path)
        except PermissionError:
            logger.error(
                "Permission denied writing to %s. Is the file open?", file_path
            )
            raise
        except Exception as e:
            logger.error("Error writing Excel file %s: %s", file_path, e)
            raise

    def _autosize_columns(
        self, writer: pd.ExcelWriter, df: pd.DataFrame, sheet_name: str
    ) -> None:
        """Set column widths based on content length."""
        worksheet = writer.sheets[sheet_name]
        for idx, column in enumerate(df.columns, start=1):
            letter = get_column_letter(idx)
            content_lengths = [len(column)] + [len(str(cell)) for cell in df[column]]
            worksheet.column_dimensions[letter].width = min(
                max(content_lengths) + 2, self.max_width
            )

    @staticmethod
    def get_data_summary(df: pd.DataFrame) -> dict[str, Any]:
        """Get summary statistics for a parameter table."""
        if df.empty:
            return {"total_rows": 0, "reports": 0, "abnormal": 0}
        return {
            "total_rows": len(df),
            "reports": df["Source"].nunique(),
            "abnormal": int((df["Status"] != "normal").sum()),
        }
