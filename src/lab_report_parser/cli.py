"""Command line interface for the lab report parser."""

from __future__ import annotations

import argparse
import sys
import traceback
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from .domain import ExtractionResult, ParameterStatus
from .exceptions import LabReportParserError
from .export_service import ExportService
from .io import ExcelHandler
from .logging_config import setup_logging
from .models import ExtractionSettings
from .patterns import build_catalog, load_range_overrides
from .processor import ReportProcessor
from .validation import ValidationReport

console = Console()

STATUS_STYLES = {
    ParameterStatus.NORMAL: "green",
    ParameterStatus.HIGH: "red",
    ParameterStatus.LOW: "yellow",
}


def build_arg_parser() -> argparse.ArgumentParser:
    """Build command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Extract health parameters from lab report text.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s report.txt
  %(prog)s report.txt scan.png --json results.json --csv results.csv
  %(prog)s --text "Hemoglobin: 13.5 g/dL  RBC Count: 4.8 mill/cumm"
  %(prog)s blood_test.pdf --demo --ranges ranges.json
        """,
    )

    parser.add_argument(
        "inputs", nargs="*", help="Report files (.txt, or .pdf/images for demo mode)"
    )
    parser.add_argument("--text", help="Parse literal report text instead of a file")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Skip text extraction and generate demo reports for the input files",
    )
    parser.add_argument(
        "--ranges",
        metavar="FILE",
        help="JSON file overriding reference ranges, e.g. {\"Hemoglobin\": \"12.0-16.0\"}",
    )
    parser.add_argument("--json", metavar="FILE", help="Export results to JSON")
    parser.add_argument("--csv", metavar="FILE", help="Export parameter rows to CSV")
    parser.add_argument("--excel", metavar="FILE", help="Export parameter rows to Excel")
    parser.add_argument(
        "--validation-report",
        metavar="FILE",
        help="Generate summary report (text, json, or excel by extension)",
    )
    parser.add_argument(
        "--max-file-size",
        type=int,
        default=10,
        metavar="MB",
        help="Reject input files larger than this (default: 10)",
    )
    parser.add_argument(
        "--min-text-length",
        type=int,
        default=ExtractionSettings.min_text_length,
        help="Treat shorter extracted text as a failed extraction (default: 20)",
    )
    parser.add_argument(
        "--no-nudge",
        action="store_true",
        help="Do not adjust demo values based on file name keywords",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> ExtractionSettings:
    """Create ExtractionSettings from command line arguments."""
    return ExtractionSettings(
        max_file_size=args.max_file_size * 1024 * 1024,
        min_text_length=args.min_text_length,
        nudge_demo_values=not args.no_nudge,
    )


def validate_arguments(args: argparse.Namespace) -> None:
    """Validate command line arguments."""
    if not args.inputs and args.text is None:
        raise ValueError("Provide at least one input file or --text")

    if args.demo and not args.inputs:
        raise ValueError("--demo needs at least one input file")

    if args.max_file_size <= 0:
        raise ValueError("--max-file-size must be positive")

    if args.min_text_length < 0:
        raise ValueError("--min-text-length cannot be negative")

    if args.excel and Path(args.excel).suffix.lower() != ".xlsx":
        raise ValueError("Excel output file must have .xlsx extension")


def render_result(result: ExtractionResult) -> None:
    """Print one result as a table, or the guidance text when it is empty."""
    console.print()
    if result.is_empty:
        console.print(f"[bold]{result.source_name}[/bold]: [red]{result.error}[/red]")
        console.print(f"  {result.details}")
        console.print(f"  [dim]{result.suggestion}[/dim]")
        return

    table = Table(title=result.source_name, title_justify="left")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Unit")
    table.add_column("Normal Range")
    table.add_column("Status")

    for param in result.parameters:
        style = STATUS_STYLES[param.status]
        table.add_row(
            param.parameter,
            param.value,
            param.unit,
            param.normal_range,
            f"[{style}]{param.status.value}[/{style}]",
        )

    console.print(table)
    console.print(f"[dim]{result.note}[/dim]")


def print_summary(summary: dict[str, Any]) -> None:
    console.print("\nSummary:")
    console.print(f"  Reports with parameters: {summary['reports']}")
    console.print(f"  Parameters: {summary['total_rows']}")
    if summary["abnormal"] > 0:
        console.print(f"  Outside normal range: {summary['abnormal']}")


def export_results(args: argparse.Namespace, results: list[ExtractionResult]) -> None:
    """Write every export requested on the command line."""
    export_service = ExportService()

    if args.json:
        export_service.export_results_to_json(results, args.json)
        console.print(f"\nJSON export saved to: {args.json}")

    if args.csv:
        export_service.export_results_to_csv(results, args.csv)
        console.print(f"\nCSV export saved to: {args.csv}")

    if args.excel:
        ExcelHandler().write_excel(
            export_service.results_to_dataframe(results), args.excel
        )
        console.print(f"\nExcel export saved to: {args.excel}")

    if args.validation_report:
        report_path = Path(args.validation_report)
        if report_path.suffix.lower() == ".json":
            format_type = "json"
        elif report_path.suffix.lower() in {".xlsx", ".xls"}:
            format_type = "excel"
        else:
            format_type = "text"

        ValidationReport(results).save_report(report_path, output_format=format_type)
        console.print(f"\nValidation report saved to: {report_path}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    setup_logging(level=args.log_level, verbose=args.verbose)

    try:
        validate_arguments(args)

        overrides = load_range_overrides(args.ranges) if args.ranges else None
        processor = ReportProcessor(
            catalog=build_catalog(overrides),
            settings=settings_from_args(args),
        )

        results: list[ExtractionResult] = []
        if args.text is not None:
            results.append(processor.process_text(args.text))
        results.extend(
            processor.process_file(path, force_demo=args.demo) for path in args.inputs
        )

        for result in results:
            render_result(result)

        parameter_table = ExportService.results_to_dataframe(results)
        print_summary(ExcelHandler.get_data_summary(parameter_table))

        export_results(args, results)

    except FileNotFoundError as e:
        console.print(f"Error: {e}")
        sys.exit(1)
    except ValueError as e:
        console.print(f"Error: {e}")
        sys.exit(1)
    except PermissionError as e:
        console.print(f"Permission error: {e}")
        sys.exit(1)
    except LabReportParserError as e:
        console.print(f"Processing error: {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"Unexpected error: {e}")
        if args.verbose:
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
