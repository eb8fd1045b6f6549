"""Validation and reporting for batches of extraction results."""

from __future__ import annotations

import json
from operator import itemgetter
from pathlib import Path
from typing import Any

import pandas as pd

from .domain import ExtractionResult, ParameterStatus


class ValidationReport:
    """Generate summary reports for a batch of extraction results."""

    def __init__(self, results: list[ExtractionResult]):
        """Initialize with list of extraction results."""
        self.results = results

    def get_summary(self) -> dict[str, Any]:
        """Get overall summary statistics."""
        total_reports = len(self.results)
        total_parameters = sum(len(r.parameters) for r in self.results)

        status_counts = {status.value: 0 for status in ParameterStatus}
        abnormal_by_parameter: dict[str, int] = {}
        for result in self.results:
            for status, count in result.status_counts().items():
                status_counts[status] += count
            for param in result.abnormal_parameters():
                abnormal_by_parameter[param.parameter] = (
                    abnormal_by_parameter.get(param.parameter, 0) + 1
                )

        avg_parameters = total_parameters / total_reports if total_reports > 0 else 0

        return {
            "total_reports": total_reports,
            "synthesized_reports": sum(1 for r in self.results if r.synthesized),
            "empty_reports": sum(1 for r in self.results if r.is_empty),
            "total_parameters": total_parameters,
            "average_parameters": round(avg_parameters, 3),
            "status_counts": status_counts,
            "abnormal_by_parameter": abnormal_by_parameter,
        }

    def get_problematic_results(self) -> list[ExtractionResult]:
        """Get results that recognized nothing or contain abnormal values."""
        return [r for r in self.results if r.is_empty or r.abnormal_parameters()]

    def generate_text_report(self) -> str:
        """Generate human-readable text report."""
        summary = self.get_summary()
        total = summary["total_reports"]
        empty_pct = summary["empty_reports"] / total * 100 if total else 0.0

        lines = [
            "=" * 80,
            "EXTRACTION REPORT",
            "=" * 80,
            "",
            "SUMMARY",
            "-" * 80,
            f"Total Reports: {total}",
            f"Demo (synthesized) Reports: {summary['synthesized_reports']}",
            f"Reports Without Parameters: {summary['empty_reports']} "
            f"({empty_pct:.1f}%)",
            f"Total Parameters: {summary['total_parameters']}",
            f"Average Parameters per Report: {summary['average_parameters']:.3f}",
            "",
            "STATUS COUNTS",
            "-" * 80,
        ]
        lines.extend(
            f"  {status}: {count}" for status, count in summary["status_counts"].items()
        )
        lines.append("")

        if summary["abnormal_by_parameter"]:
            lines.extend(("ABNORMAL PARAMETERS", "-" * 80))
            sorted_abnormal = sorted(
                summary["abnormal_by_parameter"].items(),
                key=itemgetter(1),
                reverse=True,
            )
            for name, count in sorted_abnormal:
                lines.append(f"  [{count:3d}] {name}")
            lines.append("")

        problematic = self.get_problematic_results()
        if problematic:
            lines.extend((f"REPORTS NEEDING ATTENTION ({len(problematic)})", "-" * 80))
            for i, result in enumerate(problematic[:20], 1):
                self.print_problematic_result(result, i, lines)

            if len(problematic) > 20:
                lines.append(f"\n... and {len(problematic) - 20} more reports")
            lines.append("")

        lines.extend(("=" * 80, "END OF REPORT", "=" * 80))

        return "\n".join(lines)

    @staticmethod
    def print_problematic_result(
        result: ExtractionResult, i: int, lines: list[str]
    ) -> None:
        lines.append(f"\n{i}. Source: {result.source_name}")
        if result.synthesized:
            lines.append("   (demo data)")
        if result.is_empty:
            lines.append(f"   {result.error}: {result.details}")
            return
        lines.extend(
            f"   - {p.parameter}: {p.value} {p.unit} ({p.status.value}, "
            f"normal {p.normal_range})"
            for p in result.abnormal_parameters()
        )

    def generate_json_report(self) -> dict[str, Any]:
        """Generate machine-readable JSON report."""
        return {
            "summary": self.get_summary(),
            "problematic_reports": [
                {
                    "source": r.source_name,
                    "synthesized": r.synthesized,
                    "empty": r.is_empty,
                    "abnormal": [p.to_json_dict() for p in r.abnormal_parameters()],
                }
                for r in self.get_problematic_results()
            ],
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Convert per-report summary to DataFrame for Excel export."""
        rows = []
        for result in self.results:
            counts = result.status_counts()
            rows.append(
                {
                    "Source": result.source_name,
                    "Synthesized": "Yes" if result.synthesized else "No",
                    "Parameters": len(result.parameters),
                    "Normal": counts["normal"],
                    "High": counts["high"],
                    "Low": counts["low"],
                    "Abnormal": ", ".join(
                        p.parameter for p in result.abnormal_parameters()
                    )
                    or "None",
                }
            )
        return pd.DataFrame(rows)

    def save_report(self, output_path: str | Path, output_format: str = "text") -> None:
        """
        Save report to file.

        Args:
            output_path: Path to save report
            output_format: 'text', 'json', or 'excel'
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        if output_format == "text":
            output_path.write_text(self.generate_text_report(), encoding="utf-8")
        elif output_format == "json":
            output_path.write_text(
                json.dumps(self.generate_json_report(), indent=2), encoding="utf-8"
            )
        elif output_format == "excel":
            df = self.to_dataframe()
            with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
                df.to_excel(writer, sheet_name="Summary", index=False)
        else:
            raise ValueError(
                f"Unsupported format: {output_format}. Use 'text', 'json', or 'excel'"
            )
