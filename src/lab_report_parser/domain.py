"""Domain models for extracted health parameters and extraction results."""

from __future__ import annotations

import math
from collections import Counter
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParameterStatus(StrEnum):
    """Classification of a reading against its reference range."""

    NORMAL = "normal"
    HIGH = "high"
    LOW = "low"


class ExtractedParameter(BaseModel):
    """A single health parameter recognized in report text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    parameter: str = Field(description="Canonical parameter name")
    value: str = Field(description="Reading as reported, rendered as a decimal")
    unit: str = Field(description="Declared unit of the parameter")
    normal_range: str = Field(
        alias="normalRange", description="Declared human-readable reference range"
    )
    status: ParameterStatus = Field(description="normal, high or low")

    @field_validator("value")
    @classmethod
    def value_must_be_positive(cls, v: str) -> str:
        """Reject readings that do not parse to a finite positive number."""
        try:
            number = float(v)
        except ValueError as e:
            raise ValueError(f"value is not numeric: {v!r}") from e
        if not math.isfinite(number) or number <= 0:
            raise ValueError(f"value must be a finite positive number: {v!r}")
        return v

    @property
    def numeric_value(self) -> float:
        return float(self.value)

    def is_abnormal(self) -> bool:
        return self.status is not ParameterStatus.NORMAL

    def to_json_dict(self) -> dict[str, str]:
        """Convert to the camelCase shape consumed by report viewers."""
        return self.model_dump(by_alias=True, mode="json")


class ExtractionResult(BaseModel):
    """Outcome of processing one report, ready to hand back to a caller."""

    source_name: str = Field(description="File name or label of the input")
    parameters: list[ExtractedParameter] = Field(
        default_factory=list, description="Recognized parameters in catalog order"
    )
    synthesized: bool = Field(
        default=False, description="True when the text came from the demo generator"
    )
    extracted_text: str = Field(default="", description="Excerpt of the source text")
    note: str = Field(default="", description="User-facing summary line")
    error: str | None = Field(default=None, description="Short error label")
    details: str | None = Field(default=None, description="Error explanation")
    suggestion: str | None = Field(default=None, description="What the user can do")

    @property
    def is_empty(self) -> bool:
        return not self.parameters

    def abnormal_parameters(self) -> list[ExtractedParameter]:
        """Return parameters classified high or low."""
        return [p for p in self.parameters if p.is_abnormal()]

    def status_counts(self) -> dict[str, int]:
        """Count parameters per status, always including every status."""
        counts = Counter(p.status.value for p in self.parameters)
        return {status.value: counts.get(status.value, 0) for status in ParameterStatus}

    def to_json_dict(self) -> dict[str, Any]:
        """
        Convert to the response shape of the upload endpoint.

        Successful results carry ``success``, ``parameters``, ``extractedText``
        and ``note``. Empty results carry ``error``, ``details``,
        ``extractedText`` and ``suggestion`` instead.
        """
        if self.is_empty:
            return {
                "source": self.source_name,
                "error": self.error,
                "details": self.details,
                "extractedText": self.extracted_text,
                "suggestion": self.suggestion,
            }
        return {
            "source": self.source_name,
            "success": True,
            "synthesized": self.synthesized,
            "parameters": [p.to_json_dict() for p in self.parameters],
            "extractedText": self.extracted_text,
            "note": self.note,
        }

    def to_rows(self) -> list[dict[str, str]]:
        """Flatten into one row per parameter for tabular export."""
        return [
            {
                "Source": self.source_name,
                "Parameter": p.parameter,
                "Value": p.value,
                "Unit": p.unit,
                "Normal Range": p.normal_range,
                "Status": p.status.value,
                "Synthesized": "Yes" if self.synthesized else "No",
            }
            for p in self.parameters
        ]
