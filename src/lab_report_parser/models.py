"""Data models and configuration for the lab report parser."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace

from .domain import ParameterStatus
from .exceptions import ConfigurationError

_TWO_SIDED_RANGE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*-\s*(\d+(?:\.\d+)?)\s*$")
_ONE_SIDED_RANGE = re.compile(r"^\s*(<=|>=|≤|≥|<|>)\s*(\d+(?:\.\d+)?)\s*$")


@dataclass(frozen=True)
class ReferenceRange:
    """Numeric bounds parsed from a declared normal range string."""

    low: float | None = None
    high: float | None = None
    low_inclusive: bool = True
    high_inclusive: bool = True

    @classmethod
    def parse(cls, text: str) -> ReferenceRange:
        """
        Parse a declared range such as ``"13.0-17.0"``, ``"< 200"`` or ``"> 40"``.

        Two-sided ranges include both bounds. ``<`` and ``>`` exclude the bound,
        ``<=``/``>=`` (or ``≤``/``≥``) include it.

        Raises:
            ConfigurationError: If the text is not a recognizable range
        """
        match = _TWO_SIDED_RANGE.match(text)
        if match:
            low, high = float(match.group(1)), float(match.group(2))
            if low > high:
                raise ConfigurationError(
                    f"Lower bound exceeds upper bound in range: {text!r}"
                )
            return cls(low=low, high=high)

        match = _ONE_SIDED_RANGE.match(text)
        if match:
            operator, bound = match.group(1), float(match.group(2))
            if operator in {"<", "<=", "≤"}:
                return cls(high=bound, high_inclusive=operator != "<")
            return cls(low=bound, low_inclusive=operator != ">")

        raise ConfigurationError(f"Unrecognized reference range: {text!r}")

    def classify(self, value: float) -> ParameterStatus:
        """Classify a value; bounds that are not declared never participate."""
        if self.low is not None and (
            value < self.low or (value == self.low and not self.low_inclusive)
        ):
            return ParameterStatus.LOW
        if self.high is not None and (
            value > self.high or (value == self.high and not self.high_inclusive)
        ):
            return ParameterStatus.HIGH
        return ParameterStatus.NORMAL


@dataclass(frozen=True)
class UnitRescale:
    """Rule converting a reading from an alternative unit scale to the declared one."""

    threshold: float
    multiplier: float = 1.0
    divisor: float = 1.0
    above: bool = True  # apply when value >= threshold, else when value < threshold

    def applies_to(self, value: float) -> bool:
        return value >= self.threshold if self.above else value < self.threshold

    def apply(self, value: float) -> float:
        return value * self.multiplier / self.divisor


@dataclass(frozen=True)
class ParameterDefinition:
    """Catalog entry pairing recognition patterns with classification metadata."""

    name: str
    patterns: tuple[re.Pattern[str], ...]
    unit: str
    normal_range: str
    rescale: tuple[UnitRescale, ...] = ()
    reference: ReferenceRange = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "reference", ReferenceRange.parse(self.normal_range))

    def rescale_value(self, value: float) -> float:
        """Apply the first matching rescale rule, if any."""
        for rule in self.rescale:
            if rule.applies_to(value):
                return rule.apply(value)
        return value

    def classify(self, value: float) -> ParameterStatus:
        return self.reference.classify(self.rescale_value(value))

    def with_range(self, normal_range: str) -> ParameterDefinition:
        """Return a copy with a different declared normal range."""
        return replace(self, normal_range=normal_range)

    def with_patterns(self, *patterns: re.Pattern[str]) -> ParameterDefinition:
        """Return a copy with additional alternatives appended."""
        return replace(self, patterns=self.patterns + patterns)


@dataclass(frozen=True)
class ExtractionSettings:
    """Limits applied by the report processor around the extraction engine."""

    max_file_size: int = 10 * 1024 * 1024
    min_text_length: int = 20  # shorter text counts as a failed extraction
    excerpt_length: int = 1000
    empty_excerpt_length: int = 500
    nudge_demo_values: bool = True


# Input formats accepted by the processor
TEXT_SUFFIXES = frozenset({".txt", ".text"})
SUPPORTED_SUFFIXES = TEXT_SUFFIXES | frozenset(
    {".pdf", ".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp", ".webp"}
)

# Output column order for tabular exports
OUTPUT_COLUMNS = [
    "Source",
    "Parameter",
    "Value",
    "Unit",
    "Normal Range",
    "Status",
    "Synthesized",
]
