"""
Shared building blocks for parameter recognition patterns.

Every catalog entry is compiled into two alternatives that are tried in order:

1. STRICT: parameter name, a lazy gap of at most ``STRICT_WINDOW`` tokens,
   the reading, then a unit token, a flag word or an inline reference range.
   The gap holds non-digits and whole inline ranges or limits, so tabular OCR
   output can put the range before the reading ("Hemoglobin 13.0-17.0 14.5
   g/dL") but the gap never steps over another reading.
2. LOOSE: parameter name, at most ``LOOSE_WINDOW`` non-digit characters, the
   reading. Used when a report omits units entirely.

Patterns run against normalized text (lower-case, single spaces), but are
compiled case-insensitively so they also work on raw text.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from ..models import ParameterDefinition, UnitRescale

STRICT_WINDOW = 80
LOOSE_WINDOW = 30

# A whole reading, never a prefix of a longer number. A minus sign is only
# kept when it starts a new token, so "Hb -5" captures -5 (rejected later)
# while "Hb-14.5" captures 14.5.
VALUE = r"(?<![\d.])(?<!\s-)(?<!:-)((?:(?<=[\s:])-)?\d+(?:\.\d+)?)(?!\.?\d)"

# Tokens that may follow a reading regardless of the parameter
FLAG_WORDS = r"(?:low|high|normal|abnormal|elevated)\b"
INLINE_RANGE = r"\d+(?:\.\d+)?\s*-\s*\d+(?:\.\d+)?"
INLINE_LIMIT = r"[<>≤≥]=?\s*\d+(?:\.\d+)?"

# What may sit between a parameter name and its reading
STRICT_GAP = rf"(?:\D|{INLINE_RANGE}|{INLINE_LIMIT})"

_FLAGS = re.IGNORECASE | re.DOTALL


def strict_pattern(names: str, units: Sequence[str]) -> re.Pattern[str]:
    """Compile the name + reading + unit/flag/range alternative."""
    trailer = "|".join([*units, FLAG_WORDS, INLINE_RANGE, INLINE_LIMIT])
    return re.compile(
        rf"{names}{STRICT_GAP}{{0,{STRICT_WINDOW}}}?{VALUE}\s*(?:{trailer})", _FLAGS
    )


def loose_pattern(names: str) -> re.Pattern[str]:
    """Compile the name + nearby reading alternative."""
    return re.compile(rf"{names}\D{{0,{LOOSE_WINDOW}}}?{VALUE}", _FLAGS)


def define(
    name: str,
    names: str,
    units: Sequence[str],
    unit: str,
    normal_range: str,
    rescale: tuple[UnitRescale, ...] = (),
) -> ParameterDefinition:
    """Build a catalog entry with its strict and loose alternatives."""
    return ParameterDefinition(
        name=name,
        patterns=(strict_pattern(names, units), loose_pattern(names)),
        unit=unit,
        normal_range=normal_range,
        rescale=rescale,
    )
