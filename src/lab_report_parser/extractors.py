"""Extraction of health parameters from free-form report text."""

from __future__ import annotations

import logging
import math
import re
from typing import Any

from .domain import ExtractedParameter
from .models import ParameterDefinition
from .patterns import DEFAULT_CATALOG, Catalog

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lower-case text and collapse whitespace runs into single spaces."""
    return _WHITESPACE.sub(" ", text.lower()).strip()


def parse_value(raw: str | None) -> float | None:
    """
    Parse a captured reading.

    Returns:
        The value, or None when it is not numeric, not finite, zero or
        negative. Such readings are OCR noise, not lab values.
    """
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def format_value(value: float) -> str:
    """Render a reading the way it is reported ("13.5", "250000")."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def match_definition(definition: ParameterDefinition, text: str) -> float | None:
    """
    Try each alternative of a definition in order against normalized text.

    The first alternative that captures a valid reading wins.
    """
    for pattern in definition.patterns:
        match = pattern.search(text)
        if match is None:
            continue
        value = parse_value(match.group(1))
        if value is None:
            logger.debug(
                "Rejected reading %r for %s", match.group(1), definition.name
            )
            continue
        return value
    return None


def extract_parameters(
    raw_text: Any, catalog: Catalog | None = None
) -> list[ExtractedParameter]:
    """
    Extract and classify every recognizable parameter in report text.

    Args:
        raw_text: Text from OCR, PDF extraction or the demo generator
        catalog: Parameter definitions to scan for (default: DEFAULT_CATALOG)

    Returns:
        Parameters in catalog order, at most one per (name, value) pair.
        An empty list means nothing was recognized; it is not an error.
    """
    if not isinstance(raw_text, str) or not raw_text.strip():
        return []

    definitions = DEFAULT_CATALOG if catalog is None else catalog
    text = normalize_text(raw_text)
    parameters: list[ExtractedParameter] = []
    seen: set[tuple[str, float]] = set()

    for definition in definitions:
        value = match_definition(definition, text)
        if value is None:
            continue

        key = (definition.name, value)
        if key in seen:
            continue
        seen.add(key)

        status = definition.classify(value)
        logger.debug("Matched %s = %s (%s)", definition.name, value, status.value)
        parameters.append(
            ExtractedParameter(
                parameter=definition.name,
                value=format_value(value),
                unit=definition.unit,
                normal_range=definition.normal_range,
                status=status,
            )
        )

    logger.info("Extracted %d parameters from %d characters", len(parameters), len(text))
    return parameters
