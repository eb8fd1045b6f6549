"""
Catalog assembly and reference range configuration.

The catalog is a single table keyed by canonical parameter name. Registering
a second definition under an existing name appends its patterns as further
alternatives rather than adding a near-duplicate entry, so each parameter is
scanned once with an explicit, ordered list of alternatives.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from ..exceptions import ConfigurationError
from ..models import ParameterDefinition
from .cbc_patterns import CBC_DEFINITIONS
from .chemistry_patterns import CHEMISTRY_DEFINITIONS

logger = logging.getLogger(__name__)

Catalog = tuple[ParameterDefinition, ...]


class CatalogBuilder:
    """Ordered registry of parameter definitions keyed by canonical name."""

    def __init__(self) -> None:
        self._definitions: dict[str, ParameterDefinition] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def register(self, definition: ParameterDefinition) -> CatalogBuilder:
        """Add a definition, merging patterns into an existing entry of the same name."""
        existing = self._definitions.get(definition.name)
        if existing is None:
            self._definitions[definition.name] = definition
        else:
            logger.debug(
                "Merging %d alternative pattern(s) into %s",
                len(definition.patterns),
                definition.name,
            )
            self._definitions[definition.name] = existing.with_patterns(
                *definition.patterns
            )
        return self

    def register_all(self, definitions: Iterable[ParameterDefinition]) -> CatalogBuilder:
        for definition in definitions:
            self.register(definition)
        return self

    def override_range(self, name: str, normal_range: str) -> CatalogBuilder:
        """
        Replace the declared normal range of a registered parameter.

        Raises:
            ConfigurationError: If the parameter is unknown or the range invalid
        """
        if name not in self._definitions:
            known = ", ".join(self._definitions)
            raise ConfigurationError(
                f"Unknown parameter in range overrides: {name!r}. Known: {known}"
            )
        self._definitions[name] = self._definitions[name].with_range(normal_range)
        return self

    def build(self) -> Catalog:
        """Return the catalog as an immutable tuple in registration order."""
        return tuple(self._definitions.values())


def build_catalog(range_overrides: Mapping[str, str] | None = None) -> Catalog:
    """Build the default catalog, optionally with reference ranges replaced."""
    builder = CatalogBuilder().register_all(CBC_DEFINITIONS)
    builder.register_all(CHEMISTRY_DEFINITIONS)

    for name, normal_range in (range_overrides or {}).items():
        logger.info("Overriding reference range for %s: %s", name, normal_range)
        builder.override_range(name, normal_range)

    return builder.build()


def load_range_overrides(path: str | Path) -> dict[str, str]:
    """
    Read reference range overrides from a JSON object of name -> range.

    Example file::

        {"Hemoglobin": "12.0-16.0", "Total Cholesterol": "< 190"}

    Raises:
        ConfigurationError: If the file is missing, not JSON, or not a mapping
            of strings to strings
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigurationError(f"Range overrides file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in range overrides {path}: {e}") from e

    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ConfigurationError(
            f"Range overrides must map parameter names to range strings: {path}"
        )
    return data


DEFAULT_CATALOG: Catalog = build_catalog()
