"""
Parameter recognition patterns and the catalog built from them.

This package organizes the pattern catalog by report panel. Each panel module
contains:
- Parameter definitions (name tokens, unit tokens, declared unit and range)
- Unit rescaling rules where reports use more than one scale
- Documentation and examples

PATTERN MODULES:
- common: compilation of strict and loose alternatives
- cbc_patterns: complete blood count and differential count
- chemistry_patterns: lipid profile, glucose, CRP and ESR
- catalog: ordered registry, reference range overrides, DEFAULT_CATALOG
"""

from .catalog import (
    DEFAULT_CATALOG,
    Catalog,
    CatalogBuilder,
    build_catalog,
    load_range_overrides,
)
from .cbc_patterns import CBC_DEFINITIONS
from .chemistry_patterns import CHEMISTRY_DEFINITIONS
from .common import LOOSE_WINDOW, STRICT_WINDOW, define, loose_pattern, strict_pattern

__all__ = [
    "CBC_DEFINITIONS",
    "CHEMISTRY_DEFINITIONS",
    "DEFAULT_CATALOG",
    "LOOSE_WINDOW",
    "STRICT_WINDOW",
    "Catalog",
    "CatalogBuilder",
    "build_catalog",
    "define",
    "load_range_overrides",
    "loose_pattern",
    "strict_pattern",
]
