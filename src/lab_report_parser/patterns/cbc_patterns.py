"""
Complete Blood Count Patterns.

This file contains the recognition rules for the complete blood count and the
white cell differential.

PARAMETERS EXTRACTED:
- Hemoglobin, RBC Count, WBC Count, PCV, MCV, MCH, MCHC, RDW, Platelet Count
- Neutrophils, Lymphocytes, Monocytes, Eosinophils, Basophils

MODIFICATION GUIDE:
Each entry is built with ``define()``:
1. ``name``: canonical parameter name shown to users
2. ``names``: regex of the name tokens, including synonyms. Wrap alternatives
   in word boundaries so short abbreviations do not fire inside other words.
3. ``units``: regex alternatives for unit tokens that may follow the reading
4. ``unit`` / ``normal_range``: declared metadata. The range string is parsed
   and drives classification, so "13.0-17.0", "<= 2.0" and "> 40" are all valid.
5. ``rescale``: rules converting alternative unit scales before classification

UNIT RESCALING (approximate, ambiguous at the boundaries):
- WBC Count: readings >= 100 are raw counts per cumm and are divided by 1000;
  smaller readings are already in thousands.
- Platelet Count: readings >= 1000 are raw counts (divided by 1000); readings
  below 10 are lakhs (multiplied by 100); anything else is in thousands.
- RBC Count: readings >= 100000 are raw counts (divided by 1,000,000).
"""

from __future__ import annotations

from ..models import UnitRescale
from .common import define

PERCENT = (r"%", r"percent\b")
PER_CUMM = r"(?:cells\s*)?/?\s*cumm\b"
PER_MICROLITRE = r"/\s*[uµμ]l\b"

# ============================================================================
# RED CELLS
# ============================================================================
HEMOGLOBIN = define(
    name="Hemoglobin",
    names=(
        r"(?<!corpuscular )(?<!cell )(?<!glycated )(?<!glycosylated )"
        r"\b(?:haemoglobin|hemoglobin|hgb|hb)\b"
    ),
    units=(r"g(?:m|ms)?\s*/\s*dl\b", r"g(?:m|ms)?\s*%"),
    unit="g/dL",
    normal_range="13.0-17.0",
)

RBC_COUNT = define(
    name="RBC Count",
    names=(
        r"\b(?:total\s)?(?:rbc|red blood cells?|red cell|erythrocytes?)"
        r"(?:\scount)?\b(?!\s(?:distribution|sedimentation))"
    ),
    units=(
        r"mill(?:ions?)?\s*/\s*(?:cumm|cu\.?\s?mm|mm3|[uµμ]l)\b",
        r"millions?\b",
        r"(?:x\s*)?10\^?6\s*/\s*[uµμ]l\b",
    ),
    unit="mill/cumm",
    normal_range="4.5-5.5",
    rescale=(UnitRescale(threshold=100_000, divisor=1_000_000),),
)

PCV = define(
    name="PCV",
    names=r"\b(?:pcv|packed cell volume|hct|haematocrit|hematocrit)\b",
    units=PERCENT,
    unit="%",
    normal_range="40.0-50.0",
)

MCV = define(
    name="MCV",
    names=r"\b(?:mcv|mean corpuscular volume|mean cell volume)\b",
    units=(r"fl\b", r"femtolit(?:re|er)s?\b", r"cu\.?\s?microns?\b"),
    unit="fL",
    normal_range="80.0-100.0",
)

MCH = define(
    name="MCH",
    names=(
        r"\b(?:mch|mean corpuscular hemoglobin|mean cell hemoglobin)\b"
        r"(?!\s*concentration)"
    ),
    units=(r"pg\b", r"picograms?\b"),
    unit="pg",
    normal_range="27.0-32.0",
)

MCHC = define(
    name="MCHC",
    names=(
        r"\b(?:mchc|mean corpuscular hemoglobin concentration"
        r"|mean cell hemoglobin concentration)\b"
    ),
    units=(r"g(?:m)?\s*/\s*dl\b", r"%"),
    unit="g/dL",
    normal_range="32.0-35.0",
)

RDW = define(
    name="RDW",
    names=r"\b(?:rdw(?:-cv)?|red cell distribution width)\b",
    units=PERCENT,
    unit="%",
    normal_range="11.5-14.5",
)

# ============================================================================
# WHITE CELLS AND PLATELETS
# ============================================================================
WBC_COUNT = define(
    name="WBC Count",
    names=(
        r"\b(?:(?:total\s)?(?:wbc|white blood cells?|white cell|leu[ck]ocytes?)"
        r"(?:\scount)?|tlc)\b"
    ),
    units=(
        PER_CUMM,
        PER_MICROLITRE,
        r"thou\s*/\s*mm3\b",
        r"thousands?\b",
        r"(?:x\s*)?10\^?3\s*/\s*[uµμ]l\b",
        r"(?:x\s*)?10\^?9\s*/\s*l\b",
    ),
    unit="thou/mm3",
    normal_range="4.0-10.0",
    rescale=(UnitRescale(threshold=100, divisor=1000),),
)

PLATELET_COUNT = define(
    name="Platelet Count",
    names=r"\b(?:platelet count|platelets?|plt)\b",
    units=(
        PER_CUMM,
        PER_MICROLITRE,
        r"lakhs?\b",
        r"thou\s*/\s*mm3\b",
        r"thousands?\b",
        r"(?:x\s*)?10\^?3\s*/\s*[uµμ]l\b",
        r"(?:x\s*)?10\^?9\s*/\s*l\b",
    ),
    unit="thou/mm3",
    normal_range="150.0-450.0",
    rescale=(
        UnitRescale(threshold=1000, divisor=1000),
        UnitRescale(threshold=10, multiplier=100, above=False),
    ),
)

# ============================================================================
# DIFFERENTIAL COUNT
# ============================================================================
NEUTROPHILS = define(
    name="Neutrophils",
    names=r"\b(?:segmented neutrophils|neutrophils?|polymorphs|neut)\b",
    units=PERCENT,
    unit="%",
    normal_range="40.0-80.0",
)

LYMPHOCYTES = define(
    name="Lymphocytes",
    names=r"\b(?:lymphocytes?|lymphs)\b",
    units=PERCENT,
    unit="%",
    normal_range="20.0-40.0",
)

MONOCYTES = define(
    name="Monocytes",
    names=r"\b(?:monocytes?|monos)\b",
    units=PERCENT,
    unit="%",
    normal_range="2.0-10.0",
)

EOSINOPHILS = define(
    name="Eosinophils",
    names=r"\b(?:eosinophils?|eos)\b",
    units=PERCENT,
    unit="%",
    normal_range="1.0-6.0",
)

BASOPHILS = define(
    name="Basophils",
    names=r"\b(?:basophils?|basos?)\b",
    units=PERCENT,
    unit="%",
    normal_range="<= 2.0",
)

# Catalog order, which is also output order
CBC_DEFINITIONS = (
    HEMOGLOBIN,
    RBC_COUNT,
    WBC_COUNT,
    PCV,
    MCV,
    MCH,
    MCHC,
    RDW,
    PLATELET_COUNT,
    NEUTROPHILS,
    LYMPHOCYTES,
    MONOCYTES,
    EOSINOPHILS,
    BASOPHILS,
)
