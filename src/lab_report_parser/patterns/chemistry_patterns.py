"""
Chemistry, Lipid and Inflammation Marker Patterns.

This file contains the recognition rules for the biochemistry part of a
report: inflammation markers, the lipid profile, glucose and ESR.

PARAMETERS EXTRACTED:
- C-Reactive Protein, ESR
- Total Cholesterol, LDL Cholesterol, HDL Cholesterol, Triglycerides
- Blood Glucose

MATCHING BEHAVIOR:
- Total Cholesterol skips "LDL cholesterol" / "HDL cholesterol" labels so a
  lipid panel that lists fractions first is not misread.
- HDL Cholesterol skips "non-HDL cholesterol".
- Upper-limit-only parameters (cholesterol, LDL, triglycerides, ESR, ...) are
  declared with "< N" ranges and can only classify normal or high. HDL is
  declared "> 40" and can only classify normal or low.

See cbc_patterns.py for the modification guide.
"""

from __future__ import annotations

from .common import define

MG_PER_DL = (r"mg\s*/\s*dl\b", r"mg\s*%")

# ============================================================================
# INFLAMMATION MARKERS
# ============================================================================
C_REACTIVE_PROTEIN = define(
    name="C-Reactive Protein",
    names=r"\b(?:c-?\s?reactive protein|hs-?crp|crp)\b",
    units=MG_PER_DL,
    unit="mg/dL",
    normal_range="0.0-5.0",
)

ESR = define(
    name="ESR",
    names=r"\b(?:esr|erythrocyte sedimentation rate)\b",
    units=(
        r"mm\s*/\s*(?:1st\s*)?h(?:ou)?r\b",
        r"mm\s+(?:in|at)\s+(?:the\s+)?(?:1st|first|one)\s+h(?:ou)?r\b",
    ),
    unit="mm/hr",
    normal_range="<= 20",
)

# ============================================================================
# LIPID PROFILE
# ============================================================================
TOTAL_CHOLESTEROL = define(
    name="Total Cholesterol",
    names=(
        r"\b(?:total cholesterol|serum cholesterol"
        r"|(?<!ldl )(?<!hdl )(?<!ldl-)(?<!hdl-)cholesterol)\b"
    ),
    units=MG_PER_DL,
    unit="mg/dL",
    normal_range="< 200",
)

LDL_CHOLESTEROL = define(
    name="LDL Cholesterol",
    names=r"\b(?:ldl|low density lipoprotein)\b",
    units=MG_PER_DL,
    unit="mg/dL",
    normal_range="< 100",
)

HDL_CHOLESTEROL = define(
    name="HDL Cholesterol",
    names=r"(?<!non-)(?<!non )\b(?:hdl|high density lipoprotein)\b",
    units=MG_PER_DL,
    unit="mg/dL",
    normal_range="> 40",
)

TRIGLYCERIDES = define(
    name="Triglycerides",
    names=r"\b(?:triglycerides?|tgl?)\b",
    units=MG_PER_DL,
    unit="mg/dL",
    normal_range="< 150",
)

# ============================================================================
# GLUCOSE
# ============================================================================
BLOOD_GLUCOSE = define(
    name="Blood Glucose",
    names=(
        r"\b(?:fasting blood sugar|random blood sugar|blood glucose"
        r"|glucose|blood sugar|sugar|fbs|rbs)\b"
    ),
    units=MG_PER_DL,
    unit="mg/dL",
    normal_range="70-100",
)

# Catalog order, which is also output order
CHEMISTRY_DEFINITIONS = (
    C_REACTIVE_PROTEIN,
    TOTAL_CHOLESTEROL,
    BLOOD_GLUCOSE,
    LDL_CHOLESTEROL,
    HDL_CHOLESTEROL,
    TRIGLYCERIDES,
    ESR,
)
