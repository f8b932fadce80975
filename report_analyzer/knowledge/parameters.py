"""Static knowledge base of common blood parameters.

Both tables are read-only views built once at import time and share the same
key order. Lookups by name are case-insensitive and match either the canonical
key or the canonical display name, nothing fuzzier.
"""

import re
from types import MappingProxyType
from typing import Mapping

from report_analyzer.knowledge.models import (
    KnownParameter,
    ParameterInfo,
    ParameterMatch,
    ReferenceRange,
    UnrecognizedParameter,
)

_GENERIC_DESCRIPTION = (
    "{name} is a blood test parameter that provides information about your "
    "health. Abnormal levels may indicate health issues that should be "
    "discussed with your healthcare provider."
)

_KEY_SEPARATOR_RE = re.compile(r"[-\s]")

PARAMETER_INFO: Mapping[str, ParameterInfo] = MappingProxyType({
    info.key: info
    for info in (
        ParameterInfo(
            key="glucose",
            name="Glucose",
            description=(
                "Glucose is a type of sugar and the main source of energy for your "
                "body. High levels can indicate diabetes or prediabetes, while low "
                "levels (hypoglycemia) might suggest issues with diet, certain "
                "medications, or other health conditions."
            ),
        ),
        ParameterInfo(
            key="cholesterol",
            name="Cholesterol",
            description=(
                "Cholesterol is a fatty substance essential for building cells. High "
                "total cholesterol increases the risk of heart disease and stroke. "
                "It's divided into 'good' cholesterol (HDL) and 'bad' cholesterol (LDL)."
            ),
        ),
        ParameterInfo(
            key="hdl",
            name="HDL Cholesterol",
            description=(
                "High-Density Lipoprotein (HDL) is known as 'good' cholesterol because "
                "it helps remove other forms of cholesterol from the bloodstream. "
                "Higher levels of HDL are generally better for heart health."
            ),
        ),
        ParameterInfo(
            key="ldl",
            name="LDL Cholesterol",
            description=(
                "Low-Density Lipoprotein (LDL) is known as 'bad' cholesterol because "
                "high levels can lead to plaque buildup in the arteries, increasing "
                "the risk of heart disease and stroke."
            ),
        ),
        ParameterInfo(
            key="triglycerides",
            name="Triglycerides",
            description=(
                "Triglycerides are a type of fat in the blood. High levels combined "
                "with high LDL or low HDL can increase the risk of heart attack and "
                "stroke."
            ),
        ),
        ParameterInfo(
            key="hba1c",
            name="HbA1c",
            description=(
                "Hemoglobin A1c measures your average blood sugar levels over the past "
                "2-3 months. It's used to diagnose diabetes and monitor how well "
                "diabetes is being managed."
            ),
        ),
        ParameterInfo(
            key="tsh",
            name="TSH",
            description=(
                "Thyroid Stimulating Hormone helps control the thyroid gland. Abnormal "
                "levels can indicate an overactive thyroid (hyperthyroidism) or "
                "underactive thyroid (hypothyroidism)."
            ),
        ),
        ParameterInfo(
            key="wbc",
            name="White Blood Cell Count",
            description=(
                "White blood cells help fight infection. High counts often indicate "
                "infection, inflammation, or sometimes leukemia. Low counts can "
                "suggest bone marrow problems or autoimmune disorders."
            ),
        ),
        ParameterInfo(
            key="rbc",
            name="Red Blood Cell Count",
            description=(
                "Red blood cells carry oxygen throughout the body. Low counts may "
                "indicate anemia, while high counts can be associated with "
                "dehydration or other conditions."
            ),
        ),
        ParameterInfo(
            key="hemoglobin",
            name="Hemoglobin",
            description=(
                "Hemoglobin is the protein in red blood cells that carries oxygen. Low "
                "levels can indicate anemia or blood loss, while high levels might "
                "suggest lung disease or living at high altitudes."
            ),
        ),
        ParameterInfo(
            key="creatinine",
            name="Creatinine",
            description=(
                "Creatinine is a waste product from normal muscle breakdown. High "
                "levels in the blood can indicate kidney problems."
            ),
        ),
        ParameterInfo(
            key="potassium",
            name="Potassium",
            description=(
                "Potassium helps your nerves and muscles function properly. Both high "
                "and low levels can affect heart rhythm and muscle function."
            ),
        ),
        ParameterInfo(
            key="sodium",
            name="Sodium",
            description=(
                "Sodium helps maintain fluid balance and is essential for nerve and "
                "muscle function. Abnormal levels can indicate dehydration, kidney "
                "problems, or hormonal imbalances."
            ),
        ),
        ParameterInfo(
            key="alt",
            name="ALT (Alanine Transaminase)",
            description=(
                "ALT is an enzyme found primarily in the liver. Elevated levels can "
                "indicate liver damage from various causes including medications, "
                "alcohol, or hepatitis."
            ),
        ),
        ParameterInfo(
            key="ast",
            name="AST (Aspartate Aminotransferase)",
            description=(
                "AST is an enzyme found in the liver, heart, and muscles. Elevated "
                "levels can indicate liver damage, heart attack, or muscle injury."
            ),
        ),
    )
})

REFERENCE_RANGES: Mapping[str, ReferenceRange] = MappingProxyType({
    "glucose": ReferenceRange(min=70, max=100, unit="mg/dL"),
    "cholesterol": ReferenceRange(min=125, max=200, unit="mg/dL"),
    "hdl": ReferenceRange(min=40, max=60, unit="mg/dL"),
    "ldl": ReferenceRange(min=0, max=100, unit="mg/dL"),
    "triglycerides": ReferenceRange(min=0, max=150, unit="mg/dL"),
    "hba1c": ReferenceRange(min=4.0, max=5.6, unit="%"),
    "tsh": ReferenceRange(min=0.4, max=4.0, unit="mIU/L"),
    "wbc": ReferenceRange(min=4.5, max=11.0, unit="10³/μL"),
    "rbc": ReferenceRange(min=4.5, max=5.9, unit="10⁶/μL"),
    "hemoglobin": ReferenceRange(min=13.5, max=17.5, unit="g/dL"),
    "creatinine": ReferenceRange(min=0.6, max=1.2, unit="mg/dL"),
    "potassium": ReferenceRange(min=3.5, max=5.0, unit="mmol/L"),
    "sodium": ReferenceRange(min=135, max=145, unit="mmol/L"),
    "alt": ReferenceRange(min=7, max=56, unit="U/L"),
    "ast": ReferenceRange(min=10, max=40, unit="U/L"),
})

_BY_LOWER_NAME: Mapping[str, ParameterInfo] = MappingProxyType({
    info.name.lower(): info for info in PARAMETER_INFO.values()
})


def normalize_key(name: str) -> str:
    """Derive a parameter key from display text: lower-case, spaces/dashes -> '_'."""
    return _KEY_SEPARATOR_RE.sub("_", name.strip().lower())


def known_keys() -> tuple[str, ...]:
    return tuple(PARAMETER_INFO)


def get_parameter_info(key: str) -> ParameterInfo | None:
    return PARAMETER_INFO.get(key)


def get_reference_range(key: str) -> ReferenceRange | None:
    return REFERENCE_RANGES.get(key)


def find_parameter(name_or_key: str) -> ParameterInfo | None:
    """Return the entry whose key or display name equals *name_or_key*.

    The comparison is case-insensitive; ``None`` means the name is unknown.
    """
    lowered = name_or_key.strip().lower()
    info = PARAMETER_INFO.get(lowered)
    if info is not None:
        return info
    return _BY_LOWER_NAME.get(lowered)


def classify_parameter(raw_name: str, key: str | None = None) -> ParameterMatch:
    """Resolve a name found in report text against the knowledge base.

    *key* defaults to the key derived from *raw_name*. A known match carries
    the canonical key; an unrecognized one keeps the derived key.
    """
    derived = key if key is not None else normalize_key(raw_name)
    info = PARAMETER_INFO.get(derived) or find_parameter(raw_name)
    if info is not None:
        return KnownParameter(key=info.key, raw_name=raw_name)
    return UnrecognizedParameter(key=derived, raw_name=raw_name)


def get_parameter_description(name_or_key: str) -> str:
    """Return the canonical description, or a generic one for unknown names."""
    info = find_parameter(name_or_key)
    if info is not None:
        return info.description
    return _GENERIC_DESCRIPTION.format(name=name_or_key)
