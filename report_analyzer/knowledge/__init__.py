from report_analyzer.knowledge.models import (
    KnownParameter,
    ParameterInfo,
    ReferenceRange,
    Status,
    UnrecognizedParameter,
)
from report_analyzer.knowledge.parameters import (
    PARAMETER_INFO,
    REFERENCE_RANGES,
    classify_parameter,
    find_parameter,
    get_parameter_description,
    get_parameter_info,
    get_reference_range,
    known_keys,
    normalize_key,
)

__all__ = [
    "PARAMETER_INFO",
    "REFERENCE_RANGES",
    "KnownParameter",
    "ParameterInfo",
    "ReferenceRange",
    "Status",
    "UnrecognizedParameter",
    "classify_parameter",
    "find_parameter",
    "get_parameter_description",
    "get_parameter_info",
    "get_reference_range",
    "known_keys",
    "normalize_key",
]
