from report_analyzer.extraction.base import ExtractionStrategy
from report_analyzer.extraction.extractor import ParameterExtractor, extract_parameter_values
from report_analyzer.extraction.models import ParameterValue
from report_analyzer.extraction.strategies import (
    KnownParameterStrategy,
    LinePatternStrategy,
    TableRowStrategy,
)
from report_analyzer.knowledge.models import Status

__all__ = [
    "ExtractionStrategy",
    "KnownParameterStrategy",
    "LinePatternStrategy",
    "ParameterExtractor",
    "ParameterValue",
    "Status",
    "TableRowStrategy",
    "extract_parameter_values",
]
