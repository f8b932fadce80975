"""Report-level analysis built on the extraction and scoring core."""

from report_analyzer.extraction.extractor import extract_parameter_values
from report_analyzer.extraction.models import ParameterValue
from report_analyzer.knowledge.parameters import find_parameter, get_parameter_description
from report_analyzer.reports.models import Report, ReportAnalysis, ReportHealthFlag
from report_analyzer.scoring.bands import get_health_status
from report_analyzer.scoring.scorer import (
    build_chart_data,
    calculate_health_score,
    count_by_status,
)

ATTENTION_INDICATORS: tuple[str, ...] = (
    "high",
    "low",
    "elevated",
    "decreased",
    "abnormal",
    "attention",
    "concerning",
    "critical",
    "urgent",
    "warning",
)


def determine_health_status(raw_report: str) -> ReportHealthFlag:
    """Coarse flag stored with a report at upload time.

    Any attention word anywhere in the text flags the report; this is a
    plain substring check and is independent of the health score.
    """
    lowered = raw_report.lower()
    if any(indicator in lowered for indicator in ATTENTION_INDICATORS):
        return "needsAttention"
    return "normal"


def describe_parameter(value: ParameterValue) -> str:
    """Knowledge-base description by key first, then by the name found in text."""
    info = find_parameter(value.parameter) or find_parameter(value.name)
    if info is not None:
        return info.description
    return get_parameter_description(value.name)


def analyze_report(report: Report | str) -> ReportAnalysis:
    """Extract, score and band a report's text."""
    text = report.raw_report if isinstance(report, Report) else report
    parameters = extract_parameter_values(text)
    score = calculate_health_score(parameters)
    return ReportAnalysis(
        parameters=parameters,
        health_score=score,
        health_status=get_health_status(score),
        chart_data=build_chart_data(parameters),
        status_counts=count_by_status(parameters),
        descriptions={value.parameter: describe_parameter(value) for value in parameters},
    )
