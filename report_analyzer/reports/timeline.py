"""Report timeline: a few headline parameters per report and their change over time.

Headline values come from a shallow line scan, not the extraction passes.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

from report_analyzer.knowledge.models import Status
from report_analyzer.reports.models import Report

TIMELINE_PARAMETERS: tuple[str, ...] = (
    "glucose",
    "cholesterol",
    "hdl",
    "ldl",
    "triglycerides",
    "hba1c",
)
MAX_KEY_PARAMETERS = 3
TREND_THRESHOLD_PERCENT = 5.0

_VALUE_AFTER_COLON_RE = re.compile(r":\s*([0-9.]+)")

TrendDirection = Literal["up", "down", "flat"]


@dataclass(frozen=True)
class KeyParameter:
    name: str
    value: str
    status: Status

    @property
    def numeric_value(self) -> float | None:
        try:
            return float(self.value)
        except ValueError:
            return None


@dataclass(frozen=True)
class ParameterTrend:
    name: str
    diff: float
    percent_diff: float
    direction: TrendDirection


@dataclass(frozen=True)
class TimelineEntry:
    report: Report
    key_parameters: list[KeyParameter]
    previous_report: Report | None = None
    trends: list[ParameterTrend] = field(default_factory=list)


def extract_key_parameters(report_text: str) -> list[KeyParameter]:
    """Pick up to three headline parameters from the first line mentioning each."""
    lines = report_text.lower().split("\n")
    parameters: list[KeyParameter] = []
    for key in TIMELINE_PARAMETERS:
        line = next((candidate for candidate in lines if key in candidate), None)
        if line is None:
            continue
        if "high" in line or "elevated" in line:
            status = Status.HIGH
        elif "low" in line or "decreased" in line:
            status = Status.LOW
        else:
            status = Status.NORMAL
        value_match = _VALUE_AFTER_COLON_RE.search(line)
        parameters.append(
            KeyParameter(
                name=key.capitalize(),
                value=value_match.group(1) if value_match else "N/A",
                status=status,
            )
        )
    return parameters[:MAX_KEY_PARAMETERS]


def compare_key_parameters(
    current: Sequence[KeyParameter],
    previous: Sequence[KeyParameter],
) -> list[ParameterTrend]:
    """Change of each parameter present, with a numeric value, in both reports."""
    previous_by_name = {param.name: param for param in previous}
    trends: list[ParameterTrend] = []
    for param in current:
        before = previous_by_name.get(param.name)
        if before is None:
            continue
        now_value = param.numeric_value
        before_value = before.numeric_value
        if now_value is None or before_value is None or before_value == 0:
            continue
        diff = now_value - before_value
        percent_diff = diff / before_value * 100
        if diff > 0 and abs(percent_diff) > TREND_THRESHOLD_PERCENT:
            direction: TrendDirection = "up"
        elif diff < 0 and abs(percent_diff) > TREND_THRESHOLD_PERCENT:
            direction = "down"
        else:
            direction = "flat"
        trends.append(
            ParameterTrend(
                name=param.name,
                diff=diff,
                percent_diff=percent_diff,
                direction=direction,
            )
        )
    return trends


def _upload_time(report: Report) -> datetime:
    uploaded = datetime.fromisoformat(report.upload_date.replace("Z", "+00:00"))
    if uploaded.tzinfo is None:
        return uploaded.replace(tzinfo=timezone.utc)
    return uploaded


def build_timeline(reports: Sequence[Report]) -> list[TimelineEntry]:
    """Newest report first, each compared against the next older one."""
    ordered = sorted(reports, key=_upload_time, reverse=True)
    entries: list[TimelineEntry] = []
    for index, report in enumerate(ordered):
        previous = ordered[index + 1] if index + 1 < len(ordered) else None
        key_parameters = extract_key_parameters(report.raw_report)
        trends = (
            compare_key_parameters(
                key_parameters, extract_key_parameters(previous.raw_report)
            )
            if previous is not None
            else []
        )
        entries.append(
            TimelineEntry(
                report=report,
                key_parameters=key_parameters,
                previous_report=previous,
                trends=trends,
            )
        )
    return entries
