"""Health scoring for extracted parameter values.

The per-parameter score is 100 inside the reference range and decays as
``100 * exp(-3 * d)`` outside it, where ``d`` is the distance to the nearest
range boundary expressed in range widths.
"""

import math
from collections.abc import Sequence

from report_analyzer.extraction.models import ParameterValue
from report_analyzer.knowledge.models import Status
from report_analyzer.scoring.models import ChartDataItem

DECAY_RATE = 3.0
MAX_SCORE = 100.0
ABNORMAL_SCORE = 50.0

_STATUS_COLORS = {
    Status.HIGH: "#ef4444",
    Status.LOW: "#3b82f6",
    Status.NORMAL: "#22c55e",
}


def calculate_normalized_value(value: float, min_value: float, max_value: float) -> float:
    """Score *value* against ``[min_value, max_value]`` on a 0-100 scale.

    A zero-width range scores 0 for any value off the single normal point.
    """
    if min_value <= value <= max_value:
        return MAX_SCORE
    width = max_value - min_value
    if width <= 0:
        return 0.0
    boundary = min_value if value < min_value else max_value
    deviation = abs(value - boundary) / width
    score = MAX_SCORE * math.exp(-DECAY_RATE * deviation)
    return max(0.0, min(MAX_SCORE, score))


def parameter_score(value: ParameterValue) -> float:
    """Contribution of one parameter to the health score."""
    if value.reference_range is not None:
        return calculate_normalized_value(
            value.value, value.reference_range.min, value.reference_range.max
        )
    if value.status is Status.NORMAL:
        return MAX_SCORE
    return ABNORMAL_SCORE


def calculate_health_score(values: Sequence[ParameterValue]) -> float:
    """Mean parameter score; an empty report scores 100."""
    if not values:
        return MAX_SCORE
    return sum(parameter_score(value) for value in values) / len(values)


def build_chart_data(values: Sequence[ParameterValue]) -> list[ChartDataItem]:
    return [
        ChartDataItem(
            name=value.name,
            value=value.value,
            unit=value.unit,
            status=value.status,
            normalized_value=parameter_score(value),
        )
        for value in values
    ]


def status_color(status: Status | str) -> str:
    try:
        return _STATUS_COLORS[Status(status)]
    except ValueError:
        return _STATUS_COLORS[Status.NORMAL]


def count_by_status(values: Sequence[ParameterValue]) -> dict[Status, int]:
    counts = {status: 0 for status in Status}
    for value in values:
        counts[value.status] += 1
    return counts
