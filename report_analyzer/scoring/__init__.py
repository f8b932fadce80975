from report_analyzer.scoring.bands import get_health_status
from report_analyzer.scoring.models import ChartDataItem, HealthStatus
from report_analyzer.scoring.scorer import (
    build_chart_data,
    calculate_health_score,
    calculate_normalized_value,
    count_by_status,
    status_color,
)

__all__ = [
    "ChartDataItem",
    "HealthStatus",
    "build_chart_data",
    "calculate_health_score",
    "calculate_normalized_value",
    "count_by_status",
    "get_health_status",
    "status_color",
]
