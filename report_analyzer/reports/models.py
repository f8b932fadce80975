from dataclasses import dataclass, field
from typing import Literal

from report_analyzer.extraction.models import ParameterValue
from report_analyzer.knowledge.models import Status
from report_analyzer.scoring.models import ChartDataItem, HealthStatus

ReportHealthFlag = Literal["normal", "needsAttention", "pending"]
ReportFileType = Literal["pdf", "image"]


@dataclass(frozen=True)
class Report:
    """A stored report; only ``raw_report`` feeds the analysis."""

    id: str
    user_id: str
    filename: str
    upload_date: str
    raw_report: str
    health_status: ReportHealthFlag = "pending"
    file_type: ReportFileType = "image"

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "filename": self.filename,
            "uploadDate": self.upload_date,
            "rawReport": self.raw_report,
            "healthStatus": self.health_status,
            "fileType": self.file_type,
        }


@dataclass(frozen=True)
class ReportAnalysis:
    """Everything derived from one report's text, recomputed on every view."""

    parameters: list[ParameterValue]
    health_score: float
    health_status: HealthStatus
    chart_data: list[ChartDataItem]
    status_counts: dict[Status, int] = field(default_factory=dict)
    descriptions: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        return {
            "healthScore": self.health_score,
            "healthStatus": {
                "label": self.health_status.label,
                "color": self.health_status.color,
                "summary": self.health_status.summary,
                "followUp": self.health_status.follow_up,
            },
            "statusCounts": {
                status.value: count for status, count in self.status_counts.items()
            },
            "parameters": [
                {**value.to_dict(), "description": self.descriptions.get(value.parameter, "")}
                for value in self.parameters
            ],
            "chartData": [item.to_dict() for item in self.chart_data],
        }
